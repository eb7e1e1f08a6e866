# portkey/core/dependencies.py

"""
Dependency-injection helpers shared by the routers.

- Database session (get_db_session).
- Current user and admin resolution (re-exported from security.py).
"""

from portkey.core.database import get_session

# flake8: noqa
from portkey.core.security import (
    create_access_token,
    ensure_owner_or_admin,
    get_current_user_from_token,
    get_current_admin_user,
)

# alias of get_session: routes and the auth check share one session per request
get_db_session = get_session
