# portkey/core/__init__.py

"""
Core components shared by every domain.

- `config.py`: application settings (Pydantic Settings).
- `database.py`: async engine, session factory and session dependency.
- `crud_base.py`: generic async CRUD base class.
- `security.py`: JWT verification and role-based access dependencies.
- `dependencies.py`: re-exports used by the routers.
"""

__all__ = []
