# portkey/domains/usr/__init__.py

"""
'usr' domain package of the PortKey API.

Holds the profile records mirrored from the identity provider and the
role-based access data the other domains rely on.

Submodules:
- `models.py`: SQLModel table definitions (profiles).
- `schemas.py`: request and response models (sync payload, role update).
- `crud.py`: async profile sync (upsert) and role management.
- `routers.py`: FastAPI endpoints under /api/users.
"""

__title__ = "PortKey User Domain"
__description__ = "Mirrors identity-provider users as profiles and manages their roles."
__version__ = "0.1.0"
__all__ = []
