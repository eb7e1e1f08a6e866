# portkey/domains/usr/crud.py

"""
CRUD operations for the 'usr' domain.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import HTTPException, status

from portkey.core.crud_base import CRUDBase
from . import models as usr_models
from . import schemas as usr_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. profiles table CRUD
# =============================================================================
class CRUDUser(CRUDBase[usr_models.User, usr_schemas.UserSync, usr_schemas.UserRoleUpdate]):
    def __init__(self):
        super().__init__(model=usr_models.User)

    async def get_by_email(self, db: AsyncSession, *, email: str) -> Optional[usr_models.User]:
        """Looks up a profile by e-mail."""
        return await self.get_by_attribute(db, attribute="email", value=email)

    async def sync_user(self, db: AsyncSession, *, obj_in: usr_schemas.UserSync) -> usr_models.User:
        """
        Creates or refreshes the profile for an identity-provider user.

        New profiles start with the client role. An existing profile keeps its
        role; only e-mail, name and avatar are overwritten.
        """
        db_user = await self.get(db, obj_in.uuid)
        if db_user:
            db_user.email = obj_in.email
            db_user.full_name = obj_in.full_name
            db_user.avatar_url = obj_in.avatar_url
            action = "Updated"
        else:
            db_user = usr_models.User(
                id=obj_in.uuid,
                email=obj_in.email,
                full_name=obj_in.full_name,
                avatar_url=obj_in.avatar_url,
                role=usr_models.UserRole.CLIENT,
            )
            action = "Created"

        db.add(db_user)
        await db.commit()
        await db.refresh(db_user)
        logger.info("%s profile %s (%s)", action, db_user.id, db_user.email)
        return db_user

    async def get_multi_newest(
        self, db: AsyncSession, *, skip: int = 0, limit: int = 100
    ) -> List[usr_models.User]:
        """All profiles, newest first."""
        return await self.get_filtered(
            db, order_by_field="created_at", order_desc=True, skip=skip, limit=limit
        )

    async def update_role(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        role: usr_models.UserRole,
        acting_user: usr_models.User,
    ) -> usr_models.User:
        db_user = await self.get(db, user_id)
        if not db_user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User not found: {user_id}")
        if db_user.id == acting_user.id and role != usr_models.UserRole.ADMIN:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Admins cannot remove their own admin role."
            )
        return await self.update(db, db_obj=db_user, obj_in={"role": role})


user = CRUDUser()
