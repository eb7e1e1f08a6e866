# portkey/domains/usr/routers.py

"""
API endpoints for the 'usr' domain (profile sync and role management).
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from portkey.core import dependencies as deps

from . import crud as usr_crud
from . import models as usr_models
from . import schemas as usr_schemas


router = APIRouter(
    tags=["User Management"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. Profile sync
# =============================================================================
@router.post("/sync", response_model=usr_schemas.UserRead, summary="Sync identity-provider user")
async def sync_user(
    user_in: usr_schemas.UserSync,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    Called by the frontend after every login. Creates the profile on first
    sight and refreshes e-mail, name and avatar afterwards.
    """
    return await usr_crud.user.sync_user(db, obj_in=user_in)


@router.get("/me", response_model=usr_schemas.UserRead, summary="Current user profile")
async def read_current_user(
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    return current_user


# =============================================================================
# 2. Administration
# =============================================================================
@router.get("", response_model=List[usr_schemas.UserRead], summary="List all profiles")
async def read_users(
    db: AsyncSession = Depends(deps.get_db_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    return await usr_crud.user.get_multi_newest(db, skip=skip, limit=limit)


@router.put("/{user_id}/role", response_model=usr_schemas.UserRead, summary="Change a user's role")
async def update_user_role(
    user_id: UUID,
    role_in: usr_schemas.UserRoleUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    return await usr_crud.user.update_role(
        db, user_id=user_id, role=role_in.role, acting_user=current_admin_user
    )
