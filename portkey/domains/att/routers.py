# portkey/domains/att/routers.py

"""
API endpoints for the 'att' domain (attendance).
"""

import uuid
from typing import List, Optional
from datetime import datetime

from fastapi import APIRouter, Body, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from portkey.core import dependencies as deps
from portkey.domains.usr import models as usr_models

from . import crud as att_crud
from . import schemas as att_schemas


router = APIRouter(
    tags=["Attendance"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. Clocking (current user)
# =============================================================================
@router.post(
    "/clock-in",
    response_model=att_schemas.AttendanceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Clock in"
)
async def clock_in(
    clock_request: Optional[att_schemas.ClockRequest] = Body(None),
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    notes = clock_request.notes if clock_request else None
    return await att_crud.attendance.record_clock_in(db, user_id=current_user.id, notes=notes)


@router.post("/clock-out", response_model=att_schemas.AttendanceRead, summary="Clock out")
async def clock_out(
    clock_request: Optional[att_schemas.ClockRequest] = Body(None),
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    notes = clock_request.notes if clock_request else None
    return await att_crud.attendance.record_clock_out(db, user_id=current_user.id, notes=notes)


@router.get("/history", response_model=List[att_schemas.AttendanceRead], summary="My attendance history")
async def read_my_history(
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    return await att_crud.attendance.get_history(db, user_id=current_user.id)


# =============================================================================
# 2. Administration
# =============================================================================
@router.get("/users/{user_id}", response_model=List[att_schemas.AttendanceRead], summary="Attendance history of a user")
async def read_user_history(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    return await att_crud.attendance.get_history(db, user_id=user_id)


@router.get("", response_model=List[att_schemas.AttendanceRead], summary="Attendance within a time range")
async def read_attendance_between(
    start: datetime = Query(..., description="Range start (inclusive)"),
    end: datetime = Query(..., description="Range end (inclusive)"),
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    return await att_crud.attendance.get_clock_in_between(db, start=start, end=end)
