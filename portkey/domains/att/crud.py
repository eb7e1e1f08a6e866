# portkey/domains/att/crud.py

"""
CRUD operations for the 'att' domain.
"""

import logging
import uuid
from typing import List, Optional
from datetime import datetime, UTC

from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import HTTPException, status

from portkey.core.crud_base import CRUDBase
from portkey.domains.usr import models as usr_models
from . import models as att_models
from . import schemas as att_schemas

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class CRUDAttendance(CRUDBase[att_models.Attendance, att_schemas.ClockRequest, att_schemas.ClockRequest]):
    def __init__(self):
        super().__init__(model=att_models.Attendance)

    async def get_open_records(self, db: AsyncSession, *, user_id: uuid.UUID) -> List[att_models.Attendance]:
        """Open (CLOCKED_IN) records of a user, most recent clock-in first."""
        return await self.get_filtered(
            db,
            filters={"user_id": user_id, "status": att_models.AttendanceStatus.CLOCKED_IN},
            order_by_field="clock_in_time",
            order_desc=True,
            limit=None,
        )

    async def record_clock_in(
        self, db: AsyncSession, *, user_id: uuid.UUID, notes: Optional[str] = None
    ) -> att_models.Attendance:
        if not await db.get(usr_models.User, user_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User not found: {user_id}")
        if await self.get_open_records(db, user_id=user_id):
            logger.warning("Clock-in rejected, user %s already clocked in", user_id)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User is already clocked in. Clock out first before clocking in again."
            )

        return await self.create(db, obj_in={
            "user_id": user_id,
            "clock_in_time": datetime.now(UTC),
            "status": att_models.AttendanceStatus.CLOCKED_IN,
            "notes": notes,
        })

    async def record_clock_out(
        self, db: AsyncSession, *, user_id: uuid.UUID, notes: Optional[str] = None
    ) -> att_models.Attendance:
        open_records = await self.get_open_records(db, user_id=user_id)
        if not open_records:
            logger.warning("Clock-out rejected, user %s has no open record", user_id)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No open clock-in record found. Clock in first before clocking out."
            )

        record = open_records[0]
        update_data = {
            "clock_out_time": datetime.now(UTC),
            "status": att_models.AttendanceStatus.CLOCKED_OUT,
        }
        if notes:
            update_data["notes"] = f"{record.notes}\n{notes}" if record.notes else notes
        return await self.update(db, db_obj=record, obj_in=update_data)

    async def get_history(self, db: AsyncSession, *, user_id: uuid.UUID) -> List[att_models.Attendance]:
        """All records of a user, newest clock-in first."""
        return await self.get_filtered(
            db,
            filters={"user_id": user_id},
            order_by_field="clock_in_time",
            order_desc=True,
            limit=None,
        )

    async def get_clock_in_between(
        self, db: AsyncSession, *, start: datetime, end: datetime
    ) -> List[att_models.Attendance]:
        """
        Records whose clock-in time falls within [start, end], both ends
        included, oldest first.
        """
        start, end = _as_utc(start), _as_utc(end)
        if start > end:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="The start of the range must not be after its end."
            )
        return await self.get_filtered(
            db,
            date_range_field="clock_in_time",
            start_date=start,
            end_date=end,
            order_by_field="clock_in_time",
            order_desc=False,
            limit=None,
        )


attendance = CRUDAttendance()
