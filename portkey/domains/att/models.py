# portkey/domains/att/models.py

"""
ORM model for the 'att' domain (attendance).
"""

import uuid
from enum import Enum
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import Enum as SAEnum
from sqlalchemy.types import TIMESTAMP

if TYPE_CHECKING:
    from portkey.domains.usr.models import User


class AttendanceStatus(str, Enum):
    CLOCKED_IN = "CLOCKED_IN"
    CLOCKED_OUT = "CLOCKED_OUT"


# =============================================================================
# 1. attendance table
# =============================================================================
class Attendance(SQLModel, table=True):
    """
    One work session. A record stays CLOCKED_IN with no clock_out_time until
    the user clocks out.
    """
    __tablename__ = "attendance"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="profiles.id", index=True)
    clock_in_time: datetime = Field(sa_column=Column(TIMESTAMP(timezone=True), nullable=False, index=True))
    clock_out_time: Optional[datetime] = Field(default=None, sa_column=Column(TIMESTAMP(timezone=True)))
    status: AttendanceStatus = Field(
        default=AttendanceStatus.CLOCKED_IN,
        sa_column=Column(SAEnum(AttendanceStatus, native_enum=False, length=20), nullable=False),
    )
    notes: Optional[str] = Field(default=None)

    user: Optional["User"] = Relationship(back_populates="attendance_records")
