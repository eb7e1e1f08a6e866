# portkey/domains/att/schemas.py

"""
Pydantic schemas for the 'att' domain.
"""

import uuid
from typing import Optional
from datetime import datetime
from pydantic import Field
from sqlmodel import SQLModel

from .models import AttendanceStatus


class ClockRequest(SQLModel):
    """Optional body of the clock-in and clock-out endpoints."""
    notes: Optional[str] = Field(None, max_length=1000, description="Free-text remark")


class AttendanceRead(SQLModel):
    id: int
    user_id: uuid.UUID
    clock_in_time: datetime
    clock_out_time: Optional[datetime] = None
    status: AttendanceStatus
    notes: Optional[str] = None
