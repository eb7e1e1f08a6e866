# portkey/domains/usr/models.py

"""
ORM model for the 'usr' domain (user profiles).

A profile is the backend copy of a user authenticated by the identity
provider. Its primary key is the provider's user UUID and is never generated
here.
"""

from enum import Enum
from typing import Optional, List, TYPE_CHECKING
from uuid import UUID
from datetime import datetime, UTC
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import Enum as SAEnum
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

if TYPE_CHECKING:
    from portkey.domains.shp.models import Shipment
    from portkey.domains.att.models import Attendance


# =============================================================================
# User roles
# =============================================================================
class UserRole(str, Enum):
    """
    Roles are stored by value ("admin", "broker", "client").
    """
    ADMIN = "admin"
    BROKER = "broker"
    CLIENT = "client"


# =============================================================================
# 1. profiles table
# =============================================================================
class UserBase(SQLModel):
    email: Optional[str] = Field(default=None, max_length=255, index=True, description="User e-mail")
    full_name: Optional[str] = Field(default=None, max_length=255, description="Display name")
    avatar_url: Optional[str] = Field(default=None, description="Profile picture URL")


class User(UserBase, table=True):
    """
    Maps the profiles table.
    """
    __tablename__ = "profiles"

    id: UUID = Field(primary_key=True, description="Identity-provider user UUID")
    role: UserRole = Field(
        default=UserRole.CLIENT,
        sa_column=Column(
            SAEnum(
                UserRole,
                native_enum=False,
                length=20,
                values_callable=lambda roles: [r.value for r in roles],
            ),
            nullable=False,
        ),
        description="admin, broker or client"
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="Record creation time"
    )

    shipments: List["Shipment"] = Relationship(back_populates="user")
    attendance_records: List["Attendance"] = Relationship(back_populates="user")
