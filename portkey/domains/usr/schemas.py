# portkey/domains/usr/schemas.py

"""
Request and response schemas for the 'usr' domain.
"""

from typing import Optional
from uuid import UUID
from datetime import datetime
from sqlmodel import SQLModel, Field

from . import models as usr_models


class UserSync(SQLModel):
    """Payload sent by the frontend right after an identity-provider login."""
    uuid: UUID = Field(..., description="Identity-provider user UUID")
    email: Optional[str] = Field(None, max_length=255)
    full_name: Optional[str] = Field(None, max_length=255)
    avatar_url: Optional[str] = None


class UserRoleUpdate(SQLModel):
    role: usr_models.UserRole


class UserRead(SQLModel):
    id: UUID
    email: Optional[str] = None
    full_name: Optional[str] = None
    role: usr_models.UserRole
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = Field(None, description="Record creation time")
