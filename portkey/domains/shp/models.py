# portkey/domains/shp/models.py

"""
ORM models for the 'shp' domain (shipments and shipment documents).
"""

import uuid
from enum import Enum
from decimal import Decimal
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, UTC
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import Enum as SAEnum, Numeric, Text
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

if TYPE_CHECKING:
    from portkey.domains.usr.models import User


# =============================================================================
# Shipment lifecycle
# =============================================================================
class ShipmentStatus(str, Enum):
    """
    Typical flow:
        PENDING -> IN_TRANSIT -> ARRIVED -> CUSTOMS_HOLD -> RELEASED -> DELIVERED
    Transitions are not enforced; any status may be set.
    """
    PENDING = "PENDING"
    IN_TRANSIT = "IN_TRANSIT"
    ARRIVED = "ARRIVED"
    CUSTOMS_HOLD = "CUSTOMS_HOLD"
    RELEASED = "RELEASED"
    DELIVERED = "DELIVERED"


# =============================================================================
# 1. shipments table
# =============================================================================
class ShipmentBase(SQLModel):
    bl_number: str = Field(max_length=50, unique=True, index=True, description="Bill of Lading number")
    vessel_name: Optional[str] = Field(default=None, max_length=150, description="Carrying vessel")
    container_number: Optional[str] = Field(default=None, max_length=50, description="Container id, e.g. MSKU1234567")
    arrival_date: Optional[datetime] = Field(
        default=None,
        sa_column=Column(TIMESTAMP(timezone=True)),
        description="Estimated time of arrival"
    )
    client_name: Optional[str] = Field(default=None, max_length=255)
    origin_port: Optional[str] = Field(default=None, max_length=150)
    destination_port: Optional[str] = Field(default=None, max_length=150)


class Shipment(ShipmentBase, table=True):
    """
    Maps the shipments table.
    """
    __tablename__ = "shipments"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="profiles.id", index=True, description="Owning profile")
    status: ShipmentStatus = Field(
        default=ShipmentStatus.PENDING,
        sa_column=Column(SAEnum(ShipmentStatus, native_enum=False, length=30), nullable=False),
    )
    service_fee: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, server_default="0"),
        description="Brokerage fee charged for the shipment"
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), index=True),
    )

    user: Optional["User"] = Relationship(back_populates="shipments")
    documents: List["ShipmentDocument"] = Relationship(
        back_populates="shipment",
        sa_relationship_kwargs={'cascade': 'all, delete-orphan', 'lazy': 'selectin'}
    )


# =============================================================================
# 2. shipment_documents table
# =============================================================================
class ShipmentDocument(SQLModel, table=True):
    """
    A document attached to a shipment. The file itself lives in object
    storage; only its URL is kept here.
    """
    __tablename__ = "shipment_documents"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    shipment_id: uuid.UUID = Field(foreign_key="shipments.id", index=True)
    document_type: str = Field(max_length=50, description="INVOICE, PACKING_LIST, BILL_OF_LADING, ...")
    file_url: str = Field(sa_column=Column(Text, nullable=False))
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )

    shipment: Optional[Shipment] = Relationship(back_populates="documents")
