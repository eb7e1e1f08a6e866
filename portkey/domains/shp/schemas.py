# portkey/domains/shp/schemas.py

"""
Pydantic schemas for the 'shp' domain.
"""

import uuid
from decimal import Decimal
from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator
from sqlmodel import SQLModel

from .models import ShipmentStatus


# =============================================================================
# 1. shipments
# =============================================================================
class ShipmentCreate(SQLModel):
    """New shipments always start PENDING; a status in the payload is ignored."""
    user_id: uuid.UUID = Field(..., description="Owning profile id")
    bl_number: str = Field(..., min_length=1, max_length=50, description="Bill of Lading number")
    vessel_name: Optional[str] = Field(None, max_length=150)
    container_number: Optional[str] = Field(None, max_length=50)
    arrival_date: Optional[datetime] = None
    service_fee: Decimal = Field(Decimal("0.00"), ge=0, max_digits=12, decimal_places=2)
    client_name: Optional[str] = Field(None, max_length=255)
    origin_port: Optional[str] = Field(None, max_length=150)
    destination_port: Optional[str] = Field(None, max_length=150)


class ShipmentUpdate(SQLModel):
    vessel_name: Optional[str] = Field(None, max_length=150)
    container_number: Optional[str] = Field(None, max_length=50)
    arrival_date: Optional[datetime] = None
    status: Optional[ShipmentStatus] = None
    service_fee: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    client_name: Optional[str] = Field(None, max_length=255)
    origin_port: Optional[str] = Field(None, max_length=150)
    destination_port: Optional[str] = Field(None, max_length=150)

    @field_validator("status", "service_fee")
    @classmethod
    def reject_null(cls, value):
        """Omit a field to keep it; these columns cannot be cleared."""
        if value is None:
            raise ValueError("may not be null")
        return value


class ShipmentRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    bl_number: str
    vessel_name: Optional[str] = None
    container_number: Optional[str] = None
    arrival_date: Optional[datetime] = None
    status: ShipmentStatus
    service_fee: Decimal
    client_name: Optional[str] = None
    origin_port: Optional[str] = None
    destination_port: Optional[str] = None
    created_at: Optional[datetime] = None


# =============================================================================
# 2. shipment_documents
# =============================================================================
class ShipmentDocumentCreate(SQLModel):
    document_type: str = Field(..., min_length=1, max_length=50, description="e.g. INVOICE, PACKING_LIST")
    file_url: str = Field(..., min_length=1, description="Object-storage URL of the file")


class ShipmentDocumentRead(SQLModel):
    id: uuid.UUID
    shipment_id: uuid.UUID
    document_type: str
    file_url: str
    created_at: Optional[datetime] = None
