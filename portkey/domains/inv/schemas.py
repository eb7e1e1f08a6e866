# portkey/domains/inv/schemas.py

"""
Pydantic schemas for the 'inv' domain.
"""

from decimal import Decimal
from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator
from sqlmodel import SQLModel


class ProductBase(SQLModel):
    sku: str = Field(..., min_length=1, max_length=50, description="Stock keeping unit")
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Unit price")
    quantity: int = Field(0, ge=0, description="Units in stock")


class ProductCreate(ProductBase):
    pass


class ProductUpdate(SQLModel):
    sku: Optional[str] = Field(None, min_length=1, max_length=50)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    quantity: Optional[int] = Field(None, ge=0)

    @field_validator("sku", "name", "price", "quantity")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class ProductRead(ProductBase):
    id: int = Field(..., description="Product id")
    created_at: Optional[datetime] = Field(None, description="Record creation time")
    updated_at: Optional[datetime] = Field(None, description="Last modification time")
