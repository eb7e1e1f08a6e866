# portkey/domains/inv/models.py

"""
ORM model for the 'inv' domain (products).
"""

from decimal import Decimal
from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import Numeric
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


# =============================================================================
# 1. products table
# =============================================================================
class ProductBase(SQLModel):
    sku: str = Field(max_length=50, unique=True, index=True, description="Stock keeping unit")
    name: str = Field(max_length=255, index=True, description="Product name")
    description: Optional[str] = Field(default=None, description="Product description")


class Product(ProductBase, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    price: Decimal = Field(default=Decimal("0.00"), sa_column=Column(Numeric(10, 2), nullable=False))
    quantity: int = Field(default=0, description="Units in stock")
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="Record creation time"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="Last modification time"
    )
