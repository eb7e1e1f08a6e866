# portkey/domains/dash/schemas.py

"""
Response schemas for the 'dash' domain.
"""

from decimal import Decimal
from typing import Dict, List
from datetime import date as date_type, datetime
from pydantic import Field
from sqlmodel import SQLModel


class StatusResponse(SQLModel):
    status: str = Field(..., description="Always 'ok' when the API answers")
    message: str
    timestamp: datetime


class RevenuePoint(SQLModel):
    date: date_type
    revenue: Decimal


class DashboardMetrics(SQLModel):
    total_revenue: Decimal = Field(..., description="Sum of all service fees")
    active_shipments: int = Field(..., description="Shipments PENDING or IN_TRANSIT")
    delayed_shipments: int = Field(..., description="Undelivered shipments older than the delay threshold")
    unique_clients: int = Field(..., description="Distinct non-empty client names")
    status_counts: Dict[str, int] = Field(..., description="Shipment count per status")
    revenue_by_date: List[RevenuePoint] = Field(..., description="Service fees per creation day, ascending")


class SeedResult(SQLModel):
    message: str
    count: int
