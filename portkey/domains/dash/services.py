# portkey/domains/dash/services.py

"""
Dashboard service combining the usr and shp domains.

The metric rules follow the admin dashboard:
- active: status PENDING or IN_TRANSIT.
- delayed: not DELIVERED and older than DELAYED_SHIPMENT_DAYS, counting
  started days (a shipment 30 days and 1 minute old is 31 days old).
- revenue is grouped by the UTC creation day.
"""

import logging
import math
import random
import uuid
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from datetime import datetime, timedelta, UTC

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import HTTPException, status

from portkey.core.config import settings
from portkey.domains.usr import models as usr_models
from portkey.domains.shp import models as shp_models
from . import schemas as dash_schemas

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

# demo data used by the seeder
SEED_COMPANIES = (
    "Toyota Cebu", "Ayala Land", "Shopee Logistics", "Jollibee Foods",
    "San Miguel Corp", "SM Prime", "Globe Telecom", "PLDT Enterprise",
)
SEED_LOCATIONS = (
    "Mactan Export Zone", "Cebu IT Park", "Danao Port", "Cebu International Port",
    "Mandaue Reclamation Area", "Naga City Industrial Park",
)
SEED_ORIGIN_PORT = "Cebu Port Authority"
SEED_VESSELS = (
    "MV Gloria", "Ever Given", "Maersk Cebu", "CMA CGM Marco Polo", "Hapag-Lloyd Express",
)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def build_status_payload() -> dash_schemas.StatusResponse:
    return dash_schemas.StatusResponse(
        status="ok",
        message=f"{settings.APP_NAME} backend is connected successfully!",
        timestamp=datetime.now(UTC),
    )


def compute_metrics(
    shipments: Iterable[shp_models.Shipment],
    *,
    now: Optional[datetime] = None,
    delayed_after_days: Optional[int] = None,
) -> dash_schemas.DashboardMetrics:
    """
    Derives the dashboard KPIs from a list of shipments.
    """
    now = _as_utc(now or datetime.now(UTC))
    if delayed_after_days is None:
        delayed_after_days = settings.DELAYED_SHIPMENT_DAYS

    total_revenue = Decimal("0")
    active = 0
    delayed = 0
    clients = set()
    status_counts: Dict[str, int] = {s.value: 0 for s in shp_models.ShipmentStatus}
    revenue_by_day: Dict = defaultdict(lambda: Decimal("0"))

    for shipment in shipments:
        fee = Decimal(shipment.service_fee or 0)
        total_revenue += fee
        status_counts[shipment.status.value] += 1

        if shipment.status in (shp_models.ShipmentStatus.PENDING, shp_models.ShipmentStatus.IN_TRANSIT):
            active += 1
        if shipment.client_name:
            clients.add(shipment.client_name)

        if shipment.created_at is None:
            continue
        created = _as_utc(shipment.created_at)
        if shipment.status != shp_models.ShipmentStatus.DELIVERED:
            age_days = math.ceil(abs((now - created).total_seconds()) / SECONDS_PER_DAY)
            if age_days > delayed_after_days:
                delayed += 1
        revenue_by_day[created.date()] += fee

    return dash_schemas.DashboardMetrics(
        total_revenue=total_revenue,
        active_shipments=active,
        delayed_shipments=delayed,
        unique_clients=len(clients),
        status_counts=status_counts,
        revenue_by_date=[
            dash_schemas.RevenuePoint(date=day, revenue=revenue_by_day[day])
            for day in sorted(revenue_by_day)
        ],
    )


class DashboardService:
    """
    Aggregation and seeding on top of the usr and shp tables.
    """

    def __init__(self, db: AsyncSession, rng: Optional[random.Random] = None):
        self.db = db
        self.rng = rng or random.Random()

    async def get_metrics(self) -> dash_schemas.DashboardMetrics:
        result = await self.db.execute(select(shp_models.Shipment))
        return compute_metrics(result.scalars().all())

    def _new_bl_number(self, taken: set) -> str:
        while True:
            bl_number = "BL-" + uuid.uuid4().hex[:8].upper()
            if bl_number not in taken:
                taken.add(bl_number)
                return bl_number

    async def seed_shipments(self, count: Optional[int] = None) -> List[shp_models.Shipment]:
        """
        Creates `count` random shipments spread over the existing profiles.
        """
        count = settings.SEED_SHIPMENT_COUNT if count is None else count

        users = (await self.db.execute(select(usr_models.User))).scalars().all()
        if not users:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No users found. Please create a user first."
            )

        taken = set((await self.db.execute(select(shp_models.Shipment.bl_number))).scalars().all())
        now = datetime.now(UTC)
        statuses = list(shp_models.ShipmentStatus)
        created: List[shp_models.Shipment] = []

        for _ in range(count):
            created_at = now - timedelta(days=self.rng.randrange(30))
            shipment = shp_models.Shipment(
                user_id=self.rng.choice(users).id,
                bl_number=self._new_bl_number(taken),
                vessel_name=self.rng.choice(SEED_VESSELS),
                container_number=f"CONT-{self.rng.randint(1000, 9999)}",
                arrival_date=created_at + timedelta(days=self.rng.randrange(10)),
                status=self.rng.choice(statuses),
                service_fee=Decimal(self.rng.randint(1500, 15000)),
                client_name=self.rng.choice(SEED_COMPANIES),
                origin_port=SEED_ORIGIN_PORT,
                destination_port=self.rng.choice(SEED_LOCATIONS),
                created_at=created_at,
            )
            self.db.add(shipment)
            created.append(shipment)

        await self.db.commit()
        logger.info("Seeded %d shipments over %d user(s)", len(created), len(users))
        return created
