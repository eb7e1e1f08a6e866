# portkey/domains/dash/routers.py

"""
API endpoints for the 'dash' domain.

`router` is mounted at /api/dashboard and `seed_router` at /api/seed.
"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from portkey.core import dependencies as deps
from portkey.domains.usr import models as usr_models

from . import schemas as dash_schemas
from .services import DashboardService, build_status_payload


router = APIRouter(tags=["Dashboard"])
seed_router = APIRouter(tags=["Dashboard"])


@router.get("/status", response_model=dash_schemas.StatusResponse, summary="Backend connectivity check")
async def read_dashboard_status():
    return build_status_payload()


@router.get("/metrics", response_model=dash_schemas.DashboardMetrics, summary="Admin dashboard KPIs")
async def read_dashboard_metrics(
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    return await DashboardService(db).get_metrics()


@seed_router.post("", response_model=dash_schemas.SeedResult, summary="Seed demo shipments")
async def seed_shipments(
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    shipments = await DashboardService(db).seed_shipments()
    return dash_schemas.SeedResult(
        message=f"Successfully seeded {len(shipments)} shipments.",
        count=len(shipments),
    )
