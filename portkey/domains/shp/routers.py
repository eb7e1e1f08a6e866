# portkey/domains/shp/routers.py

"""
API endpoints for the 'shp' domain (shipments and their documents).

Single-shipment reads, the document list and shipment creation are open
for development access; everything else needs a bearer token.
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from portkey.core import dependencies as deps
from portkey.domains.usr import models as usr_models

from . import crud as shp_crud
from . import models as shp_models
from . import schemas as shp_schemas


router = APIRouter(
    tags=["Shipment Management"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. Shipments
# =============================================================================
@router.post("", response_model=shp_schemas.ShipmentRead, status_code=status.HTTP_201_CREATED, summary="Create shipment")
async def create_shipment(
    shipment_in: shp_schemas.ShipmentCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await shp_crud.shipment.create(db, obj_in=shipment_in)


@router.get("", response_model=List[shp_schemas.ShipmentRead], summary="List shipments visible to the caller")
async def read_shipments(
    user_id: Optional[uuid.UUID] = Query(None, description="Owner filter (admins only)"),
    status_filter: Optional[shp_models.ShipmentStatus] = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    """
    Admins receive every shipment, others only their own. Newest first.
    """
    return await shp_crud.shipment.get_for_user(
        db,
        current_user=current_user,
        user_id=user_id,
        status_filter=status_filter,
        skip=skip,
        limit=limit,
    )


@router.get("/{shipment_id}", response_model=shp_schemas.ShipmentRead, summary="Get shipment by id")
async def read_shipment(
    shipment_id: uuid.UUID,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await shp_crud.shipment.get_or_404(db, id=shipment_id)


@router.put("/{shipment_id}", response_model=shp_schemas.ShipmentRead, summary="Update shipment")
async def update_shipment(
    shipment_id: uuid.UUID,
    shipment_in: shp_schemas.ShipmentUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    db_shipment = await shp_crud.shipment.get_or_404(db, id=shipment_id)
    deps.ensure_owner_or_admin(current_user, db_shipment.user_id)
    return await shp_crud.shipment.update(db, db_obj=db_shipment, obj_in=shipment_in)


@router.delete("/{shipment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete shipment")
async def delete_shipment(
    shipment_id: uuid.UUID,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    db_shipment = await shp_crud.shipment.get_or_404(db, id=shipment_id)
    deps.ensure_owner_or_admin(current_user, db_shipment.user_id)
    await shp_crud.shipment.remove(db, db_obj=db_shipment)
    return None


# =============================================================================
# 2. Shipment documents
# =============================================================================
@router.post(
    "/{shipment_id}/documents",
    response_model=shp_schemas.ShipmentDocumentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Attach document to shipment"
)
async def create_shipment_document(
    shipment_id: uuid.UUID,
    document_in: shp_schemas.ShipmentDocumentCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    db_shipment = await shp_crud.shipment.get_or_404(db, id=shipment_id)
    deps.ensure_owner_or_admin(current_user, db_shipment.user_id)
    return await shp_crud.document.create_for_shipment(db, shipment_id=db_shipment.id, obj_in=document_in)


@router.get(
    "/{shipment_id}/documents",
    response_model=List[shp_schemas.ShipmentDocumentRead],
    summary="List documents of a shipment"
)
async def read_shipment_documents(
    shipment_id: uuid.UUID,
    db: AsyncSession = Depends(deps.get_db_session),
):
    await shp_crud.shipment.get_or_404(db, id=shipment_id)
    return await shp_crud.document.get_by_shipment(db, shipment_id=shipment_id)


@router.delete("/documents/{document_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete document")
async def delete_shipment_document(
    document_id: uuid.UUID,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    db_document = await shp_crud.document.get_or_404(db, id=document_id)
    db_shipment = await shp_crud.shipment.get_or_404(db, id=db_document.shipment_id)
    deps.ensure_owner_or_admin(current_user, db_shipment.user_id)
    await shp_crud.document.remove(db, db_obj=db_document)
    return None
