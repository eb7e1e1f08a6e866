# portkey/domains/shp/crud.py

"""
CRUD operations for the 'shp' domain.

Guard clauses raise HTTPException directly so routers stay thin.
"""

import logging
import uuid
from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import HTTPException, status

from portkey.core.crud_base import CRUDBase
from portkey.domains.usr import models as usr_models
from . import models as shp_models
from . import schemas as shp_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. shipments table CRUD
# =============================================================================
class CRUDShipment(CRUDBase[shp_models.Shipment, shp_schemas.ShipmentCreate, shp_schemas.ShipmentUpdate]):
    def __init__(self):
        super().__init__(model=shp_models.Shipment)

    async def get_by_bl_number(self, db: AsyncSession, *, bl_number: str) -> Optional[shp_models.Shipment]:
        return await self.get_by_attribute(db, attribute="bl_number", value=bl_number)

    async def get_or_404(self, db: AsyncSession, *, id: uuid.UUID) -> shp_models.Shipment:
        db_shipment = await self.get(db, id)
        if not db_shipment:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Shipment not found: {id}")
        return db_shipment

    async def create(self, db: AsyncSession, *, obj_in: shp_schemas.ShipmentCreate) -> shp_models.Shipment:
        """
        Registers a new shipment.

        The owner must exist and the BL number must be unused. Status is
        always forced to PENDING.
        """
        if not await db.get(usr_models.User, obj_in.user_id):
            logger.warning("Shipment rejected, unknown user %s", obj_in.user_id)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"User not found: {obj_in.user_id}")
        if await self.get_by_bl_number(db, bl_number=obj_in.bl_number):
            logger.warning("Shipment rejected, duplicate BL number %s", obj_in.bl_number)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"A shipment with BL number '{obj_in.bl_number}' already exists."
            )

        data = obj_in.model_dump()
        data["status"] = shp_models.ShipmentStatus.PENDING
        return await super().create(db, obj_in=data)

    async def get_by_user(
        self, db: AsyncSession, *, user_id: uuid.UUID, skip: int = 0, limit: Optional[int] = None
    ) -> List[shp_models.Shipment]:
        """Shipments owned by one user, newest first."""
        return await self.get_filtered(
            db,
            filters={"user_id": user_id},
            order_by_field="created_at",
            order_desc=True,
            skip=skip,
            limit=limit,
        )

    async def get_for_user(
        self,
        db: AsyncSession,
        *,
        current_user: usr_models.User,
        user_id: Optional[uuid.UUID] = None,
        status_filter: Optional[shp_models.ShipmentStatus] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[shp_models.Shipment]:
        """
        Role-aware listing: admins see every shipment (optionally narrowed by
        owner and status), everyone else only their own.
        """
        if current_user.role != usr_models.UserRole.ADMIN:
            user_id = current_user.id
        return await self.get_filtered(
            db,
            filters={"user_id": user_id, "status": status_filter},
            order_by_field="created_at",
            order_desc=True,
            skip=skip,
            limit=limit,
        )

    async def remove(self, db: AsyncSession, *, db_obj: shp_models.Shipment) -> shp_models.Shipment:
        """
        Deletes a shipment together with its documents.
        """
        # reload the collection so the delete cascade sees every document
        await db.refresh(db_obj, attribute_names=["documents"])
        document_count = len(db_obj.documents)
        await db.delete(db_obj)
        await db.commit()
        logger.info("Deleted Shipment id=%s with %d document(s)", db_obj.id, document_count)
        return db_obj


shipment = CRUDShipment()


# =============================================================================
# 2. shipment_documents table CRUD
# =============================================================================
class CRUDShipmentDocument(
    CRUDBase[shp_models.ShipmentDocument, shp_schemas.ShipmentDocumentCreate, shp_schemas.ShipmentDocumentCreate]
):
    def __init__(self):
        super().__init__(model=shp_models.ShipmentDocument)

    async def get_or_404(self, db: AsyncSession, *, id: uuid.UUID) -> shp_models.ShipmentDocument:
        db_document = await self.get(db, id)
        if not db_document:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Document not found: {id}")
        return db_document

    async def create_for_shipment(
        self,
        db: AsyncSession,
        *,
        shipment_id: uuid.UUID,
        obj_in: shp_schemas.ShipmentDocumentCreate,
    ) -> shp_models.ShipmentDocument:
        data = obj_in.model_dump()
        data["shipment_id"] = shipment_id
        return await self.create(db, obj_in=data)

    async def get_by_shipment(self, db: AsyncSession, *, shipment_id: uuid.UUID) -> List[shp_models.ShipmentDocument]:
        """Documents of one shipment, newest first."""
        statement = (
            select(self.model)
            .where(self.model.shipment_id == shipment_id)
            .order_by(self.model.created_at.desc())
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def remove(self, db: AsyncSession, *, db_obj: shp_models.ShipmentDocument) -> shp_models.ShipmentDocument:
        await db.delete(db_obj)
        await db.commit()
        logger.info("Deleted ShipmentDocument id=%s from shipment %s", db_obj.id, db_obj.shipment_id)
        return db_obj


document = CRUDShipmentDocument()
