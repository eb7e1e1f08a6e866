# portkey/domains/inv/crud.py

"""
CRUD operations for the 'inv' domain.
"""

import logging
from typing import List, Optional
from datetime import datetime, UTC

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import HTTPException, status

from portkey.core.crud_base import CRUDBase
from . import models as inv_models
from . import schemas as inv_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. products table CRUD
# =============================================================================
class CRUDProduct(CRUDBase[inv_models.Product, inv_schemas.ProductCreate, inv_schemas.ProductUpdate]):
    def __init__(self):
        super().__init__(model=inv_models.Product)

    async def get_by_sku(self, db: AsyncSession, *, sku: str) -> Optional[inv_models.Product]:
        return await self.get_by_attribute(db, attribute="sku", value=sku)

    async def get_or_404(self, db: AsyncSession, *, id: int) -> inv_models.Product:
        db_product = await self.get(db, id)
        if not db_product:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product not found: {id}")
        return db_product

    async def search_by_name(self, db: AsyncSession, *, q: str) -> List[inv_models.Product]:
        """Case-insensitive substring match on the product name."""
        statement = (
            select(self.model)
            .where(self.model.name.ilike(f"%{q}%"))
            .order_by(self.model.name)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: inv_schemas.ProductCreate) -> inv_models.Product:
        if await self.get_by_sku(db, sku=obj_in.sku):
            logger.warning("Product rejected, duplicate SKU %s", obj_in.sku)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"A product with SKU '{obj_in.sku}' already exists."
            )
        return await super().create(db, obj_in=obj_in)

    async def update_product(
        self, db: AsyncSession, *, id: int, obj_in: inv_schemas.ProductUpdate
    ) -> inv_models.Product:
        db_product = await self.get_or_404(db, id=id)

        if obj_in.sku and obj_in.sku != db_product.sku:
            if await self.get_by_sku(db, sku=obj_in.sku):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"A product with SKU '{obj_in.sku}' already exists."
                )

        update_data = obj_in.model_dump(exclude_unset=True)
        # explicit value so an empty body still touches updated_at
        update_data["updated_at"] = datetime.now(UTC)
        return await self.update(db, db_obj=db_product, obj_in=update_data)

    async def remove(self, db: AsyncSession, *, id: int) -> inv_models.Product:
        await self.get_or_404(db, id=id)
        return await super().delete(db, id=id)


product = CRUDProduct()
