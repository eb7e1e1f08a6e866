# portkey/core/crud_base.py

"""
Base class for the common async CRUD (Create, Read, Update, Delete) operations.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar, Any, Dict, Union
from datetime import date, datetime, timedelta

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Generic CRUD operations for a single table model.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Fetches a single row by primary key.
        """
        return await db.get(self.model, id)

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        response = await db.execute(statement)
        return response.scalar_one_or_none()

    async def get_filtered(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None,             # {"attribute_name": value}
        date_range_field: Optional[str] = None,              # e.g. "clock_in_time"
        start_date: Optional[Union[date, datetime]] = None,
        end_date: Optional[Union[date, datetime]] = None,
        order_by_field: Optional[str] = None,
        order_desc: bool = True,
        skip: int = 0,
        limit: Optional[int] = 100
    ) -> List[ModelType]:
        """
        Multi-row query with attribute filters, an inclusive date range,
        ordering and paging. None values in `filters` are ignored.
        """
        query = select(self.model)
        conditions = []

        # 1. attribute filters
        if filters:
            for attribute, value in filters.items():
                if value is None:
                    continue
                if hasattr(self.model, attribute):
                    conditions.append(getattr(self.model, attribute) == value)
                else:
                    logger.warning("Model %s has no attribute '%s'", self.model.__name__, attribute)

        # 2. date range (inclusive on both ends)
        if date_range_field and hasattr(self.model, date_range_field):
            date_field = getattr(self.model, date_range_field)
            if start_date is not None:
                conditions.append(date_field >= start_date)
            if end_date is not None:
                if isinstance(end_date, datetime):
                    conditions.append(date_field <= end_date)
                else:
                    # plain dates include the whole end day
                    conditions.append(date_field < end_date + timedelta(days=1))
        elif date_range_field:
            logger.warning("Model %s has no attribute '%s' for date range filtering.", self.model.__name__, date_range_field)

        if conditions:
            query = query.where(*conditions)

        # 3. ordering
        if order_by_field and hasattr(self.model, order_by_field):
            column = getattr(self.model, order_by_field)
            query = query.order_by(column.desc() if order_desc else column)
        elif order_by_field:
            logger.warning("Model %s has no attribute '%s' for ordering.", self.model.__name__, order_by_field)

        # 4. paging
        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        Inserts a new row.
        """
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        logger.info("Created %s id=%s", self.model.__name__, getattr(db_obj, "id", None))
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Applies a partial update; only fields explicitly set are written.
        """
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            if hasattr(db_obj, key):
                setattr(db_obj, key, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        logger.info("Updated %s id=%s fields=%s", self.model.__name__, getattr(db_obj, "id", None), sorted(update_data))
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        Deletes a row by primary key. Returns the deleted object, or None.
        """
        db_obj = await db.get(self.model, id)
        if db_obj:
            await db.delete(db_obj)
            await db.commit()
            logger.info("Deleted %s id=%s", self.model.__name__, id)
        return db_obj
