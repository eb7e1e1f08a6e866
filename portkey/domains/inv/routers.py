# portkey/domains/inv/routers.py

"""
API endpoints for the 'inv' domain (products).
Reads need any authenticated user; writes need the admin role.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from portkey.core import dependencies as deps
from portkey.domains.usr import models as usr_models

from . import crud as inv_crud
from . import schemas as inv_schemas


router = APIRouter(
    tags=["Inventory Management"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[inv_schemas.ProductRead], summary="List or search products")
async def read_products(
    q: Optional[str] = Query(None, description="Case-insensitive name search"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    if q:
        return await inv_crud.product.search_by_name(db, q=q)
    return await inv_crud.product.get_filtered(
        db, order_by_field="id", order_desc=False, skip=skip, limit=limit
    )


@router.get("/{product_id}", response_model=inv_schemas.ProductRead, summary="Get product by id")
async def read_product(
    product_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user_from_token),
):
    return await inv_crud.product.get_or_404(db, id=product_id)


@router.post("", response_model=inv_schemas.ProductRead, status_code=status.HTTP_201_CREATED, summary="Create product")
async def create_product(
    product_in: inv_schemas.ProductCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    return await inv_crud.product.create(db, obj_in=product_in)


@router.put("/{product_id}", response_model=inv_schemas.ProductRead, summary="Update product")
async def update_product(
    product_id: int,
    product_in: inv_schemas.ProductUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    return await inv_crud.product.update_product(db, id=product_id, obj_in=product_in)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete product")
async def delete_product(
    product_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    await inv_crud.product.remove(db, id=product_id)
    return None
