# portkey/domains/inv/__init__.py

"""
'inv' domain package of the PortKey API.

Keeps the product catalogue (SKU, price and stock quantity) used by the
brokerage for inventory bookkeeping.

Submodules:
- `models.py`: SQLModel table (products).
- `schemas.py`: request and response models with non-negative price/quantity.
- `crud.py`: async data access with SKU uniqueness checks and name search.
- `routers.py`: FastAPI endpoints under /api/products.
"""

__title__ = "PortKey Inventory Domain"
__description__ = "Manages the product catalogue and stock quantities."
__version__ = "0.1.0"
__all__ = []
