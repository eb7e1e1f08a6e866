# portkey/domains/dash/__init__.py

"""
'dash' domain package of the PortKey API.

Has no tables of its own. It aggregates shipment data for the admin
dashboard and seeds demo shipments.

Submodules:
- `schemas.py`: response models (status, metrics, seed result).
- `services.py`: DashboardService, combining the usr and shp domains.
- `routers.py`: endpoints under /api/dashboard and /api/seed.
"""

__title__ = "PortKey Dashboard Domain"
__description__ = "Dashboard metrics, connectivity status and demo data seeding."
__version__ = "0.1.0"
__all__ = []
