# portkey/domains/shp/__init__.py

"""
'shp' domain package of the PortKey API.

Tracks shipments (cargo consignments identified by their Bill of Lading
number) through the customs brokerage pipeline, together with the documents
attached to each shipment.

Submodules:
- `models.py`: SQLModel tables (shipments, shipment_documents) and ShipmentStatus.
- `schemas.py`: request and response models.
- `crud.py`: async data access with ownership and uniqueness guards.
- `routers.py`: FastAPI endpoints under /api/shipments.
"""

__title__ = "PortKey Shipment Domain"
__description__ = "Manages shipments and their customs documents."
__version__ = "0.1.0"
__all__ = []
