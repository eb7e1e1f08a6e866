# portkey/__init__.py

"""
PortKey FastAPI application package.

The `core` subpackage holds configuration, database and security utilities;
the `domains` subpackage holds one package per business domain (user
profiles, shipments, attendance, inventory, dashboard).
"""

APP_NAME = "PortKey API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api"  # common route prefix, applied in main.py

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Logistics and customs-brokerage tracking API backend."
__license__ = "MIT"
__all__ = []
