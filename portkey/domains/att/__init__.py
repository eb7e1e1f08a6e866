# portkey/domains/att/__init__.py

"""
'att' domain package of the PortKey API: staff clock-in / clock-out records.
"""

__title__ = "PortKey Attendance Domain"
__description__ = "Records staff clock-in and clock-out times."
__version__ = "0.1.0"
__all__ = []
