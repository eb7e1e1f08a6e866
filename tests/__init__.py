# tests/__init__.py

"""
Test suite of the PortKey API.

- `conftest.py`: shared fixtures (per-test database, role-specific users,
  authorized clients carrying signed bearer tokens).
- `domains/`: one module per business domain.
- `test_main.py`: root and health-check endpoints.
"""

__title__ = "PortKey API Tests"
__all__ = []
