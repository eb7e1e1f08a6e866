# tests/domains/__init__.py

"""
Domain tests (usr, shp, att, inv, dash), one module per domain.
"""
