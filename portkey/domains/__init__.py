# portkey/domains/__init__.py

"""
Domain packages of the PortKey API (usr, shp, att, inv, dash).
"""
