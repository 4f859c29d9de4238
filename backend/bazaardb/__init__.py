# backend/bazaardb/__init__.py
"""
Bazaar inventory / pricing / supplier API.

ORM models live in bazaardb/apps/*/models.py; importing bazaardb.main
registers every table on Base.metadata.
"""
