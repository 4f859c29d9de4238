"""
Suppliers module.

Supplier master data and the purchase orders placed with them per store.
"""

from .router import suppliers_router, supplier_orders_router  # noqa: F401
from . import models  # noqa: F401
