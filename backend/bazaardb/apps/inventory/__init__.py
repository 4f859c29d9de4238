"""
Inventory module.

Holds on-hand counts per (store, product), the min/max stocking policy for
each pair, and the movement log written by stock-in / sell / remove
transactions.
"""

from .router import (  # noqa: F401
    inventory_router,
    product_transactions_router,
    store_products_router,
)
from . import models  # noqa: F401
