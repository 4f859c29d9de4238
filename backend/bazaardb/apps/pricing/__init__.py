"""
Pricing module.

Per-store selling prices for the products a store carries.
"""

from .router import router as pricing_router  # noqa: F401
from . import models  # noqa: F401
