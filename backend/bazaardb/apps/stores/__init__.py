"""
Stores module.

Retail locations that hold inventory and carry their own pricing.
"""

from .router import router as stores_router  # noqa: F401
from . import models  # noqa: F401
