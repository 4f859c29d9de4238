"""
Catalog module.

Product categories and the products that belong to them.
"""

from .router import categories_router, products_router  # noqa: F401
from . import models  # noqa: F401
