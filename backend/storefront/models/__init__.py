"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Product owns Review; Favorite joins User and Product

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from storefront.models.product import Product  # noqa: F401
from storefront.models.review import Review  # noqa: F401
from storefront.models.user import User  # noqa: F401
from storefront.models.favorite import Favorite  # noqa: F401
