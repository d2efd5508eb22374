"""ORM Models — SQLAlchemy declarative models for users, assets and favorites.

Invariants:
    - All models inherit from Base (db/base.py)
    - Favorites reference users and assets with ON DELETE CASCADE

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from favorites.models.user import User  # noqa: F401
from favorites.models.asset import Asset  # noqa: F401
from favorites.models.favorite import Favorite  # noqa: F401
