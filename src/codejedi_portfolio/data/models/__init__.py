"""ORM models package for database tables.

- CacheEntry: Normalized content payloads stored by the response cache

All models inherit from the shared Base declarative class defined in data.db.
"""

from codejedi_portfolio.data.db import Base
from codejedi_portfolio.data.models.cache_entry import CacheEntry

__all__ = ["Base", "CacheEntry"]
