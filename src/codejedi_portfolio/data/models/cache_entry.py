"""ORM model for cached content payloads."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from codejedi_portfolio.data.db import Base


class CacheEntry(Base):
    """One normalized collection, keyed by content type.

    Attributes:
        key: Cache key, e.g. ``"work-experience"``.
        payload: JSON-serialisable normalized output.
        stored_at: Epoch seconds when the payload was written.
    """

    __tablename__ = "cache_entries"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    payload: Mapped[Any] = mapped_column(JSON, nullable=False)
    stored_at: Mapped[float] = mapped_column(Float, nullable=False)
