"""Time-boxed cache for normalized content collections.

Payloads are stored in the ``cache_entries`` table. When no writable database
location exists (read-only deploy filesystems), the cache degrades to an
in-process dictionary; storage problems never fail a request.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from codejedi_portfolio.data.db import StorageUnavailableError, get_session, init_db
from codejedi_portfolio.data.models import CacheEntry

logger = logging.getLogger(__name__)

__all__ = ["ResponseCache"]

T = TypeVar("T")


class ResponseCache:
    """Cache keyed by content type, storing JSON payloads with a timestamp."""

    def __init__(
        self,
        url: str | None = None,
        *,
        enabled: bool = True,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.url = url
        self.enabled = enabled
        self._clock = clock
        self._memory: dict[str, tuple[Any, float]] = {}
        self._use_memory = False

    @property
    def backend(self) -> str:
        return "memory" if self._use_memory else "database"

    def _switch_to_memory(self, reason: Exception) -> None:
        if not self._use_memory:
            logger.warning("Response cache storage unavailable (%s); using memory", reason)
        self._use_memory = True

    def _ensure_storage(self) -> bool:
        """Return True when the database store can be used."""
        if self._use_memory:
            return False
        try:
            init_db(self.url)
        except (StorageUnavailableError, SQLAlchemyError, OSError) as exc:
            self._switch_to_memory(exc)
            return False
        return True

    def _read(self, key: str) -> tuple[Any, float] | None:
        if self._ensure_storage():
            try:
                with get_session() as session:
                    entry = session.get(CacheEntry, key)
                    if entry is None:
                        return None
                    return entry.payload, entry.stored_at
            except SQLAlchemyError as exc:
                self._switch_to_memory(exc)
        return self._memory.get(key)

    def _write(self, key: str, payload: Any, stored_at: float) -> None:
        if self._ensure_storage():
            try:
                with get_session() as session:
                    entry = session.get(CacheEntry, key)
                    if entry is None:
                        session.add(CacheEntry(key=key, payload=payload, stored_at=stored_at))
                    else:
                        entry.payload = payload
                        entry.stored_at = stored_at
                return
            except SQLAlchemyError as exc:
                self._switch_to_memory(exc)
        self._memory[key] = (payload, stored_at)

    def get(self, key: str, ttl: float) -> Any | None:
        """Return the cached payload if it is younger than ``ttl`` seconds."""
        if not self.enabled:
            return None
        cached = self._read(key)
        if cached is None:
            return None
        payload, stored_at = cached
        if self._clock() - stored_at < ttl:
            return payload
        return None

    def set(self, key: str, payload: Any) -> None:
        if self.enabled:
            self._write(key, payload, self._clock())

    def get_or_fetch(self, key: str, ttl: float, fetcher: Callable[[], T]) -> T:
        """Return the cached value for ``key`` or fetch, store and return a fresh one.

        Exceptions raised by ``fetcher`` propagate and nothing is stored.
        """
        cached = self.get(key, ttl)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached
        value = fetcher()
        self.set(key, value)
        return value

    def invalidate(self, key: str | None = None) -> None:
        """Drop one key, or every key when ``key`` is None."""
        if key is None:
            self._memory.clear()
        else:
            self._memory.pop(key, None)
        if not self._ensure_storage():
            return
        try:
            with get_session() as session:
                query = session.query(CacheEntry)
                if key is not None:
                    query = query.filter(CacheEntry.key == key)
                query.delete(synchronize_session=False)
        except SQLAlchemyError as exc:
            self._switch_to_memory(exc)

    def entries(self) -> list[dict[str, Any]]:
        """Describe stored entries (key and age) for the admin status view."""
        now = self._clock()
        rows: list[tuple[str, Any, float]] = []
        if self._ensure_storage():
            try:
                with get_session() as session:
                    rows = [
                        (entry.key, entry.payload, entry.stored_at)
                        for entry in session.query(CacheEntry).order_by(CacheEntry.key)
                    ]
            except SQLAlchemyError as exc:
                self._switch_to_memory(exc)
        if self._use_memory:
            rows = [(key, payload, ts) for key, (payload, ts) in sorted(self._memory.items())]
        return [
            {
                "key": key,
                "ageSeconds": round(now - stored_at, 3),
                "items": len(payload) if isinstance(payload, list | dict) else None,
            }
            for key, payload, stored_at in rows
        ]
