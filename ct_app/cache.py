"""Deduplicating snapshot cache for row lists fetched from the API."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Hashable

from ct_common.errors import RowSourceError, wrap_error

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Any]

DEFAULT_DEDUPE_SECONDS = 60.0


@dataclass
class _Entry:
    data: Any
    fetched_at: float
    stale: bool = False


class SnapshotCache:
    """Cache of fetched snapshots keyed by request key.

    ``get`` serves the cached value while it is younger than the dedupe
    interval and not marked stale; otherwise it calls the fetcher. A failing
    fetch raises RowSourceError and leaves the previous value in place.
    """

    def __init__(
        self,
        dedupe_seconds: float = DEFAULT_DEDUPE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._dedupe_seconds = dedupe_seconds
        self._clock = clock
        self._entries: dict[Hashable, _Entry] = {}
        self._lock = threading.Lock()

    def peek(self, key: Hashable) -> Any:
        """Cached value for ``key`` regardless of age, or None."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.data

    def is_fresh(self, key: Hashable) -> bool:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or entry.stale:
            return False
        return (self._clock() - entry.fetched_at) < self._dedupe_seconds

    def get(self, key: Hashable, fetcher: Fetcher) -> Any:
        if self.is_fresh(key):
            logger.debug("Serving %s from cache", key)
            return self.peek(key)
        return self.revalidate(key, fetcher)

    def revalidate(self, key: Hashable, fetcher: Fetcher) -> Any:
        """Fetch ``key`` now and store the result."""
        logger.debug("Fetching %s", key)
        try:
            data = fetcher()
        except Exception as exc:
            raise wrap_error(
                RowSourceError, f"Failed to fetch {key}", context={"key": key}, cause=exc
            ) from exc
        if isinstance(data, (list, tuple)):
            data = list(data)
        with self._lock:
            self._entries[key] = _Entry(data=data, fetched_at=self._clock())
        return data

    def mutate(self, key: Hashable, data: Any = None, *, revalidate: bool = True) -> None:
        """Replace the cached value and/or mark it stale.

        Passing ``data`` stores it immediately (optimistic update). With
        ``revalidate`` the next ``get`` fetches again.
        """
        with self._lock:
            entry = self._entries.get(key)
            if data is not None:
                if isinstance(data, (list, tuple)):
                    data = list(data)
                entry = _Entry(data=data, fetched_at=self._clock())
                self._entries[key] = entry
            if entry is not None and revalidate:
                entry.stale = True

    def invalidate(self, key: Hashable) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
