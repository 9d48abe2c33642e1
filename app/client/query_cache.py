"""Client-side cache of query results keyed by endpoint path."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Any]
Listener = Callable[[frozenset[str]], None]


@dataclass
class _Entry:
    fetcher: Fetcher
    value: Any = None
    loaded: bool = False
    stale: bool = True
    version: int = 0


class QueryCache:
    """Hold the last fetched result for each query key.

    Invalidation only flags an entry; the next :meth:`get` refetches it. No
    event payload is ever written into the cache.
    """

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    def register(self, key: str, fetcher: Fetcher) -> None:
        with self._lock:
            self._entries[key] = _Entry(fetcher=fetcher)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def get(self, key: str) -> Any:
        """Return the cached value for ``key``, fetching it when stale or missing."""

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                raise KeyError(f"No query registered for {key}")
            needs_fetch = entry.stale or not entry.loaded
            version = entry.version
        if needs_fetch:
            value = entry.fetcher()
            with self._lock:
                entry.value = value
                entry.loaded = True
                # An invalidation that arrived during the fetch keeps it stale.
                entry.stale = entry.version != version
            logger.debug("Refetched %s", key)
            return value
        return entry.value

    def is_stale(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is None or entry.stale

    def invalidate(self, keys: Iterable[str]) -> frozenset[str]:
        """Mark ``keys`` stale and notify listeners; return the keys that matched."""

        requested = frozenset(keys)
        with self._lock:
            matched = frozenset(key for key in requested if key in self._entries)
            for key in matched:
                self._entries[key].stale = True
                self._entries[key].version += 1
            listeners = list(self._listeners)

        if matched:
            logger.debug("Invalidated %s", ", ".join(sorted(matched)))
            for listener in listeners:
                listener(matched)
        return matched

    def add_listener(self, listener: Listener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)


__all__ = ["QueryCache"]
