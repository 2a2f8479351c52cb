from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Optional

logger = logging.getLogger(__name__)

CacheKey = tuple[Hashable, ...]


class QueryCache:
    """Keyed store for fetched records.

    Keys are tuples such as ``("leave-balances", employee_id, year)``;
    invalidation works on key prefixes.
    """

    def __init__(self):
        self._entries: dict[CacheKey, Any] = {}

    def __contains__(self, key: CacheKey) -> bool:
        return tuple(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: CacheKey, default: Optional[Any] = None) -> Any:
        return self._entries.get(tuple(key), default)

    def set(self, key: CacheKey, value: Any) -> None:
        self._entries[tuple(key)] = value

    def get_or_load(self, key: CacheKey, loader: Callable[[], Any]) -> Any:
        key = tuple(key)
        if key in self._entries:
            return self._entries[key]
        value = loader()
        self._entries[key] = value
        return value

    def invalidate(self, prefix: CacheKey) -> int:
        """Evict every entry whose key starts with ``prefix``; returns the count."""
        prefix = tuple(prefix)
        stale = [k for k in self._entries if k[: len(prefix)] == prefix]
        for k in stale:
            del self._entries[k]
        if stale:
            logger.debug("Evicted %d cache entries for prefix %r", len(stale), prefix)
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
