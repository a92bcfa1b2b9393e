"""Bounded FIFO cache for multi-name generation results."""

import json
import logging
import threading
from collections import OrderedDict
from typing import Callable, Generic, Optional, Tuple, TypeVar

from .schema import FilterCriteria

logger = logging.getLogger(__name__)

V = TypeVar("V")


def make_cache_key(count: int, criteria: Optional[FilterCriteria], unique: bool) -> str:
    """
    Build the canonical cache key for a generation request.

    The key is the JSON encoding of the resolved request. Unset criteria
    become null, case-insensitive fields are lowercased and categories are
    sorted, so logically identical requests always share a key and no
    field value can be mistaken for another.
    """
    criteria = criteria or FilterCriteria()

    def lower(value: Optional[str]) -> Optional[str]:
        return value.lower() if value is not None else None

    categories = (
        None if criteria.allowed_categories is None
        else sorted(criteria.allowed_categories)
    )
    parts = [
        count,
        criteria.gender.value if criteria.gender is not None else None,
        criteria.origin,
        criteria.category,
        criteria.popular_only,
        lower(criteria.meaning_contains),
        lower(criteria.exact_meaning),
        lower(criteria.starts_with),
        criteria.min_popularity_score,
        categories,
        unique,
    ]
    return json.dumps(parts, ensure_ascii=False)


class ResultCache(Generic[V]):
    """
    Key to result mapping bounded by capacity.

    Eviction follows insertion order only: reads and re-puts never move an
    entry, and the earliest inserted entry is dropped first.
    """

    def __init__(self, capacity: int = 100):
        if capacity < 1:
            raise ValueError(f"Cache capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: "OrderedDict[str, V]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def keys(self) -> Tuple[str, ...]:
        """Keys in insertion order, oldest first."""
        with self._lock:
            return tuple(self._entries)

    def get(self, key: str) -> Optional[V]:
        """Return the cached value or None on a miss."""
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: V) -> None:
        """Store value under key, evicting the oldest entry when full."""
        with self._lock:
            self._put(key, value)

    def get_or_compute(self, key: str, compute: Callable[[], V]) -> V:
        """
        Return the cached value for key, computing and storing it on a miss.

        The lookup and the insert happen under one lock. If compute raises,
        nothing is stored.
        """
        with self._lock:
            if key in self._entries:
                logger.debug(f"Cache hit for {key}")
                return self._entries[key]
            logger.debug(f"Cache miss for {key}")
            value = compute()
            self._put(key, value)
            return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _put(self, key: str, value: V) -> None:
        if key in self._entries:
            self._entries[key] = value
            return
        if len(self._entries) >= self.capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted cache entry {evicted}")
        self._entries[key] = value
