"""Small in-memory LRU cache used to memoize compiled wildcard matchers.

Entries are written once and never mutated; the oldest entries are
evicted when maxsize is exceeded. A lock keeps the OrderedDict bookkeeping
consistent when several threads glob at once.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Callable, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


class LRUCache(Generic[T]):
    # Bounded memo table with simple LRU eviction using OrderedDict
    def __init__(self, *, maxsize: int) -> None:
        self._maxsize = max(1, int(maxsize))
        self._store: "OrderedDict[Hashable, T]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: Hashable) -> Optional[T]:
        with self._lock:
            if key not in self._store:
                return None
            # Move to end to mark as recently used
            self._store.move_to_end(key, last=True)
            return self._store[key]

    def set(self, key: Hashable, value: T) -> None:
        with self._lock:
            self._store[key] = value
            self._store.move_to_end(key, last=True)

            while len(self._store) > self._maxsize:
                self._store.popitem(last=False)

    def get_or_create(self, key: Hashable, factory: Callable[[], T]) -> T:
        value = self.get(key)
        if value is None:
            # Build outside the lock; a racing thread computes the same value
            value = factory()
            self.set(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
