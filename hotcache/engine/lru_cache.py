import logging
from typing import Any, Hashable, List, Optional

from hotcache.cache import Cache, K, V
from hotcache.engine.fair_lock import FairLock
from hotcache.engine.key_index import KeyIndex
from hotcache.engine.recency_list import RecencyList
from hotcache.eviction_policy import EvictionPolicy
from hotcache.exceptions import InvalidArgument


class LRUCache(Cache[K, V]):
    """
    Fixed-capacity cache that evicts the least recently used entry.

    Coordinates the Key Index (key -> slot) and the Recency List (slot order)
    behind a single fair lock, so put/get/remove are O(1) and every public
    call is one atomic unit with respect to other threads. A get counts as a
    use: it moves the entry to the head of the order.
    """
    policy = EvictionPolicy.LRU

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidArgument(f"capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._index = KeyIndex()
        self._order = RecencyList()
        self._lock = FairLock()

    def put(self, key: K, value: V) -> None:
        _check_key(key)
        with self._lock:
            index = self._index.lookup(key)
            if index is not None:
                # Update in place and mark as recently used
                self._order.entry(index).value = value
                self._order.move_to_head(index)
                return

            # Make room before inserting so size never exceeds capacity
            if len(self._index) >= self._capacity:
                self._evict()

            index = self._order.add_first(key, value)
            self._index.register(key, index)

    def get(self, key: K, default: Optional[Any] = None) -> Optional[V]:
        _check_key(key)
        with self._lock:
            index = self._index.lookup(key)
            if index is None:
                return default
            self._order.move_to_head(index)
            return self._order.entry(index).value

    def remove(self, key: K, default: Optional[Any] = None) -> Optional[V]:
        _check_key(key)
        with self._lock:
            index = self._index.discard(key)
            if index is None:
                return default
            return self._order.remove(index).value

    def size(self) -> int:
        with self._lock:
            return len(self._index)

    def capacity(self) -> int:
        return self._capacity

    def clear(self) -> None:
        with self._lock:
            self._index.clear()
            self._order.clear()

    def keys(self) -> List[K]:
        """Snapshot of the cached keys, most recently used first."""
        with self._lock:
            return [entry.key for entry in self._order]

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Hashable) -> bool:
        """Membership check that leaves the recency order untouched."""
        if key is None:
            return False
        with self._lock:
            return key in self._index

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={self.size()})"

    def _evict(self) -> None:
        """Drops the tail of the recency order. Caller holds the lock."""
        victim = self._order.remove_tail()
        if victim is not None:
            self._index.discard(victim.key)
            logging.debug(f"Evicting LRU victim: {victim.key!r}")


def _check_key(key: Any) -> None:
    if key is None:
        raise InvalidArgument("key is None")
