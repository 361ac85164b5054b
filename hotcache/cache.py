from typing import Any, Generic, Hashable, Optional, TypeVar

from hotcache.eviction_policy import EvictionPolicy

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Cache(Generic[K, V]):
    """
    Base interface for bounded in-memory caches.

    Every implementation raises InvalidArgument for a None key and keeps
    size() <= capacity() at all times.
    """
    policy: EvictionPolicy

    def put(self, key: K, value: V) -> None:
        """Stores `value` under `key`, evicting if a new key arrives at capacity."""
        raise NotImplementedError

    def get(self, key: K, default: Optional[Any] = None) -> Optional[V]:
        """Returns the value for `key`, or `default` on a miss."""
        raise NotImplementedError

    def remove(self, key: K, default: Optional[Any] = None) -> Optional[V]:
        """Deletes `key` and returns its value, or `default` if it was absent."""
        raise NotImplementedError

    def size(self) -> int:
        raise NotImplementedError

    def capacity(self) -> int:
        raise NotImplementedError

    def clear(self) -> None:
        """Drops every entry. Capacity is unchanged."""
        raise NotImplementedError
