import logging
import threading
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from hotcache.cache import Cache
from hotcache.eviction_policy import EvictionPolicy
from hotcache.exceptions import InvalidArgument
from hotcache.factory import create_cache

DEFAULT_CAPACITY = 1024


class CacheManager:
    """
    Registry of independent named caches.

    Holds name -> Cache and builds new caches through the factory. The
    registry lock only protects the mapping itself; each cache guards its own
    contents. Create one and pass it to whoever needs multi-cache access.
    """
    def __init__(self):
        self._caches: Dict[str, Cache] = {}
        self._lock = threading.Lock()

    def create_named_cache(
        self,
        name: str,
        policy: Union[EvictionPolicy, str] = EvictionPolicy.LRU,
        capacity: int = DEFAULT_CAPACITY,
    ) -> Cache:
        """
        Creates a cache and registers it under `name`.
        An existing cache with the same name is replaced.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("cache name is required")

        # Build outside the lock: a failed construction leaves the registry untouched
        cache = create_cache(policy, capacity)
        with self._lock:
            previous = self._caches.get(name)
            self._caches[name] = cache

        if previous is not None:
            logging.warning(f"Cache '{name}' replaced by a new {cache.policy.value} cache (capacity={capacity}).")
        else:
            logging.info(f"Cache '{name}' created: policy={cache.policy.value}, capacity={capacity}.")
        return cache

    def get_cache(self, name: str) -> Optional[Cache]:
        with self._lock:
            return self._caches.get(name)

    def drop_cache(self, name: str) -> Optional[Cache]:
        """Unregisters `name` and returns the cache it held (None if unknown)."""
        with self._lock:
            cache = self._caches.pop(name, None)
        if cache is not None:
            logging.info(f"Cache '{name}' dropped.")
        return cache

    def list_caches(self) -> Mapping[str, Cache]:
        """Read-only snapshot of the registry; later changes are not reflected."""
        with self._lock:
            return MappingProxyType(dict(self._caches))

    def __len__(self) -> int:
        with self._lock:
            return len(self._caches)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._caches
