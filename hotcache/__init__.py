"""
hotcache - bounded in-memory key-value caches with LRU eviction.
"""
__version__ = "0.1.0"

from hotcache.cache import Cache
from hotcache.cache_manager import CacheManager
from hotcache.engine.lru_cache import LRUCache
from hotcache.eviction_policy import EvictionPolicy
from hotcache.exceptions import CacheError, InvalidArgument, UnsupportedPolicy
from hotcache.factory import create_cache

__all__ = [
    "Cache",
    "CacheManager",
    "LRUCache",
    "EvictionPolicy",
    "CacheError",
    "InvalidArgument",
    "UnsupportedPolicy",
    "create_cache",
    "__version__",
]
