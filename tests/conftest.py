"""
Pytest configuration for hotcache tests
"""
import os

import pytest

from hotcache.cache_manager import CacheManager
from hotcache.engine.lru_cache import LRUCache
from hotcache.engine.recency_list import RecencyList


@pytest.fixture
def recency_list():
    return RecencyList()


@pytest.fixture
def cache3():
    """Empty LRU cache with room for three entries"""
    return LRUCache(3)


@pytest.fixture
def manager():
    return CacheManager()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep HOTCACHE_* variables from the host out of the tests"""
    for name in list(os.environ):
        if name.startswith("HOTCACHE_"):
            monkeypatch.delenv(name, raising=False)
    yield
