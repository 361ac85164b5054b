from enum import Enum


class EvictionPolicy(str, Enum):
    """
    Eviction strategies a cache can be built with.

    FIFO is recognised so configuration can name it, but no cache implements
    it yet; the factory rejects it with UnsupportedPolicy.
    """
    LRU = "lru"    # Least Recently Used
    FIFO = "fifo"  # First In, First Out
