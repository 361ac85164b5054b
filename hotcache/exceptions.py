class CacheError(Exception):
    """Root of every error raised by hotcache."""


class InvalidArgument(CacheError, ValueError):
    """
    A caller passed input the cache can never accept: a None key, a
    non-positive capacity, an empty cache name or malformed settings.
    Retrying with the same input fails the same way.
    """


class UnsupportedPolicy(CacheError):
    """The requested eviction policy has no implementation."""
