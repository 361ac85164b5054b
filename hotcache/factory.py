from typing import Union

from hotcache.cache import Cache
from hotcache.engine.lru_cache import LRUCache
from hotcache.eviction_policy import EvictionPolicy
from hotcache.exceptions import InvalidArgument, UnsupportedPolicy


def resolve_policy(policy: Union[EvictionPolicy, str]) -> EvictionPolicy:
    """Turns a policy selector (enum member or its value, any case) into an EvictionPolicy."""
    if policy is None:
        raise InvalidArgument("policy is None")
    if isinstance(policy, EvictionPolicy):
        return policy
    try:
        return EvictionPolicy(str(policy).strip().lower())
    except ValueError:
        raise UnsupportedPolicy(f"Unsupported eviction policy: {policy!r}") from None


def create_cache(policy: Union[EvictionPolicy, str], capacity: int) -> Cache:
    """
    Builds a cache for the given eviction policy.

    Args:
        policy: The eviction strategy (e.g. EvictionPolicy.LRU or "lru").
        capacity: Maximum number of live entries, must be positive.
    Returns:
        A ready-to-use Cache.
    Raises:
        InvalidArgument: policy is None or capacity is not positive.
        UnsupportedPolicy: the policy has no implementation.
    """
    policy = resolve_policy(policy)
    if policy is EvictionPolicy.LRU:
        return LRUCache(capacity)
    # FIFO and any future selector land here until they get an implementation
    raise UnsupportedPolicy(f"Unsupported eviction policy: {policy.value}")
