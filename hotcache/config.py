import os
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

from dotenv import load_dotenv

from hotcache.cache_manager import DEFAULT_CAPACITY, CacheManager
from hotcache.eviction_policy import EvictionPolicy
from hotcache.exceptions import InvalidArgument
from hotcache.factory import resolve_policy


class CacheSpec(NamedTuple):
    """A cache to create at startup."""
    name: str
    policy: EvictionPolicy
    capacity: int


@dataclass
class CacheSettings:
    default_capacity: int = DEFAULT_CAPACITY
    default_policy: EvictionPolicy = EvictionPolicy.LRU
    caches: List[CacheSpec] = field(default_factory=list)
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    def build_manager(self) -> CacheManager:
        """Returns a CacheManager holding every preconfigured cache."""
        manager = CacheManager()
        for spec in self.caches:
            manager.create_named_cache(spec.name, spec.policy, spec.capacity)
        return manager


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {raw!r}") from None


def parse_cache_specs(raw: str, default_policy: EvictionPolicy) -> List[CacheSpec]:
    """
    Parses "name[:policy]:capacity" items separated by commas, e.g.
    "sessions:lru:1024,tiles:256".
    """
    specs: List[CacheSpec] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        parts = [p.strip() for p in item.split(":")]
        if len(parts) == 2:
            name, capacity = parts
            policy = default_policy
        elif len(parts) == 3:
            name, policy_raw, capacity = parts
            policy = resolve_policy(policy_raw)
        else:
            raise InvalidArgument(f"Malformed cache spec {item!r}, expected name[:policy]:capacity")
        if not name:
            raise InvalidArgument(f"Malformed cache spec {item!r}, name is empty")
        specs.append(CacheSpec(name, policy, _parse_int("capacity", capacity)))
    return specs


def load_settings(env_path: Optional[str] = None) -> CacheSettings:
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    default_policy = resolve_policy(os.getenv("HOTCACHE_DEFAULT_POLICY", "lru"))
    return CacheSettings(
        default_capacity=_parse_int("HOTCACHE_DEFAULT_CAPACITY", os.getenv("HOTCACHE_DEFAULT_CAPACITY", str(DEFAULT_CAPACITY))),
        default_policy=default_policy,
        caches=parse_cache_specs(os.getenv("HOTCACHE_CACHES", ""), default_policy),
        log_level=os.getenv("HOTCACHE_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOTCACHE_HOST", "0.0.0.0"),
        port=_parse_int("HOTCACHE_PORT", os.getenv("HOTCACHE_PORT", "8080")),
    )
