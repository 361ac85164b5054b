from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from hotcache.cache import Cache
from hotcache.cache_manager import CacheManager
from hotcache.config import CacheSettings, load_settings
from hotcache.eviction_policy import EvictionPolicy
from hotcache.exceptions import InvalidArgument, UnsupportedPolicy

_MISS = object()


class EntryBody(BaseModel):
    value: Any = None


def _describe(cache: Cache) -> dict:
    return {"policy": cache.policy.value, "capacity": cache.capacity(), "size": cache.size()}


def create_app(manager: Optional[CacheManager] = None, settings: Optional[CacheSettings] = None) -> FastAPI:
    """
    Builds the HTTP facade over a CacheManager.
    Keys and cache names travel in the path; values are arbitrary JSON.
    """
    settings = settings or CacheSettings()
    manager = manager if manager is not None else settings.build_manager()

    app = FastAPI(title="hotcache")
    app.state.manager = manager
    app.state.settings = settings

    @app.exception_handler(InvalidArgument)
    async def invalid_argument_handler(request: Request, exc: InvalidArgument):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(UnsupportedPolicy)
    async def unsupported_policy_handler(request: Request, exc: UnsupportedPolicy):
        return JSONResponse(status_code=status.HTTP_501_NOT_IMPLEMENTED, content={"detail": str(exc)})

    def _cache_or_404(name: str) -> Cache:
        cache = manager.get_cache(name)
        if cache is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Cache {name} not found.")
        return cache

    @app.get("/health")
    def health_check():
        """Standard Liveness Probe."""
        return {"status": "ok"}

    @app.get("/caches")
    def list_caches():
        """Returns every registered cache with its policy, capacity and current size."""
        return {name: _describe(cache) for name, cache in manager.list_caches().items()}

    @app.post("/caches/{name}", status_code=status.HTTP_201_CREATED)
    def create_cache_route(name: str, policy: Optional[EvictionPolicy] = None, capacity: Optional[int] = None):
        """Creates (or replaces) the named cache."""
        cache = manager.create_named_cache(
            name,
            policy or settings.default_policy,
            capacity if capacity is not None else settings.default_capacity,
        )
        return {"name": name, **_describe(cache)}

    @app.delete("/caches/{name}")
    def drop_cache_route(name: str):
        if manager.drop_cache(name) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Cache {name} not found.")
        return {"status": "success", "name": name}

    @app.put("/caches/{name}/entries/{key}")
    def put_entry(name: str, key: str, body: EntryBody):
        cache = _cache_or_404(name)
        cache.put(key, body.value)
        return {"key": key, "size": cache.size()}

    @app.get("/caches/{name}/entries/{key}")
    def get_entry(name: str, key: str):
        """Cache lookup. A hit marks the key as most recently used."""
        value = _cache_or_404(name).get(key, _MISS)
        if value is _MISS:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Key {key} not cached.")
        return {"key": key, "value": value}

    @app.delete("/caches/{name}/entries/{key}")
    def remove_entry(name: str, key: str):
        value = _cache_or_404(name).remove(key, _MISS)
        if value is _MISS:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Key {key} not cached.")
        return {"key": key, "value": value}

    @app.delete("/caches/{name}/entries")
    def clear_cache(name: str):
        cache = _cache_or_404(name)
        cache.clear()
        return {"name": name, **_describe(cache)}

    return app


app = create_app(settings=load_settings())
