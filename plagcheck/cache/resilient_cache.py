"""Cache facade that never fails its caller.

The primary backend is created lazily on first use. If it cannot be created
(e.g. Redis unreachable within the connect timeout) the facade switches to the
local store for the rest of its lifetime and never retries the primary.
Errors raised by whichever backend is active are logged and treated as a miss.
"""

import threading
from collections.abc import Callable
from typing import Any

from plagcheck.cache.base import BaseCache
from plagcheck.cache.local_cache import LocalCache
from plagcheck.logging.logger import Log


class ResilientCache(BaseCache):
    def __init__(
        self,
        fallback: LocalCache,
        primary_factory: Callable[[], BaseCache] | None = None,
    ) -> None:
        self._fallback = fallback
        self._primary_factory = primary_factory
        self._backend: BaseCache | None = None
        self._init_lock = threading.Lock()

    @property
    def using_fallback(self) -> bool:
        return self._resolve_backend() is self._fallback

    def get(self, key: str) -> Any | None:
        try:
            return self._resolve_backend().get(key)
        except Exception as exc:
            Log.warning(f"Cache get failed for '{key}', treating as miss: {exc}")
            return None

    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        try:
            self._resolve_backend().set(key, value, ttl_seconds)
        except Exception as exc:
            Log.warning(f"Cache set failed for '{key}': {exc}")

    def delete(self, key: str) -> None:
        try:
            self._resolve_backend().delete(key)
        except Exception as exc:
            Log.warning(f"Cache delete failed for '{key}': {exc}")

    def _resolve_backend(self) -> BaseCache:
        if self._backend is not None:
            return self._backend
        with self._init_lock:
            if self._backend is None:
                self._backend = self._create_backend()
        return self._backend

    def _create_backend(self) -> BaseCache:
        if self._primary_factory is None:
            Log.info("Cache: using in-process LRU store")
            return self._fallback
        try:
            backend = self._primary_factory()
        except Exception as exc:
            Log.warning(f"Cache: primary backend unavailable, using in-process store: {exc}")
            return self._fallback
        Log.info("Cache: using primary backend")
        return backend
