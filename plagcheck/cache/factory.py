from functools import partial

from plagcheck.cache.local_cache import LocalCache
from plagcheck.cache.redis_cache import RedisCache
from plagcheck.cache.resilient_cache import ResilientCache
from plagcheck.config.settings import Settings


class CacheFactory:
    """Creates the configured cache: Redis with in-process fallback, or in-process only."""

    @classmethod
    def create(cls, settings: Settings) -> ResilientCache:
        fallback = LocalCache(
            max_entries=settings.cache_local_max_entries,
            default_ttl_seconds=settings.cache_ttl_seconds,
        )
        url = settings.cache_redis_url.strip()
        if not url:
            return ResilientCache(fallback=fallback)
        return ResilientCache(
            fallback=fallback,
            primary_factory=partial(
                RedisCache.connect,
                url,
                settings.cache_connect_timeout_seconds,
            ),
        )
