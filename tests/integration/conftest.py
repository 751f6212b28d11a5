import os
import uuid
from collections.abc import Generator

import pytest
import redis

from plagcheck.cache.redis_cache import RedisCache


def _redis_url() -> str:
    return os.environ.get("TEST_REDIS_URL", "redis://localhost:6379/15")


@pytest.fixture(scope="session")
def redis_url() -> str:
    return _redis_url()


@pytest.fixture(scope="session")
def redis_cache(redis_url: str) -> RedisCache:
    try:
        return RedisCache.connect(redis_url, connect_timeout_seconds=0.5)
    except redis.RedisError as e:
        pytest.skip(f"Redis not available at {redis_url}: {e}. Set TEST_REDIS_URL")


@pytest.fixture
def key_prefix(redis_url: str) -> Generator[str, None, None]:
    prefix = f"plagcheck:test:{uuid.uuid4().hex}"
    yield prefix
    try:
        client = redis.Redis.from_url(redis_url, socket_connect_timeout=0.5)
        for key in client.scan_iter(f"{prefix}*"):
            client.delete(key)
    except redis.RedisError:
        pass
