import json
from typing import Any

import redis

from plagcheck.cache.base import BaseCache


class RedisCache(BaseCache):
    """Redis-backed store. Values are stored as JSON; errors propagate to the caller."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def connect(cls, url: str, connect_timeout_seconds: float) -> "RedisCache":
        """Open a client and verify the server answers within the timeout.

        Raises:
            redis.RedisError: if the server cannot be reached.
        """
        client = redis.Redis.from_url(
            url,
            socket_connect_timeout=connect_timeout_seconds,
            socket_timeout=connect_timeout_seconds,
        )
        client.ping()
        return cls(client)

    def get(self, key: str) -> Any | None:
        raw = self._client.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        serialized = json.dumps(value)
        if ttl_seconds is not None and ttl_seconds > 0:
            self._client.setex(key, ttl_seconds, serialized)
        else:
            self._client.set(key, serialized)

    def delete(self, key: str) -> None:
        self._client.delete(key)
