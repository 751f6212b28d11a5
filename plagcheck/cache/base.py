from abc import ABC, abstractmethod
from typing import Any


class BaseCache(ABC):
    """Contract for key-value stores with per-entry TTL."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if missing or expired."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store a JSON-serializable value.

        ttl_seconds=None uses the backend default; zero or negative means no expiry.
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key if present."""
