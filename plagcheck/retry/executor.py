"""Exponential backoff with jitter around unreliable upstream calls."""

import random
import time
from collections.abc import Callable
from typing import TypeVar

import httpx

from plagcheck.collaborators.exceptions import UpstreamError, UpstreamNetworkError
from plagcheck.logging.logger import Log

T = TypeVar("T")

RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})
JITTER_RATIO = 0.3


def is_retryable(exc: BaseException) -> bool:
    """Network errors, timeouts and 429/502/503/504 responses are retryable."""
    if isinstance(exc, UpstreamNetworkError):
        return True
    if isinstance(exc, UpstreamError):
        return exc.status_code in RETRYABLE_STATUS_CODES
    return isinstance(exc, (httpx.TransportError, ConnectionError, TimeoutError))


class RetryExecutor:
    """Calls a function until it succeeds, fails fatally, or runs out of attempts."""

    def __init__(
        self,
        max_attempts: int = 3,
        initial_delay: float = 0.5,
        max_delay: float = 10.0,
        sleep: Callable[[float], None] = time.sleep,
        rng: random.Random | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._max_attempts = max_attempts
        self._initial_delay = initial_delay
        self._max_delay = max_delay
        self._sleep = sleep
        self._rng = rng or random.Random()

    def run(self, fn: Callable[[], T], description: str = "call") -> T:
        for attempt in range(self._max_attempts):
            try:
                return fn()
            except Exception as exc:
                if not is_retryable(exc) or attempt == self._max_attempts - 1:
                    raise
                delay = self.delay_for(attempt)
                Log.warning(
                    f"Retry {attempt + 1}/{self._max_attempts - 1} for {description} "
                    f"in {delay:.2f}s: {exc}"
                )
                self._sleep(delay)
        raise AssertionError("unreachable")

    def delay_for(self, attempt: int) -> float:
        base = min(self._initial_delay * (2**attempt), self._max_delay)
        return base + self._rng.uniform(0, JITTER_RATIO * base)


def retry(
    fn: Callable[[], T],
    max_attempts: int = 3,
    initial_delay: float = 0.5,
    max_delay: float = 10.0,
) -> T:
    """Run fn with exponential backoff; see RetryExecutor."""
    executor = RetryExecutor(
        max_attempts=max_attempts,
        initial_delay=initial_delay,
        max_delay=max_delay,
    )
    return executor.run(fn)
