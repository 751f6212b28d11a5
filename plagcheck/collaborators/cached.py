"""Collaborator wrappers that consult the cache before calling through retries.

A cached value that does not have the expected shape is treated as a miss.
Results arriving after a pipeline has timed out are still written; the values
are derived from immutable inputs so late writes are harmless.
"""

from typing import Any

from plagcheck.cache.base import BaseCache
from plagcheck.cache.keys import authorship_cache_key, similarity_cache_key, sources_cache_key
from plagcheck.collaborators.base import (
    BaseAuthorshipClassifier,
    BaseSimilarityScorer,
    BaseSourceFinder,
)
from plagcheck.collaborators.models import AIDetectionResult, SourceMatch
from plagcheck.logging.logger import Log
from plagcheck.retry.executor import RetryExecutor


class CachedSourceFinder(BaseSourceFinder):
    def __init__(
        self,
        inner: BaseSourceFinder,
        cache: BaseCache,
        retry: RetryExecutor,
        ttl_seconds: int | None = None,
    ) -> None:
        self._inner = inner
        self._cache = cache
        self._retry = retry
        self._ttl = ttl_seconds

    @property
    def available(self) -> bool:
        return self._inner.available

    def find_sources(self, chunk_text: str) -> list[SourceMatch]:
        key = sources_cache_key(chunk_text)
        cached = _decode_sources(self._cache.get(key))
        if cached is not None:
            Log.debug(f"Cache hit: {key}")
            return cached

        sources = self._retry.run(
            lambda: self._inner.find_sources(chunk_text),
            description="web source search",
        )
        self._cache.set(key, [s.to_dict() for s in sources], self._ttl)
        return sources


class CachedSimilarityScorer(BaseSimilarityScorer):
    def __init__(
        self,
        inner: BaseSimilarityScorer,
        cache: BaseCache,
        retry: RetryExecutor,
        ttl_seconds: int | None = None,
    ) -> None:
        self._inner = inner
        self._cache = cache
        self._retry = retry
        self._ttl = ttl_seconds

    def score_similarity(self, chunk_text: str, candidate_snippet: str) -> float:
        key = similarity_cache_key(chunk_text, candidate_snippet)
        cached = self._cache.get(key)
        if isinstance(cached, (int, float)) and not isinstance(cached, bool):
            return float(cached)

        score = self._retry.run(
            lambda: self._inner.score_similarity(chunk_text, candidate_snippet),
            description="similarity scoring",
        )
        self._cache.set(key, score, self._ttl)
        return score


class CachedAuthorshipClassifier(BaseAuthorshipClassifier):
    def __init__(
        self,
        inner: BaseAuthorshipClassifier,
        cache: BaseCache,
        retry: RetryExecutor,
        ttl_seconds: int | None = None,
    ) -> None:
        self._inner = inner
        self._cache = cache
        self._retry = retry
        self._ttl = ttl_seconds

    def classify_authorship(self, full_text: str) -> AIDetectionResult:
        key = authorship_cache_key(full_text)
        cached = _decode_detection(self._cache.get(key))
        if cached is not None:
            return cached

        result = self._retry.run(
            lambda: self._inner.classify_authorship(full_text),
            description="authorship classification",
        )
        self._cache.set(key, result.to_dict(), self._ttl)
        return result


def _decode_sources(value: Any) -> list[SourceMatch] | None:
    if not isinstance(value, list):
        return None
    try:
        return [SourceMatch.from_dict(item) for item in value]
    except (KeyError, TypeError, ValueError):
        return None


def _decode_detection(value: Any) -> AIDetectionResult | None:
    if not isinstance(value, dict):
        return None
    try:
        return AIDetectionResult.from_dict(value)
    except (KeyError, TypeError, ValueError):
        return None
