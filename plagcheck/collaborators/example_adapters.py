"""Deterministic collaborator adapters.

No network calls. Used for local development, the "example" providers and
tests. Matching is by substring so fixtures stay readable.
"""

from collections.abc import Mapping, Sequence

from plagcheck.collaborators.base import (
    BaseAuthorshipClassifier,
    BaseSimilarityScorer,
    BaseSourceFinder,
)
from plagcheck.collaborators.models import AIDetectionResult, AIVerdict, SourceMatch


class ExampleSourceFinder(BaseSourceFinder):
    """Returns the sources registered under any marker the chunk contains."""

    def __init__(self, sources_by_marker: Mapping[str, Sequence[SourceMatch]] | None = None) -> None:
        self._sources_by_marker = dict(sources_by_marker or {})

    def find_sources(self, chunk_text: str) -> list[SourceMatch]:
        found: list[SourceMatch] = []
        for marker, sources in self._sources_by_marker.items():
            if marker in chunk_text:
                found.extend(sources)
        return found


class DisabledSourceFinder(BaseSourceFinder):
    """Stands in when web search is switched off."""

    @property
    def available(self) -> bool:
        return False

    def find_sources(self, chunk_text: str) -> list[SourceMatch]:
        _ = chunk_text
        return []


class ExampleSimilarityScorer(BaseSimilarityScorer):
    """Scores by the first registered marker found in the snippet."""

    def __init__(self, scores_by_marker: Mapping[str, float] | None = None, default: float = 0.0) -> None:
        self._scores_by_marker = dict(scores_by_marker or {})
        self._default = default

    def score_similarity(self, chunk_text: str, candidate_snippet: str) -> float:
        _ = chunk_text
        for marker, score in self._scores_by_marker.items():
            if marker in candidate_snippet:
                return score
        return self._default


class ExampleAuthorshipClassifier(BaseAuthorshipClassifier):
    """Returns a fixed judgment."""

    def __init__(self, likelihood: float = 0.2, verdict: AIVerdict | None = None) -> None:
        self._result = (
            AIDetectionResult(likelihood=likelihood, verdict=verdict)
            if verdict is not None
            else AIDetectionResult.from_likelihood(likelihood)
        )

    def classify_authorship(self, full_text: str) -> AIDetectionResult:
        _ = full_text
        return self._result
