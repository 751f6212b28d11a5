from abc import ABC, abstractmethod

from plagcheck.collaborators.models import AIDetectionResult, SourceMatch


class BaseSourceFinder(ABC):
    """Contract for web-source search adapters."""

    @property
    def available(self) -> bool:
        """False when searching is switched off and results are always empty."""
        return True

    @abstractmethod
    def find_sources(self, chunk_text: str) -> list[SourceMatch]:
        """Return candidate web sources for a chunk (unscored, possibly empty).

        Raises:
            ConfigurationError: if the search credential is missing.
            UpstreamError: on network or service failure.
            ResponseParseError: if the response cannot be interpreted.
        """


class BaseSimilarityScorer(ABC):
    """Contract for chunk-vs-source similarity adapters."""

    @abstractmethod
    def score_similarity(self, chunk_text: str, candidate_snippet: str) -> float:
        """Return a similarity in [0, 1]. Unparseable output yields 0.0.

        Raises:
            ConfigurationError: if the scoring credential is missing.
            UpstreamError: on network or service failure.
        """


class BaseAuthorshipClassifier(ABC):
    """Contract for AI-authorship classification adapters."""

    @abstractmethod
    def classify_authorship(self, full_text: str) -> AIDetectionResult:
        """Judge whether the text was machine-generated.

        Raises:
            ConfigurationError: if the classifier credential is missing.
            UpstreamError: on network or service failure.
            ResponseParseError: if the response cannot be interpreted.
        """
