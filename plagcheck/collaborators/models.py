from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

LIKELY_AI_THRESHOLD = 0.7
LIKELY_HUMAN_THRESHOLD = 0.3
MIN_LIKELIHOOD = 0.01
MAX_LIKELIHOOD = 0.99


class AIVerdict(str, Enum):
    LIKELY_AI = "likely_ai"
    LIKELY_HUMAN = "likely_human"
    UNCERTAIN = "uncertain"


@dataclass(frozen=True)
class SourceMatch:
    """A web source candidate; similarity_score is 0.0 until scored."""

    url: str
    title: str | None = None
    snippet: str | None = None
    similarity_score: float = 0.0

    def comparison_text(self) -> str:
        return f"{self.title or ''}\n{self.snippet or ''}".strip()

    def with_score(self, score: float) -> "SourceMatch":
        return SourceMatch(
            url=self.url,
            title=self.title,
            snippet=self.snippet,
            similarity_score=score,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SourceMatch":
        return cls(
            url=str(data["url"]),
            title=data.get("title"),
            snippet=data.get("snippet"),
            similarity_score=float(data.get("similarity_score", 0.0)),
        )


def verdict_for(likelihood: float) -> AIVerdict:
    """Map a likelihood to the verdict its thresholds imply."""
    if likelihood >= LIKELY_AI_THRESHOLD:
        return AIVerdict.LIKELY_AI
    if likelihood <= LIKELY_HUMAN_THRESHOLD:
        return AIVerdict.LIKELY_HUMAN
    return AIVerdict.UNCERTAIN


def clamp_likelihood(value: float) -> float:
    return max(MIN_LIKELIHOOD, min(MAX_LIKELIHOOD, value))


@dataclass(frozen=True)
class AIDetectionResult:
    """Authorship judgment. likelihood lies strictly inside (0, 1)."""

    likelihood: float
    verdict: AIVerdict

    @classmethod
    def from_likelihood(cls, likelihood: float) -> "AIDetectionResult":
        clamped = clamp_likelihood(likelihood)
        return cls(likelihood=clamped, verdict=verdict_for(clamped))

    @classmethod
    def undetermined(cls) -> "AIDetectionResult":
        return cls(likelihood=0.5, verdict=AIVerdict.UNCERTAIN)

    def consistent(self) -> "AIDetectionResult":
        """Return a copy whose verdict agrees with the likelihood thresholds."""
        return AIDetectionResult.from_likelihood(self.likelihood)

    def to_dict(self) -> dict[str, Any]:
        return {"likelihood": self.likelihood, "verdict": self.verdict.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AIDetectionResult":
        return cls(
            likelihood=float(data["likelihood"]),
            verdict=AIVerdict(data["verdict"]),
        )
