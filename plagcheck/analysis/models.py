from dataclasses import dataclass, field
from enum import Enum

from plagcheck.collaborators.models import AIVerdict, SourceMatch
from plagcheck.text.models import TextChunk


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class SuspiciousSegment:
    """A chunk range whose best source match exceeded the suspicious threshold."""

    start_index: int
    end_index: int
    text_preview: str
    similarity_score: float
    sources: tuple[SourceMatch, ...] = ()


@dataclass(frozen=True)
class ChunkOutcome:
    """Result of analyzing one chunk; segment is None when nothing matched."""

    chunk: TextChunk
    segment: SuspiciousSegment | None = None


@dataclass(frozen=True)
class AnalysisOutcome:
    """Everything the concurrent stage learned about the chunk list."""

    segments: tuple[SuspiciousSegment, ...] = ()
    total_chunks: int = 0
    processed_chunks: int = 0
    unscored_chunks: int = 0
    search_available: bool = True

    @property
    def chunk_limit_reached(self) -> bool:
        return self.processed_chunks < self.total_chunks


@dataclass
class BatchProgress:
    """Mutable tally kept while batches run."""

    segments: list[SuspiciousSegment] = field(default_factory=list)
    processed: int = 0
    unscored: int = 0


class AnalysisStatus(str, Enum):
    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"
    ERROR = "error"


@dataclass(frozen=True)
class PlagiarismReport:
    """Final document-level report. Built once per run, never mutated."""

    normalized_text_length: int
    plagiarism_percentage: float
    risk_level: RiskLevel
    suspicious_segments: tuple[SuspiciousSegment, ...]
    ai_generated_likelihood: float
    ai_verdict: AIVerdict
    explanation: str
    analysis_status: AnalysisStatus
