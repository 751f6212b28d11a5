from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from plagcheck.analysis.models import AnalysisOutcome, AnalysisStatus, PlagiarismReport
from plagcheck.collaborators.models import AIDetectionResult
from plagcheck.text.models import NormalizedText, TextChunk


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    EXTRACTION_ERROR = "extraction_error"
    UPSTREAM_ERROR = "upstream_error"
    ANALYSIS_ERROR = "analysis_error"


@dataclass(frozen=True)
class PipelineInput:
    """Exactly one of text / file_bytes must be supplied."""

    text: str | None = None
    file_bytes: bytes | None = None
    file_name: str | None = None

    @property
    def has_text(self) -> bool:
        return isinstance(self.text, str) and bool(self.text.strip())

    @property
    def has_file(self) -> bool:
        return bool(self.file_bytes)


@dataclass(frozen=True)
class PipelineResult:
    """The orchestrator's only output. ok=True always carries a report."""

    ok: bool
    report: PlagiarismReport | None = None
    error_kind: ErrorKind | None = None
    message: str | None = None

    @classmethod
    def success(cls, report: PlagiarismReport) -> "PipelineResult":
        return cls(ok=True, report=report)

    @classmethod
    def failure(cls, error_kind: ErrorKind, message: str) -> "PipelineResult":
        return cls(ok=False, error_kind=error_kind, message=message)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation (enum members serialize as their values)."""
        if self.ok and self.report is not None:
            return {"ok": True, "report": _jsonable(asdict(self.report))}
        return {
            "ok": False,
            "analysis_status": AnalysisStatus.ERROR.value,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "message": self.message,
        }


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


@dataclass(slots=True)
class PipelineContext:
    run_id: str
    pipeline_input: PipelineInput
    raw_text: str = ""
    normalized: NormalizedText | None = None
    chunks: list[TextChunk] = field(default_factory=list)
    analysis: AnalysisOutcome | None = None
    detection: AIDetectionResult | None = None
    notices: list[str] = field(default_factory=list)
    report: PlagiarismReport | None = None
