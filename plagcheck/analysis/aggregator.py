"""Turns per-chunk findings and the authorship judgment into one report.

Plagiarism percentage is character coverage: suspicious ranges are merged so
overlapping chunk windows are counted once, then divided by the normalized
text length.
"""

from collections.abc import Iterable, Sequence

from plagcheck.analysis.models import (
    AnalysisOutcome,
    AnalysisStatus,
    PlagiarismReport,
    RiskLevel,
    SuspiciousSegment,
)
from plagcheck.collaborators.models import LIKELY_AI_THRESHOLD, AIDetectionResult, AIVerdict
from plagcheck.text.models import NormalizedText

_ESCALATION = {
    RiskLevel.LOW: RiskLevel.MEDIUM,
    RiskLevel.MEDIUM: RiskLevel.HIGH,
    RiskLevel.HIGH: RiskLevel.HIGH,
}


def merge_ranges(ranges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping or touching [start, end) ranges into sorted disjoint ones."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(ranges):
        if merged and start <= merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def merge_segments(segments: Iterable[SuspiciousSegment]) -> list[tuple[int, int]]:
    return merge_ranges((s.start_index, s.end_index) for s in segments)


def plagiarism_percentage(segments: Sequence[SuspiciousSegment], text_length: int) -> float:
    if not segments or text_length <= 0:
        return 0.0
    covered = sum(end - start for start, end in merge_segments(segments))
    return max(0.0, min(100.0, covered / text_length * 100))


class Aggregator:
    """Computes coverage, risk level and explanation for a finished analysis."""

    def __init__(
        self,
        plagiarism_weight: float = 0.6,
        ai_weight: float = 0.4,
        high_threshold: float = 60.0,
        medium_threshold: float = 30.0,
    ) -> None:
        self._plagiarism_weight = plagiarism_weight
        self._ai_weight = ai_weight
        self._high_threshold = high_threshold
        self._medium_threshold = medium_threshold

    def risk_level(self, percentage: float, detection: AIDetectionResult) -> RiskLevel:
        blended = (
            percentage * self._plagiarism_weight
            + detection.likelihood * 100 * self._ai_weight
        )
        if blended >= self._high_threshold:
            level = RiskLevel.HIGH
        elif blended >= self._medium_threshold:
            level = RiskLevel.MEDIUM
        else:
            level = RiskLevel.LOW

        if detection.verdict == AIVerdict.LIKELY_AI and detection.likelihood > LIKELY_AI_THRESHOLD:
            level = _ESCALATION[level]
        return level

    def aggregate(
        self,
        normalized: NormalizedText,
        analysis: AnalysisOutcome,
        detection: AIDetectionResult,
        extra_notices: Sequence[str] = (),
    ) -> PlagiarismReport:
        detection = detection.consistent()
        segments = tuple(sorted(analysis.segments, key=lambda s: s.start_index))
        percentage = plagiarism_percentage(segments, len(normalized))
        risk = self.risk_level(percentage, detection)
        notices = degradation_notices(normalized, analysis) + list(extra_notices)

        return PlagiarismReport(
            normalized_text_length=len(normalized),
            plagiarism_percentage=percentage,
            risk_level=risk,
            suspicious_segments=segments,
            ai_generated_likelihood=detection.likelihood,
            ai_verdict=detection.verdict,
            explanation=build_explanation(
                percentage, len(segments), detection, risk, notices
            ),
            analysis_status=(
                AnalysisStatus.PARTIAL_SUCCESS if notices else AnalysisStatus.SUCCESS
            ),
        )


def degradation_notices(normalized: NormalizedText, analysis: AnalysisOutcome) -> list[str]:
    notices: list[str] = []
    if not analysis.search_available:
        notices.append(
            "Web search is not configured. "
            "Plagiarism detection against public sources was skipped."
        )
    if normalized.truncated:
        notices.append(
            f"Text was truncated from {normalized.original_length:,} to "
            f"{len(normalized):,} characters before analysis."
        )
    if analysis.chunk_limit_reached:
        notices.append(
            f"Chunk limit reached: only the first {analysis.processed_chunks} of "
            f"{analysis.total_chunks} chunks were compared against web sources."
        )
    if analysis.unscored_chunks:
        plural = "s" if analysis.unscored_chunks != 1 else ""
        notices.append(
            f"{analysis.unscored_chunks} chunk{plural} could not be scored "
            "and were skipped."
        )
    return notices


def build_explanation(
    percentage: float,
    segment_count: int,
    detection: AIDetectionResult,
    risk: RiskLevel,
    notices: Sequence[str] = (),
) -> str:
    parts = list(notices)

    if segment_count == 0:
        parts.append("No significant plagiarism detected against public web sources.")
    else:
        plural = "s" if segment_count != 1 else ""
        parts.append(
            f"Found {segment_count} suspicious segment{plural} with "
            f"{percentage:.1f}% of the text potentially plagiarized."
        )

    if detection.verdict == AIVerdict.LIKELY_AI:
        parts.append(
            "AI-generated text detection indicates this text is likely AI-generated "
            f"({detection.likelihood * 100:.0f}% confidence)."
        )
    elif detection.verdict == AIVerdict.LIKELY_HUMAN:
        parts.append(
            "AI-generated text detection indicates this text is likely human-written "
            f"({(1 - detection.likelihood) * 100:.0f}% confidence)."
        )
    else:
        parts.append(
            "AI-generated text detection was unable to determine with confidence "
            "whether this text is human or AI-generated."
        )

    parts.append(f"Overall risk level: {risk.value.upper()}.")
    return " ".join(parts)
