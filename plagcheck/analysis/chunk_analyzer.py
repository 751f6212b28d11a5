from plagcheck.analysis.models import ChunkOutcome, SuspiciousSegment
from plagcheck.collaborators.base import BaseSimilarityScorer, BaseSourceFinder
from plagcheck.collaborators.models import SourceMatch
from plagcheck.logging.logger import Log
from plagcheck.text.models import TextChunk

PREVIEW_CHARS = 200


class ChunkAnalyzer:
    """Searches the web for one chunk and scores it against the top candidates."""

    def __init__(
        self,
        source_finder: BaseSourceFinder,
        similarity_scorer: BaseSimilarityScorer,
        top_n: int = 3,
        match_threshold: float = 0.3,
        suspicious_threshold: float = 0.5,
    ) -> None:
        self._source_finder = source_finder
        self._similarity_scorer = similarity_scorer
        self._top_n = top_n
        self._match_threshold = match_threshold
        self._suspicious_threshold = suspicious_threshold

    @property
    def search_available(self) -> bool:
        return self._source_finder.available

    def analyze(self, chunk: TextChunk) -> ChunkOutcome:
        candidates = [
            c for c in self._source_finder.find_sources(chunk.text) if c.comparison_text()
        ][: self._top_n]
        matches = self._score_candidates(chunk, candidates)
        if not matches or matches[0].similarity_score <= self._suspicious_threshold:
            return ChunkOutcome(chunk=chunk)

        Log.debug(
            f"Chunk [{chunk.start_index}:{chunk.end_index}] suspicious, "
            f"best score {matches[0].similarity_score:.2f}"
        )
        return ChunkOutcome(
            chunk=chunk,
            segment=SuspiciousSegment(
                start_index=chunk.start_index,
                end_index=chunk.end_index,
                text_preview=_preview(chunk.text),
                similarity_score=matches[0].similarity_score,
                sources=tuple(matches),
            ),
        )

    def _score_candidates(
        self, chunk: TextChunk, candidates: list[SourceMatch]
    ) -> list[SourceMatch]:
        matches: list[SourceMatch] = []
        for candidate in candidates:
            score = self._similarity_scorer.score_similarity(
                chunk.text, candidate.comparison_text()
            )
            if score > self._match_threshold:
                matches.append(candidate.with_score(score))
        matches.sort(key=lambda m: m.similarity_score, reverse=True)
        return matches


def _preview(text: str) -> str:
    if len(text) <= PREVIEW_CHARS:
        return text
    return text[:PREVIEW_CHARS] + "..."
