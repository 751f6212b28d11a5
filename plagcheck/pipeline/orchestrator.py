"""End-to-end plagiarism / AI-authorship pipeline.

Pipeline: validate -> extract -> normalize -> chunk -> analyze (concurrent)
-> classify authorship -> aggregate.

run() never raises. Every failure becomes a PipelineResult with an error kind.
The whole run is bounded by a deadline; when it expires run() returns at once
while in-flight upstream calls may keep running in the background (their late
cache writes are harmless). Stopping to wait does not stop the work.
"""

import uuid
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

from plagcheck.analysis.aggregator import Aggregator
from plagcheck.analysis.chunk_analyzer import ChunkAnalyzer
from plagcheck.analysis.controller import ConcurrencyController
from plagcheck.cache.base import BaseCache
from plagcheck.cache.factory import CacheFactory
from plagcheck.collaborators.exceptions import ConfigurationError, UpstreamError
from plagcheck.collaborators.factory import CollaboratorFactory
from plagcheck.config.settings import Settings
from plagcheck.extraction.exceptions import (
    ExtractionError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from plagcheck.extraction.factory import TextExtractorFactory
from plagcheck.logging.logger import Log
from plagcheck.pipeline.exceptions import PipelineInputError
from plagcheck.pipeline.models import ErrorKind, PipelineContext, PipelineInput, PipelineResult
from plagcheck.pipeline.pipeline import PipelineStep
from plagcheck.pipeline.steps import (
    AggregateStep,
    AnalyzeChunksStep,
    ChunkTextStep,
    ClassifyAuthorshipStep,
    ExtractTextStep,
    NormalizeTextStep,
    ValidateInputStep,
)
from plagcheck.text.chunker import Chunker
from plagcheck.text.exceptions import TextValidationError
from plagcheck.text.normalizer import TextNormalizer

_BAD_REQUEST_ERRORS = (
    PipelineInputError,
    FileTooLargeError,
    UnsupportedFileTypeError,
    TextValidationError,
    ConfigurationError,
)


def classify_error(exc: BaseException) -> ErrorKind:
    if isinstance(exc, _BAD_REQUEST_ERRORS):
        return ErrorKind.BAD_REQUEST
    if isinstance(exc, ExtractionError):
        return ErrorKind.EXTRACTION_ERROR
    if isinstance(exc, UpstreamError):
        return ErrorKind.UPSTREAM_ERROR
    return ErrorKind.ANALYSIS_ERROR


def error_message(kind: ErrorKind, exc: BaseException) -> str:
    if kind == ErrorKind.UPSTREAM_ERROR:
        return (
            f"Upstream service unavailable: {exc}. "
            "Please try again later."
        )
    if kind == ErrorKind.ANALYSIS_ERROR:
        return "An unexpected error occurred during analysis."
    return str(exc) or kind.value


class PipelineOrchestrator:
    """Runs the pipeline steps under a deadline and converts every outcome to a result."""

    def __init__(
        self,
        steps: list[PipelineStep],
        deadline_seconds: float | None = 45.0,
    ) -> None:
        self._steps = steps
        self._deadline = deadline_seconds if deadline_seconds and deadline_seconds > 0 else None

    def run(self, pipeline_input: PipelineInput) -> PipelineResult:
        run_id = uuid.uuid4().hex[:12]
        try:
            Log.info(f"[{run_id}] Pipeline started")
            executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"pipeline-{run_id}")
            try:
                future = executor.submit(self._execute, PipelineContext(run_id, pipeline_input))
                return future.result(timeout=self._deadline)
            except FuturesTimeoutError:
                Log.error(f"[{run_id}] Pipeline deadline of {self._deadline}s exceeded")
                return PipelineResult.failure(
                    ErrorKind.UPSTREAM_ERROR,
                    f"Analysis timed out after {self._deadline:g} seconds. Please try again later.",
                )
            finally:
                executor.shutdown(wait=False, cancel_futures=True)
        except Exception as exc:
            Log.error(f"[{run_id}] Pipeline crashed outside a step: {exc!r}")
            return PipelineResult.failure(
                ErrorKind.ANALYSIS_ERROR,
                error_message(ErrorKind.ANALYSIS_ERROR, exc),
            )

    def _execute(self, context: PipelineContext) -> PipelineResult:
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            kind = classify_error(exc)
            Log.error(f"[{context.run_id}] {type(exc).__name__} -> {kind.value}: {exc}")
            return PipelineResult.failure(kind, error_message(kind, exc))

        if context.report is None:
            return PipelineResult.failure(
                ErrorKind.ANALYSIS_ERROR, "Plagiarism checker returned no report."
            )
        Log.info(f"[{context.run_id}] Pipeline finished: {context.report.analysis_status.value}")
        return PipelineResult.success(context.report)


def build_orchestrator(settings: Settings, cache: BaseCache | None = None) -> PipelineOrchestrator:
    """Build a PipelineOrchestrator with all configured adapters."""
    cache = cache if cache is not None else CacheFactory.create(settings)
    retry = CollaboratorFactory.create_retry(settings)
    analyzer = ChunkAnalyzer(
        source_finder=CollaboratorFactory.create_source_finder(settings, cache, retry),
        similarity_scorer=CollaboratorFactory.create_similarity_scorer(settings, cache, retry),
        top_n=settings.top_sources_per_chunk,
        match_threshold=settings.match_threshold,
        suspicious_threshold=settings.suspicious_threshold,
    )
    controller = ConcurrencyController(
        analyzer,
        max_concurrent=settings.max_concurrent_chunks,
        batch_pacing_seconds=settings.batch_pacing_seconds,
        max_chunks_to_process=settings.max_chunks_to_process,
    )
    aggregator = Aggregator(
        plagiarism_weight=settings.plagiarism_weight,
        ai_weight=settings.ai_weight,
        high_threshold=settings.high_risk_threshold,
        medium_threshold=settings.medium_risk_threshold,
    )
    steps: list[PipelineStep] = [
        ValidateInputStep(settings.max_file_size_bytes),
        ExtractTextStep(TextExtractorFactory(settings)),
        NormalizeTextStep(TextNormalizer(settings.min_text_length, settings.max_text_length)),
        ChunkTextStep(Chunker(settings.chunk_size, settings.chunk_overlap)),
        AnalyzeChunksStep(controller),
        ClassifyAuthorshipStep(
            CollaboratorFactory.create_authorship_classifier(settings, cache, retry)
        ),
        AggregateStep(aggregator),
    ]
    return PipelineOrchestrator(steps, deadline_seconds=settings.pipeline_deadline_seconds)
