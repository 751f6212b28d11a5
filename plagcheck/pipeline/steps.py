from plagcheck.analysis.aggregator import Aggregator
from plagcheck.analysis.controller import ConcurrencyController
from plagcheck.collaborators.base import BaseAuthorshipClassifier
from plagcheck.collaborators.exceptions import ResponseParseError
from plagcheck.collaborators.models import AIDetectionResult
from plagcheck.extraction.exceptions import ExtractionError, FileTooLargeError
from plagcheck.extraction.factory import TextExtractorFactory
from plagcheck.logging.logger import Log
from plagcheck.pipeline.exceptions import PipelineInputError
from plagcheck.pipeline.models import PipelineContext
from plagcheck.pipeline.pipeline import PipelineStep
from plagcheck.text.chunker import Chunker
from plagcheck.text.exceptions import TextValidationError
from plagcheck.text.normalizer import TextNormalizer


class ValidateInputStep(PipelineStep):
    def __init__(self, max_file_size_bytes: int) -> None:
        self._max_file_size = max_file_size_bytes

    def run(self, context: PipelineContext) -> PipelineContext:
        pipeline_input = context.pipeline_input
        if pipeline_input.has_text and pipeline_input.has_file:
            raise PipelineInputError("Provide either text or an uploaded document, not both.")
        if not pipeline_input.has_text and not pipeline_input.has_file:
            raise PipelineInputError("Please provide either text or an uploaded document.")
        if pipeline_input.has_file and len(pipeline_input.file_bytes or b"") > self._max_file_size:
            size_mb = len(pipeline_input.file_bytes or b"") / 1024 / 1024
            limit_mb = self._max_file_size / 1024 / 1024
            raise FileTooLargeError(
                f"File too large. Limit {limit_mb:.0f}MB. Your file is {size_mb:.2f}MB."
            )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor_factory: TextExtractorFactory) -> None:
        self._extractor_factory = extractor_factory

    def run(self, context: PipelineContext) -> PipelineContext:
        pipeline_input = context.pipeline_input
        if pipeline_input.has_text:
            context.raw_text = pipeline_input.text or ""
            return context

        extractor = self._extractor_factory.for_file(pipeline_input.file_name)
        context.raw_text = extractor.extract(pipeline_input.file_bytes or b"")
        Log.info(
            f"[{context.run_id}] Extracted {len(context.raw_text)} chars "
            f"from '{pipeline_input.file_name}'"
        )
        return context


class NormalizeTextStep(PipelineStep):
    def __init__(self, normalizer: TextNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            context.normalized = self._normalizer.normalize(context.raw_text)
        except TextValidationError as exc:
            if context.pipeline_input.has_file:
                raise ExtractionError(
                    "No readable text found in this file. If your file is a scanned "
                    "image, use OCR or upload the original text."
                ) from exc
            raise
        if context.normalized.truncated:
            Log.warning(
                f"[{context.run_id}] Text truncated from "
                f"{context.normalized.original_length} to {len(context.normalized)} chars"
            )
        return context


class ChunkTextStep(PipelineStep):
    def __init__(self, chunker: Chunker) -> None:
        self._chunker = chunker

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.normalized is None:
            raise ValueError("PipelineContext.normalized must be set before chunking")
        context.chunks = self._chunker.chunk(context.normalized.text)
        Log.info(f"[{context.run_id}] Split text into {len(context.chunks)} chunks")
        return context


class AnalyzeChunksStep(PipelineStep):
    def __init__(self, controller: ConcurrencyController) -> None:
        self._controller = controller

    def run(self, context: PipelineContext) -> PipelineContext:
        context.analysis = self._controller.run(context.chunks)
        Log.info(
            f"[{context.run_id}] Analyzed {context.analysis.processed_chunks}/"
            f"{context.analysis.total_chunks} chunks: "
            f"{len(context.analysis.segments)} suspicious, "
            f"{context.analysis.unscored_chunks} unscored"
        )
        return context


class ClassifyAuthorshipStep(PipelineStep):
    def __init__(self, classifier: BaseAuthorshipClassifier) -> None:
        self._classifier = classifier

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.normalized is None:
            raise ValueError("PipelineContext.normalized must be set before classification")
        try:
            context.detection = self._classifier.classify_authorship(context.normalized.text)
        except ResponseParseError as exc:
            Log.warning(f"[{context.run_id}] Authorship response unusable: {exc}")
            context.detection = AIDetectionResult.undetermined()
            context.notices.append(
                "AI-authorship classification returned an unreadable response; "
                "the authorship result is a neutral fallback."
            )
        return context


class AggregateStep(PipelineStep):
    def __init__(self, aggregator: Aggregator) -> None:
        self._aggregator = aggregator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.normalized is None or context.analysis is None or context.detection is None:
            raise ValueError(
                "PipelineContext.normalized, analysis and detection must be set before aggregation"
            )
        context.report = self._aggregator.aggregate(
            context.normalized,
            context.analysis,
            context.detection,
            extra_notices=context.notices,
        )
        Log.info(
            f"[{context.run_id}] Report ready: {context.report.plagiarism_percentage:.1f}% "
            f"risk={context.report.risk_level.value} "
            f"status={context.report.analysis_status.value}"
        )
        return context
