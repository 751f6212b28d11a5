"""Bounded-concurrency fan-out of chunk analysis.

Chunks run in batches of at most max_concurrent on a thread pool. Each batch is
awaited in full before the next starts, with a fixed pause in between.

Failure policy per batch:
- ResponseParseError from a chunk is absorbed; the chunk counts as unscored.
- Any other error (upstream failure after retries, missing configuration,
  unexpected bug) aborts the remaining batches and is re-raised. When several
  chunks fail, the error of the earliest chunk wins.
"""

import time
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, wait

from plagcheck.analysis.chunk_analyzer import ChunkAnalyzer
from plagcheck.analysis.models import AnalysisOutcome, BatchProgress, ChunkOutcome
from plagcheck.collaborators.exceptions import ResponseParseError
from plagcheck.logging.logger import Log
from plagcheck.text.models import TextChunk


class ConcurrencyController:
    def __init__(
        self,
        analyzer: ChunkAnalyzer,
        max_concurrent: int = 3,
        batch_pacing_seconds: float = 0.25,
        max_chunks_to_process: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_concurrent < 1:
            raise ValueError(f"max_concurrent must be >= 1, got {max_concurrent}")
        if max_chunks_to_process is not None and max_chunks_to_process < 1:
            raise ValueError(
                f"max_chunks_to_process must be >= 1, got {max_chunks_to_process}"
            )
        self._analyzer = analyzer
        self._max_concurrent = max_concurrent
        self._pacing = batch_pacing_seconds
        self._max_chunks = max_chunks_to_process
        self._sleep = sleep

    def run(self, chunks: list[TextChunk]) -> AnalysisOutcome:
        selected = chunks if self._max_chunks is None else chunks[: self._max_chunks]
        if len(selected) < len(chunks):
            Log.warning(f"Chunk limit reached: analyzing {len(selected)} of {len(chunks)} chunks")

        batches = [
            selected[i : i + self._max_concurrent]
            for i in range(0, len(selected), self._max_concurrent)
        ]
        progress = BatchProgress()
        with ThreadPoolExecutor(
            max_workers=self._max_concurrent,
            thread_name_prefix="chunk-analysis",
        ) as executor:
            for index, batch in enumerate(batches):
                self._run_batch(executor, batch, progress)
                Log.info(
                    f"Batch {index + 1}/{len(batches)} done: "
                    f"{progress.processed} chunks, {len(progress.segments)} suspicious"
                )
                if index < len(batches) - 1 and self._pacing > 0:
                    self._sleep(self._pacing)

        return AnalysisOutcome(
            segments=tuple(sorted(progress.segments, key=lambda s: s.start_index)),
            total_chunks=len(chunks),
            processed_chunks=progress.processed,
            unscored_chunks=progress.unscored,
            search_available=self._analyzer.search_available,
        )

    def _run_batch(
        self,
        executor: ThreadPoolExecutor,
        batch: list[TextChunk],
        progress: BatchProgress,
    ) -> None:
        futures: list[Future[ChunkOutcome]] = [
            executor.submit(self._analyzer.analyze, chunk) for chunk in batch
        ]
        wait(futures)

        fatal: BaseException | None = None
        for chunk, future in zip(batch, futures):
            exc = future.exception()
            if exc is None:
                outcome = future.result()
                progress.processed += 1
                if outcome.segment is not None:
                    progress.segments.append(outcome.segment)
            elif isinstance(exc, ResponseParseError):
                progress.processed += 1
                progress.unscored += 1
                Log.warning(
                    f"Chunk [{chunk.start_index}:{chunk.end_index}] left unscored: {exc}"
                )
            elif fatal is None:
                fatal = exc

        if fatal is not None:
            Log.error(f"Aborting chunk analysis: {fatal}")
            raise fatal
