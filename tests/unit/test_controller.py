import threading
from unittest.mock import MagicMock

import pytest

from plagcheck.analysis.chunk_analyzer import ChunkAnalyzer
from plagcheck.analysis.controller import ConcurrencyController
from plagcheck.collaborators.base import BaseSourceFinder
from plagcheck.collaborators.example_adapters import ExampleSimilarityScorer, ExampleSourceFinder
from plagcheck.collaborators.exceptions import (
    ConfigurationError,
    ResponseParseError,
    UpstreamError,
)
from plagcheck.collaborators.models import SourceMatch
from plagcheck.text.models import TextChunk


def _chunks(count: int, size: int = 10) -> list[TextChunk]:
    return [
        TextChunk(text=f"chunk-{i}", start_index=i * size, end_index=(i + 1) * size)
        for i in range(count)
    ]


class ScriptedFinder(BaseSourceFinder):
    """Raises the error registered for a chunk's text and records every call."""

    def __init__(self, errors: dict[str, Exception] | None = None) -> None:
        self.errors = errors or {}
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def find_sources(self, chunk_text: str) -> list[SourceMatch]:
        with self._lock:
            self.calls.append(chunk_text)
        if chunk_text in self.errors:
            raise self.errors[chunk_text]
        return []


def _controller(finder: BaseSourceFinder, **kwargs) -> tuple[ConcurrencyController, MagicMock]:  # type: ignore[no-untyped-def]
    sleep = MagicMock()
    controller = ConcurrencyController(
        ChunkAnalyzer(finder, ExampleSimilarityScorer()),
        sleep=sleep,
        **kwargs,
    )
    return controller, sleep


class TestConcurrencyController:
    def test_processes_all_chunks(self) -> None:
        finder = ScriptedFinder()
        controller, _ = _controller(finder, max_concurrent=3)
        outcome = controller.run(_chunks(7))
        assert sorted(finder.calls) == sorted(f"chunk-{i}" for i in range(7))
        assert outcome.processed_chunks == 7
        assert outcome.total_chunks == 7
        assert outcome.chunk_limit_reached is False

    def test_pacing_between_batches_only(self) -> None:
        controller, sleep = _controller(ScriptedFinder(), max_concurrent=3, batch_pacing_seconds=0.25)
        controller.run(_chunks(7))
        assert sleep.call_count == 2
        sleep.assert_called_with(0.25)

    def test_single_batch_no_pacing(self) -> None:
        controller, sleep = _controller(ScriptedFinder(), max_concurrent=3)
        controller.run(_chunks(3))
        sleep.assert_not_called()

    def test_no_chunks(self) -> None:
        controller, _ = _controller(ScriptedFinder())
        outcome = controller.run([])
        assert outcome.processed_chunks == 0
        assert outcome.segments == ()

    def test_never_exceeds_concurrency_limit(self) -> None:
        active = 0
        peak = 0
        lock = threading.Lock()
        gate = threading.Barrier(2, timeout=5)

        class SlowFinder(BaseSourceFinder):
            def find_sources(self, chunk_text: str) -> list[SourceMatch]:
                nonlocal active, peak
                with lock:
                    active += 1
                    peak = max(peak, active)
                gate.wait()
                with lock:
                    active -= 1
                return []

        controller, _ = _controller(SlowFinder(), max_concurrent=2)
        controller.run(_chunks(6))
        assert peak == 2

    def test_chunk_cap(self) -> None:
        finder = ScriptedFinder()
        controller, _ = _controller(finder, max_concurrent=3, max_chunks_to_process=4)
        outcome = controller.run(_chunks(10))
        assert len(finder.calls) == 4
        assert outcome.processed_chunks == 4
        assert outcome.total_chunks == 10
        assert outcome.chunk_limit_reached is True

    def test_segments_sorted_by_start(self) -> None:
        finder = ExampleSourceFinder(
            {"chunk": [SourceMatch(url="https://s.example", snippet="copied")]}
        )
        controller = ConcurrencyController(
            ChunkAnalyzer(finder, ExampleSimilarityScorer({"copied": 0.9})),
            sleep=MagicMock(),
        )
        outcome = controller.run(list(reversed(_chunks(5))))
        starts = [s.start_index for s in outcome.segments]
        assert starts == sorted(starts)
        assert len(starts) == 5


class TestConcurrencyControllerFailures:
    def test_unparseable_chunk_counted_unscored(self) -> None:
        finder = ScriptedFinder({"chunk-1": ResponseParseError("bad json")})
        controller, _ = _controller(finder, max_concurrent=3)
        outcome = controller.run(_chunks(5))
        assert outcome.unscored_chunks == 1
        assert outcome.processed_chunks == 5

    def test_upstream_failure_aborts_remaining_batches(self) -> None:
        finder = ScriptedFinder({"chunk-0": UpstreamError("unavailable", status_code=503)})
        controller, sleep = _controller(finder, max_concurrent=3)
        with pytest.raises(UpstreamError, match="unavailable"):
            controller.run(_chunks(9))
        assert sorted(finder.calls) == ["chunk-0", "chunk-1", "chunk-2"]
        sleep.assert_not_called()

    def test_failure_in_later_batch(self) -> None:
        finder = ScriptedFinder({"chunk-4": ConfigurationError("no key")})
        controller, _ = _controller(finder, max_concurrent=3)
        with pytest.raises(ConfigurationError):
            controller.run(_chunks(9))
        assert len(finder.calls) == 6

    def test_earliest_chunk_error_wins(self) -> None:
        finder = ScriptedFinder(
            {
                "chunk-1": UpstreamError("first", status_code=503),
                "chunk-2": ValueError("second"),
            }
        )
        controller, _ = _controller(finder, max_concurrent=3)
        with pytest.raises(UpstreamError, match="first"):
            controller.run(_chunks(3))

    def test_unexpected_error_is_fatal(self) -> None:
        finder = ScriptedFinder({"chunk-0": RuntimeError("bug")})
        controller, _ = _controller(finder)
        with pytest.raises(RuntimeError):
            controller.run(_chunks(2))


class TestConcurrencyControllerConfig:
    def test_invalid_concurrency(self) -> None:
        with pytest.raises(ValueError, match="max_concurrent"):
            ConcurrencyController(MagicMock(), max_concurrent=0)

    def test_invalid_chunk_cap(self) -> None:
        with pytest.raises(ValueError, match="max_chunks_to_process"):
            ConcurrencyController(MagicMock(), max_chunks_to_process=0)
