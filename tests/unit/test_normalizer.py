import pytest

from plagcheck.text.exceptions import TextValidationError
from plagcheck.text.normalizer import TextNormalizer


class TestClean:
    def test_normalizes_line_breaks(self) -> None:
        assert TextNormalizer.clean("a\r\nb\rc") == "a\nb\nc"

    def test_strips_control_characters(self) -> None:
        assert TextNormalizer.clean("a\x00b\x07c\x7f") == "abc"

    def test_keeps_newline(self) -> None:
        assert TextNormalizer.clean("line one\nline two") == "line one\nline two"

    def test_collapses_spaces_and_tabs(self) -> None:
        assert TextNormalizer.clean("a  \t  b\t\tc") == "a b c"

    def test_collapses_excess_newlines(self) -> None:
        assert TextNormalizer.clean("a\n\n\n\n\nb") == "a\n\nb"

    def test_keeps_single_blank_line(self) -> None:
        assert TextNormalizer.clean("a\n\nb") == "a\n\nb"

    def test_trims(self) -> None:
        assert TextNormalizer.clean("  \n hello \n ") == "hello"

    def test_idempotent(self) -> None:
        raw = "  a\r\n\r\n\r\n\x00b \t c  "
        once = TextNormalizer.clean(raw)
        assert TextNormalizer.clean(once) == once


class TestNormalize:
    def test_returns_cleaned_text(self, sample_text: str) -> None:
        result = TextNormalizer().normalize(sample_text)
        assert result.text == sample_text.strip()
        assert result.original_length == len(sample_text.strip())
        assert result.truncated is False

    def test_too_short_raises(self) -> None:
        with pytest.raises(TextValidationError, match="too short"):
            TextNormalizer().normalize("short text")

    def test_length_checked_after_cleanup(self) -> None:
        raw = "word" + " " * 100 + "word"
        with pytest.raises(TextValidationError, match="9 characters"):
            TextNormalizer().normalize(raw)

    def test_exact_minimum_passes(self) -> None:
        result = TextNormalizer(min_length=10).normalize("a" * 10)
        assert len(result) == 10

    def test_truncates_to_max_length(self) -> None:
        result = TextNormalizer(min_length=5, max_length=20).normalize("x" * 35)
        assert result.text == "x" * 20
        assert result.original_length == 35
        assert result.truncated is True

    def test_non_string_raises(self) -> None:
        with pytest.raises(TextValidationError, match="must be a string"):
            TextNormalizer().normalize(None)  # type: ignore[arg-type]

    def test_max_below_min_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_length"):
            TextNormalizer(min_length=100, max_length=10)
