"""Text sanitation applied before chunking.

Processing flow:
1. Normalize line breaks (CRLF / CR -> LF).
2. Drop control characters except newline and tab.
3. Collapse runs of spaces/tabs into a single space.
4. Collapse three or more consecutive newlines into a blank line.
5. Trim, validate the minimum length, truncate to the maximum length.
"""

import re

from plagcheck.text.exceptions import TextValidationError
from plagcheck.text.models import NormalizedText

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_HORIZONTAL_WS_RE = re.compile(r"[ \t]+")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")

DEFAULT_MIN_LENGTH = 50
DEFAULT_MAX_LENGTH = 200_000


class TextNormalizer:
    """Sanitizes raw text and enforces length bounds."""

    def __init__(
        self,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        if max_length < min_length:
            raise ValueError(
                f"max_length ({max_length}) must be >= min_length ({min_length})"
            )
        self._min_length = min_length
        self._max_length = max_length

    def normalize(self, raw: str) -> NormalizedText:
        """Return cleaned text, truncated to the maximum length.

        Raises:
            TextValidationError: if the cleaned text is shorter than the minimum.
        """
        if not isinstance(raw, str):
            raise TextValidationError("Text input must be a string")

        cleaned = self.clean(raw)
        if len(cleaned) < self._min_length:
            raise TextValidationError(
                f"Text is too short ({len(cleaned)} characters). "
                f"Minimum required: {self._min_length} characters."
            )
        return NormalizedText(
            text=cleaned[: self._max_length],
            original_length=len(cleaned),
        )

    @staticmethod
    def clean(raw: str) -> str:
        text = raw.replace("\r\n", "\n").replace("\r", "\n")
        text = _CONTROL_CHARS_RE.sub("", text)
        text = _HORIZONTAL_WS_RE.sub(" ", text)
        text = _EXCESS_NEWLINES_RE.sub("\n\n", text)
        return text.strip()
