from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedText:
    """Cleaned text ready for chunking, plus the length it had before truncation."""

    text: str
    original_length: int

    @property
    def truncated(self) -> bool:
        return self.original_length > len(self.text)

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class TextChunk:
    """A window of the normalized text: text == normalized[start_index:end_index]."""

    text: str
    start_index: int
    end_index: int
