from plagcheck.text.exceptions import ChunkingConfigurationError
from plagcheck.text.models import TextChunk

DEFAULT_CHUNK_SIZE = 1400
DEFAULT_OVERLAP = 200


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_OVERLAP,
) -> list[TextChunk]:
    """Split text into overlapping windows of at most chunk_size characters.

    Windows start at 0 and advance by chunk_size - overlap; the last window is
    clipped to the end of the text.

    Raises:
        ChunkingConfigurationError: if the window would never advance.
    """
    if chunk_size <= 0:
        raise ChunkingConfigurationError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0:
        raise ChunkingConfigurationError(f"overlap must be >= 0, got {overlap}")
    if overlap >= chunk_size:
        raise ChunkingConfigurationError(
            f"overlap ({overlap}) must be smaller than chunk_size ({chunk_size})"
        )

    step = chunk_size - overlap
    chunks: list[TextChunk] = []
    start = 0
    while start < len(text):
        end = min(start + chunk_size, len(text))
        chunks.append(TextChunk(text=text[start:end], start_index=start, end_index=end))
        if end == len(text):
            break
        start += step
    return chunks


class Chunker:
    """Holds a validated chunking configuration."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        overlap: int = DEFAULT_OVERLAP,
    ) -> None:
        # raises ChunkingConfigurationError on an invalid window
        chunk_text("", chunk_size, overlap)
        self._chunk_size = chunk_size
        self._overlap = overlap

    def chunk(self, text: str) -> list[TextChunk]:
        return chunk_text(text, self._chunk_size, self._overlap)
