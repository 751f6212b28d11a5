class TextValidationError(Exception):
    """Raised when input text cannot be analyzed (e.g. too short after cleanup)."""


class ChunkingConfigurationError(ValueError):
    """Raised when chunk size and overlap cannot produce a terminating window."""
