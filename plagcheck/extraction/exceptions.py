class ExtractionError(Exception):
    """Raised when no usable text can be obtained from a document."""


class UnsupportedFileTypeError(Exception):
    """Raised when a document's file type has no extractor."""


class FileTooLargeError(Exception):
    """Raised when a document exceeds the configured size limit."""
