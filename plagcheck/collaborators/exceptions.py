class CollaboratorError(Exception):
    """Base exception for failures of external judgment services."""


class ConfigurationError(CollaboratorError):
    """Raised when a collaborator is missing its credential or configuration."""


class UpstreamError(CollaboratorError):
    """Raised when an upstream service returns an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamNetworkError(UpstreamError):
    """Raised when an upstream service cannot be reached."""


class UpstreamTimeoutError(UpstreamNetworkError):
    """Raised when an upstream call times out."""


class ResponseParseError(CollaboratorError):
    """Raised when an upstream response cannot be interpreted.

    Recoverable at chunk level: the chunk is recorded as unscored.
    """
