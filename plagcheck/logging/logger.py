import logging
import re
import sys

_API_KEY_RE = re.compile(r"(api[_-]?key[\"'\s:=]+)([A-Za-z0-9_\-]{20,})", re.IGNORECASE)
# cache keys carry a sha256 digest that is not a secret
_LONG_TOKEN_RE = re.compile(r"(plagcheck:v1:[a-z]+:[0-9a-f]{64})|[A-Za-z0-9_\-]{41,}")


def mask_secrets(message: str) -> str:
    """Hide API keys and long token-like strings before they reach a handler."""
    masked = _API_KEY_RE.sub(r"\1***MASKED***", message)
    return _LONG_TOKEN_RE.sub(lambda m: m.group(1) or "***MASKED***", masked)


class Log:
    """Centralized logging with structured format."""

    _logger: logging.Logger = logging.getLogger("plagcheck")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(mask_secrets(message), extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(mask_secrets(message), extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(mask_secrets(message), extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(mask_secrets(message), extra=kwargs)
