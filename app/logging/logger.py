import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging for form, lookup and storage events."""

    _logger: logging.Logger = logging.getLogger("cadastro")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single handler writing to *stream*.

        Defaults to stderr. Repeated calls only change the level.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log a form or storage event."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log a failure the user cannot recover from by retrying."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a recovered failure, such as a lookup error or a corrupted store."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)


def redact_document_number(value: str) -> str:
    """Keep only the last two digits of a CPF for log lines."""
    digits = "".join(ch for ch in value if ch.isdigit())
    if len(digits) < 3:
        return "***"
    return f"***.***.***-{digits[-2:]}"
