import time
from collections.abc import Callable


class TimedMessage:
    """A message that clears itself a fixed interval after it was set."""

    def __init__(self, ttl_ms: int, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl_seconds = ttl_ms / 1000
        self._clock = clock
        self._text: str | None = None
        self._expires_at = 0.0

    def set(self, text: str) -> None:
        self._text = text
        self._expires_at = self._clock() + self._ttl_seconds

    def current(self) -> str | None:
        """Return the message text, or None once it has expired."""
        if self._text is not None and self._clock() >= self._expires_at:
            self._text = None
        return self._text

    def clear(self) -> None:
        self._text = None
