import io
import logging
import sys
from collections.abc import Generator

import pytest

from app.logging.logger import Log, redact_document_number


@pytest.fixture()
def captured_log() -> Generator[io.StringIO, None, None]:
    logger = logging.getLogger("cadastro")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    stream = io.StringIO()
    Log.configure("debug", stream=stream)
    yield stream
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestLog:
    def test_writes_level_and_message(self, captured_log: io.StringIO) -> None:
        Log.warning("CEP lookup failed")
        assert "[WARNING] CEP lookup failed" in captured_log.getvalue()

    def test_debug_enabled_by_level(self, captured_log: io.StringIO) -> None:
        Log.debug("masking")
        assert "[DEBUG] masking" in captured_log.getvalue()

    def test_configure_is_idempotent(self, captured_log: io.StringIO) -> None:
        Log.configure("info")
        assert len(logging.getLogger("cadastro").handlers) == 1


class TestRedactDocumentNumber:
    def test_keeps_last_two_digits(self) -> None:
        assert redact_document_number("111.444.777-35") == "***.***.***-35"

    def test_short_input(self) -> None:
        assert redact_document_number("1") == "***"


class TestLogDefaultStream:
    def test_defaults_to_stderr(self) -> None:
        logger = logging.getLogger("cadastro")
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        logger.handlers.clear()
        try:
            Log.configure("info")
            handler = logger.handlers[0]
            assert isinstance(handler, logging.StreamHandler)
            assert handler.stream is sys.stderr
        finally:
            logger.handlers[:] = saved_handlers
            logger.setLevel(saved_level)
