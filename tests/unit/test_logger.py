import io
import logging

import pytest

from remitscan.logging.logger import Log, _ContextFormatter


def _record(message: str, context: dict[str, object] | None = None) -> logging.LogRecord:
    record = logging.LogRecord("remitscan", logging.INFO, __file__, 1, message, None, None)
    if context is not None:
        record.context = context
    return record


class TestContextFormatter:
    def test_appends_context_pairs(self) -> None:
        formatter = _ContextFormatter("%(message)s")
        assert formatter.format(_record("Job admitted", {"job_id": "abc"})) == (
            "Job admitted | job_id=abc"
        )

    def test_plain_message_without_context(self) -> None:
        formatter = _ContextFormatter("%(message)s")
        assert formatter.format(_record("hello", {})) == "hello"

    def test_record_without_context_attribute(self) -> None:
        formatter = _ContextFormatter("%(message)s")
        assert formatter.format(_record("hello")) == "hello"


class TestLog:
    def test_passes_context_through_extra(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="remitscan"):
            Log.info("Job removed", job_id="j1")
        assert caplog.records[-1].context == {"job_id": "j1"}
        assert caplog.records[-1].getMessage() == "Job removed"

    def test_warning_level(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="remitscan"):
            Log.warning("careful")
        assert caplog.records[-1].levelno == logging.WARNING

    def test_configure_adds_single_handler(self) -> None:
        logger = logging.getLogger("remitscan")
        previous = list(logger.handlers)
        logger.handlers.clear()
        try:
            Log.configure("debug")
            Log.configure("info")
            assert len(logger.handlers) == 1
            assert logger.level == logging.INFO
        finally:
            logger.handlers[:] = previous
            logger.setLevel(logging.NOTSET)

    def test_configure_writes_to_given_stream(self) -> None:
        logger = logging.getLogger("remitscan")
        previous = list(logger.handlers)
        logger.handlers.clear()
        stream = io.StringIO()
        try:
            Log.configure("info", stream=stream)
            Log.info("Job admitted", job_id="j1")
            assert "[INFO] Job admitted | job_id=j1" in stream.getvalue()
        finally:
            logger.handlers[:] = previous
            logger.setLevel(logging.NOTSET)
