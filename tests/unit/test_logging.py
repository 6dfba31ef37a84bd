import logging
from unittest.mock import patch

import pytest

from receiptly.logging.events import LogEventSink, NullEventSink
from receiptly.logging.logger import Log, _FieldsFormatter


def _record(message: str, **fields: object) -> logging.LogRecord:
    record = logging.LogRecord("receiptly", logging.INFO, __file__, 1, message, None, None)
    record.fields = fields
    return record


class TestFieldsFormatter:
    def test_appends_sorted_fields(self) -> None:
        formatter = _FieldsFormatter("%(message)s")
        line = formatter.format(_record("OCR done", chars=12, caller="u1"))
        assert line == "OCR done | caller='u1' chars=12"

    def test_plain_message_without_fields(self) -> None:
        formatter = _FieldsFormatter("%(message)s")
        assert formatter.format(_record("hello")) == "hello"


class TestLog:
    def test_attaches_fields_to_record(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="receiptly"):
            Log.info("Receipt saved", receipt_id=3)
        record = caplog.records[-1]
        assert record.getMessage() == "Receipt saved"
        assert record.fields == {"receipt_id": 3}

    def test_configure_adds_single_handler(self) -> None:
        logger = logging.getLogger("receiptly")
        original = list(logger.handlers)
        logger.handlers.clear()
        try:
            Log.configure("debug")
            Log.configure("debug")
            assert len(logger.handlers) == 1
            assert logger.level == logging.DEBUG
        finally:
            logger.handlers[:] = original


class TestEventSinks:
    def test_log_sink_writes_debug_line(self) -> None:
        with patch("receiptly.logging.events.Log") as mock_log:
            LogEventSink().emit("ocr.started", path="/tmp/x.png")
        mock_log.debug.assert_called_once_with("event ocr.started", path="/tmp/x.png")

    def test_null_sink_accepts_anything(self) -> None:
        NullEventSink().emit("anything", a=1)
