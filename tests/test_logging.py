"""Tests for structured logging setup."""

from __future__ import annotations

import io
import json
import logging

import structlog

from bandchart.logging import get_logger, setup_logging


class TestSetupLogging:
    def test_json_format(self, capsys):
        setup_logging(level="INFO", log_format="json")
        logger = get_logger("test_json")
        logger.info("bands computed", bars=120)

        captured = capsys.readouterr()
        line = json.loads(captured.err.strip())
        assert line["event"] == "bands computed"
        assert line["bars"] == 120
        assert line["level"] == "info"
        assert "timestamp" in line

    def test_console_format(self, capsys):
        setup_logging(level="INFO", log_format="console")
        logger = get_logger("test_console")
        logger.info("hello console", length=20)

        captured = capsys.readouterr()
        assert "hello console" in captured.err
        assert "length" in captured.err

    def test_log_level_filtering(self, capsys):
        setup_logging(level="WARNING", log_format="json")
        logger = get_logger("test_level")
        logger.info("should be hidden")
        logger.warning("should appear")

        captured = capsys.readouterr()
        assert "should be hidden" not in captured.err
        assert "should appear" in captured.err

    def test_get_logger_with_context(self, capsys):
        setup_logging(level="INFO", log_format="json")
        logger = get_logger("test_ctx", source="close", offset=2)
        logger.info("context test")

        line = json.loads(capsys.readouterr().err.strip())
        assert line["source"] == "close"
        assert line["offset"] == 2

    def test_contextvars_binding(self, capsys):
        setup_logging(level="INFO", log_format="json")
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id="abc123")

        get_logger("test_ctxvars").info("with context var")

        line = json.loads(capsys.readouterr().err.strip())
        assert line["request_id"] == "abc123"

        structlog.contextvars.clear_contextvars()

    def test_stdlib_records_share_format(self, capsys):
        setup_logging(level="INFO", log_format="json")
        logging.getLogger("uvicorn.error").info("server started")

        line = json.loads(capsys.readouterr().err.strip())
        assert line["event"] == "server started"
        assert line["logger"] == "uvicorn.error"
        assert line["level"] == "info"

    def test_explicit_stream(self):
        buf = io.StringIO()
        setup_logging(level="INFO", log_format="json", stream=buf)
        get_logger("test_stream").info("to buffer")

        assert json.loads(buf.getvalue().strip())["event"] == "to buffer"
