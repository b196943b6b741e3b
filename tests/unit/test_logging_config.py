"""Tests for logging configuration and ingestion log helpers."""

import json
import logging
from unittest.mock import Mock

import pytest
import structlog
from structlog.testing import capture_logs

from tickbook.config.defaults import LoggingParams
from tickbook.logging.config import (
    configure_logging,
    configure_logging_from,
    get_ingest_logger,
    get_logger,
    log_load_summary,
    log_skipped_line,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestConfigureLogging:

    def test_json_output(self, capsys):
        """Test JSON rendering writes one parseable event per line to stderr."""
        configure_logging(level="DEBUG", format_json=True, include_timestamp=False)

        get_logger("tickbook.test").info("hello", answer=42)

        err = capsys.readouterr().err.strip().splitlines()
        event = json.loads(err[-1])
        assert event["event"] == "hello"
        assert event["answer"] == 42
        assert event["level"] == "info"
        assert event["logger"] == "tickbook.test"

    def test_level_filtering(self, capsys):
        configure_logging(level="WARNING", format_json=True)

        get_logger("tickbook.test").info("quiet")

        assert "quiet" not in capsys.readouterr().err
        assert logging.getLogger().level == logging.WARNING

    def test_configure_from_params(self, capsys):
        """Test the logging section of the config drives level and format."""
        configure_logging_from(LoggingParams(level="WARNING", format_json=True), include_timestamp=False)

        logger = get_logger("tickbook.test")
        logger.info("quiet")
        logger.warning("loud", count=2)

        err = capsys.readouterr().err.strip().splitlines()
        assert "quiet" not in "\n".join(err)
        event = json.loads(err[-1])
        assert event["event"] == "loud"
        assert event["count"] == 2

    def test_invalid_level(self):
        with pytest.raises(AttributeError):
            configure_logging(level="LOUD")


class TestIngestLogHelpers:
    """Test the standardized ingestion events."""

    def setup_method(self):
        self.logger = Mock()
        self.bound = Mock()
        self.logger.bind.return_value = self.bound
        self.bound.bind.return_value = self.bound

    def test_log_skipped_line(self):
        log_skipped_line(self.logger, "feed.csv", 4, "Invalid price 'x'", raw_line="a,b,c,d,x")

        self.logger.bind.assert_called_once_with(
            source="feed.csv", line_number=4, reason="Invalid price 'x'"
        )
        self.bound.bind.assert_called_once_with(raw_line="a,b,c,d,x")
        self.bound.warning.assert_called_once_with("Skipped malformed record")

    def test_log_load_summary_available(self):
        log_load_summary(self.logger, "feed.csv", {"loaded": 3, "source_available": True})
        self.bound.info.assert_called_once_with("Loaded records")

    def test_log_load_summary_unavailable(self):
        log_load_summary(self.logger, "feed.csv", {"loaded": 0, "source_available": False})
        self.bound.warning.assert_called_once_with("Loaded records from unavailable source")

    def test_ingest_logger_binds_subsystem(self):
        with capture_logs() as logs:
            get_ingest_logger("tickbook.test").info("event")
        assert logs[0]["subsystem"] == "ingest"
