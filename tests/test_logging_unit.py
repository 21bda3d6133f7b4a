"""Unit tests for structured logging."""

import json
import logging
import sys

import pytest

from rss_reader.logging_config import (
    StructuredFormatter,
    create_execution_logger,
    setup_structured_logging,
)


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers[:]
    yield root_logger
    root_logger.handlers[:] = original_handlers
    root_logger.setLevel(original_level)


class TestLoggingUnit:
    """Unit tests for StructuredFormatter and ExecutionLogger."""

    def test_formatter_emits_json_with_context(self):
        record = logging.LogRecord(
            "rss_reader.fetcher", logging.INFO, __file__, 10, "Feed downloaded", None, None
        )
        record.execution_id = "run_1"
        record.component = "fetcher"
        record.feed_url = "https://example.com/feed"
        record.status_code = 200

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "rss_reader.fetcher"
        assert entry["message"] == "Feed downloaded"
        assert entry["execution_id"] == "run_1"
        assert entry["component"] == "fetcher"
        assert entry["feed_url"] == "https://example.com/feed"
        assert entry["status_code"] == 200
        assert "exception" not in entry

    def test_execution_logger_attaches_context(self, caplog):
        logger = create_execution_logger("parser", "run_42")

        with caplog.at_level(logging.INFO, logger="rss_reader"):
            logger.info("Successfully parsed feed", items_count=3)

        record = caplog.records[-1]
        assert record.name == "rss_reader.parser"
        assert record.execution_id == "run_42"
        assert record.component == "parser"
        assert record.items_count == 3

    def test_execution_id_is_generated(self):
        assert create_execution_logger("main").execution_id.startswith("exec_")

    def test_setup_installs_single_stderr_handler(self, restore_root_logger):
        setup_structured_logging("debug")

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr
        assert isinstance(handlers[0].formatter, StructuredFormatter)
        assert logging.getLogger("rss_reader").level == logging.DEBUG

    def test_setup_rejects_unknown_level(self, restore_root_logger):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_structured_logging("LOUD")
