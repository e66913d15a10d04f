"""
Unit tests for structured logging utility (objcompare/utils/logger.py)

Tests covering:
- JSON log formatting with required fields (timestamp, level, message, operation, context)
- Truncation of long values for log context
- Operation timing and error context in the log_operation decorator
- Package-wide level for module loggers
"""

import json
import logging
from datetime import datetime
from io import StringIO

import pytest

from objcompare.comparison.aligned_table import AlignedTable
from objcompare.comparison.property_map import PropertyMap
from objcompare.utils.logger import (
    PACKAGE_LOGGER_NAME,
    StructuredLogger,
    configure_logging,
    get_logger,
    log_operation,
    truncate_for_log,
)


def _attach_stream(logger: logging.Logger) -> StringIO:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return stream


class TestTruncateForLog:
    """Tests for truncate_for_log."""

    def test_short_text_unchanged(self):
        assert truncate_for_log("2025") == "2025"

    def test_long_text_cut_with_ellipsis(self):
        result = truncate_for_log("2025-01-01 00:00:00.000000+09:00", limit=10)
        assert result == "2025-01-01..."

    def test_exact_limit_unchanged(self):
        assert truncate_for_log("abcde", limit=5) == "abcde"

    def test_non_string_values(self):
        assert truncate_for_log(None) == "None"
        assert truncate_for_log(12345, limit=2) == "12..."

    def test_negative_limit_treated_as_zero(self):
        assert truncate_for_log("abc", limit=-1) == "..."


class TestStructuredLogger:
    """Tests for StructuredLogger class."""

    @pytest.fixture
    def logger_with_stream(self):
        logger = StructuredLogger("test_objcompare_logger")
        stream = _attach_stream(logger.logger)
        return logger, stream

    def test_format_log_basic_fields(self, logger_with_stream):
        logger, _ = logger_with_stream
        parsed = json.loads(logger._format_log("INFO", "Test message"))

        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Test message"
        assert "operation" not in parsed
        assert "context" not in parsed

    def test_format_log_timestamp_format(self, logger_with_stream):
        """Timestamp is ISO format with a Z suffix."""
        logger, _ = logger_with_stream
        timestamp = json.loads(logger._format_log("INFO", "Test"))["timestamp"]

        assert timestamp.endswith("Z")
        datetime.fromisoformat(timestamp.replace("Z", "+00:00"))

    def test_format_log_all_fields(self, logger_with_stream):
        logger, _ = logger_with_stream
        context = {"left": "datetime", "right": "date"}
        parsed = json.loads(
            logger._format_log(
                "ERROR",
                "Comparison failed",
                operation="compare_objects",
                context=context,
                duration_ms=45.678,
                error="bad width",
            )
        )

        assert parsed["operation"] == "compare_objects"
        assert parsed["context"] == context
        assert parsed["duration_ms"] == 45.68
        assert parsed["error"] == "bad width"

    def test_format_log_non_json_context_values(self, logger_with_stream):
        """Context values that JSON cannot encode are stringified."""
        logger, _ = logger_with_stream
        parsed = json.loads(logger._format_log("INFO", "x", context={"type": int}))
        assert parsed["context"]["type"] == "<class 'int'>"

    def test_level_methods_write_json_lines(self, logger_with_stream):
        logger, stream = logger_with_stream

        logger.debug("Debug message", operation="flatten")
        logger.info("Info message", duration_ms=12.5)
        logger.warning("Warning message", error="odd")
        logger.error("Error message", error="broken")

        lines = [json.loads(line) for line in stream.getvalue().strip().split("\n")]
        assert [line["level"] for line in lines] == ["DEBUG", "INFO", "WARNING", "ERROR"]
        assert lines[0]["operation"] == "flatten"
        assert lines[1]["duration_ms"] == 12.5
        assert lines[3]["error"] == "broken"

    def test_set_level_filters_messages(self, logger_with_stream):
        logger, stream = logger_with_stream
        logger.set_level(logging.WARNING)

        logger.info("hidden")
        logger.warning("shown")

        lines = stream.getvalue().strip().split("\n")
        assert len(lines) == 1
        assert json.loads(lines[0])["message"] == "shown"


class TestLogOperationDecorator:
    """Tests for log_operation decorator."""

    @pytest.fixture
    def module_stream(self):
        module_logger = logging.getLogger(__name__)
        stream = _attach_stream(module_logger)
        yield stream
        module_logger.handlers.clear()
        module_logger.setLevel(logging.NOTSET)

    def test_success_logs_start_and_completion(self, module_stream):
        @log_operation("render_rows")
        def render(left, right):
            return left + right

        assert render("a", "b") == "ab"

        entries = [json.loads(line) for line in module_stream.getvalue().strip().split("\n")]
        assert [entry["message"] for entry in entries] == [
            "Starting render_rows",
            "Completed render_rows",
        ]
        assert entries[0]["context"] == {"function": "render", "arg_types": ["str", "str"]}
        assert "duration_ms" in entries[1]

    def test_failure_logged_and_reraised(self, module_stream):
        @log_operation("failing_operation")
        def failing():
            raise ValueError("Test error")

        with pytest.raises(ValueError):
            failing()

        last = json.loads(module_stream.getvalue().strip().split("\n")[-1])
        assert last["level"] == "ERROR"
        assert last["message"] == "Failed failing_operation"
        assert last["error"] == "Test error"

    def test_preserves_function_metadata(self):
        @log_operation("test_op")
        def my_function():
            """Test function docstring."""

        assert my_function.__name__ == "my_function"
        assert my_function.__doc__ == "Test function docstring."


class TestGetLoggerFactory:
    def test_get_logger_returns_structured_logger(self):
        logger = get_logger("objcompare.test")
        assert isinstance(logger, StructuredLogger)
        assert logger.logger.name == "objcompare.test"

    def test_handler_attached_once(self):
        get_logger("objcompare.once")
        get_logger("objcompare.once")
        assert len(logging.getLogger("objcompare.once").handlers) == 1

    def test_structured_records_not_propagated(self):
        assert get_logger("objcompare.quiet").logger.propagate is False


class TestConfigureLogging:
    """Tests for the package-wide level and handler."""

    @pytest.fixture
    def package_logger(self):
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        saved_handlers = list(package_logger.handlers)
        saved_level = package_logger.level
        package_logger.handlers.clear()
        yield package_logger
        package_logger.handlers[:] = saved_handlers
        package_logger.setLevel(saved_level)

    def test_sets_package_level_and_one_handler(self, package_logger):
        configure_logging(logging.DEBUG)
        configure_logging(logging.INFO)

        assert package_logger.level == logging.INFO
        assert len(package_logger.handlers) == 1

    def test_module_debug_traces_reach_package_handler(self, package_logger):
        configure_logging(logging.DEBUG)
        stream = StringIO()
        package_logger.handlers[0].setStream(stream)

        AlignedTable("Traced", PropertyMap({"year": "2025"}))

        output = stream.getvalue()
        assert "objcompare.comparison.aligned_table" in output
        assert "Initialized table 'Traced'" in output

    def test_higher_level_hides_module_debug(self, package_logger):
        configure_logging(logging.WARNING)
        stream = StringIO()
        package_logger.handlers[0].setStream(stream)

        AlignedTable("Quiet", PropertyMap({"year": "2025"}))

        assert stream.getvalue() == ""
