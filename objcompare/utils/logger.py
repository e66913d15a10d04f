"""
Structured logging utility for objcompare.

Emits one JSON object per log line with context injection and operation
timing. Long display values are truncated before they enter log context.
"""

import json
import logging
import time
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Dict, Optional

DEFAULT_TRUNCATE_LIMIT = 40

# Parent of every module logger in the package
PACKAGE_LOGGER_NAME = "objcompare"


def truncate_for_log(text: Any, limit: int = DEFAULT_TRUNCATE_LIMIT) -> str:
    """
    Shorten a value for log context.

    Args:
        text: Value to log (rendered with str())
        limit: Maximum number of characters kept before the ellipsis

    Returns:
        Text of at most ``limit`` characters plus "..." when cut

    Example:
        >>> truncate_for_log("2025-01-01 00:00:00.000000+09:00", limit=10)
        '2025-01-01...'
        >>> truncate_for_log(None)
        'None'
    """
    rendered = f"{text}"
    if limit < 0:
        limit = 0
    if len(rendered) <= limit:
        return rendered
    return rendered[:limit] + "..."


class StructuredLogger:
    """
    JSON-formatted logger with context injection and operation timing.

    Wraps a stdlib logger; the handler is attached once per logger name and
    records are not passed on to parent handlers.
    """

    def __init__(self, name: str, level: int = logging.DEBUG):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__ from calling module)
            level: Level for the underlying logger and its handler
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
        self.logger.propagate = False

    def set_level(self, level: int) -> None:
        """Change the level of the underlying logger."""
        self.logger.setLevel(level)

    def _format_log(
        self,
        level: str,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        duration_ms: Optional[float] = None,
        error: Optional[str] = None,
    ) -> str:
        """
        Format log entry as JSON.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            message: Human-readable message
            operation: Operation name (e.g., "compare_objects")
            context: Context dict with type names, row counts, etc.
            duration_ms: Operation duration in milliseconds
            error: Error message if applicable

        Returns:
            JSON-formatted log string
        """
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "message": message,
        }

        if operation:
            log_entry["operation"] = operation

        if context:
            log_entry["context"] = context

        if duration_ms is not None:
            log_entry["duration_ms"] = round(duration_ms, 2)

        if error:
            log_entry["error"] = error

        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def debug(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Log debug message."""
        self.logger.debug(self._format_log("DEBUG", message, operation, context))

    def info(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        duration_ms: Optional[float] = None,
    ):
        """Log info message."""
        self.logger.info(self._format_log("INFO", message, operation, context, duration_ms))

    def warning(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
    ):
        self.logger.warning(self._format_log("WARNING", message, operation, context, error=error))

    def error(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
        duration_ms: Optional[float] = None,
    ):
        self.logger.error(
            self._format_log("ERROR", message, operation, context, duration_ms, error)
        )


def log_operation(operation_name: str):
    """
    Decorator to log operation start, duration, and completion.

    The context records the wrapped function name and the type names of its
    positional arguments (never their values).

    Usage:
        @log_operation("compare_objects")
        def compare(left_obj, right_obj, writer):
            ...
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__, logging.getLogger(func.__module__).level)

            context: Dict[str, Any] = {"function": func.__name__}
            if args:
                context["arg_types"] = [type(arg).__name__ for arg in args]

            logger.debug(f"Starting {operation_name}", operation=operation_name, context=context)

            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.time() - start_time) * 1000
                logger.error(
                    f"Failed {operation_name}",
                    operation=operation_name,
                    context=context,
                    error=str(e),
                    duration_ms=duration_ms,
                )
                raise

            duration_ms = (time.time() - start_time) * 1000
            logger.info(
                f"Completed {operation_name}",
                operation=operation_name,
                context=context,
                duration_ms=duration_ms,
            )
            return result

        return wrapper

    return decorator


def configure_logging(level: int) -> logging.Logger:
    """
    Set the level of every objcompare logger.

    Module loggers created with logging.getLogger(__name__) inherit this
    level and write through the single handler attached here.

    Args:
        level: Numeric logging level (e.g. logging.DEBUG)

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        package_logger.addHandler(handler)

    return package_logger


def get_logger(name: str) -> StructuredLogger:
    """
    Factory function to get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name)
