"""Structured logging for schemascan.

JSON output uses python-json-logger; every record carries the correlation ID
of the surrounding ``TracingContext``. Set ``SCHEMASCAN_LOG_JSON=false`` for
plain text output during local debugging.
"""

import logging
import sys
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from packages.common.config import get_config

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


class CorrelationIdFilter(logging.Filter):
    """Logging filter that injects the current correlation ID into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        # Import here to avoid circular dependency
        from packages.common.tracing import get_correlation_id

        record.correlation_id = get_correlation_id()
        return True


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter adding timestamp, level, module, function, line and correlation_id."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to the JSON log record.

        Args:
            log_record: The dictionary that will be serialized to JSON.
            record: The original logging.LogRecord.
            message_dict: Dictionary from the log message.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = record.created
        log_record["level"] = record.levelname
        log_record["module"] = record.module
        log_record["function"] = record.funcName
        log_record["line"] = record.lineno

        if hasattr(record, "correlation_id"):
            log_record["correlation_id"] = record.correlation_id


def setup_logging(level: str | None = None, stream: Any = None) -> None:
    """Configure logging for the application.

    Installs a single handler on the root logger (replacing existing ones),
    formatted as JSON unless ``log_json`` is disabled in configuration.

    Args:
        level: Optional log level override (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If not provided, uses ``log_level`` from config.
        stream: Stream to write to. Defaults to stderr so command output on
               stdout stays machine-readable.

    Example:
        >>> setup_logging("DEBUG")
        >>> logger = get_logger(__name__)
        >>> logger.debug("Parsed option rows")
    """
    config = get_config()
    log_level = (level or config.log_level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)

    formatter: logging.Formatter
    if config.log_json:
        formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(module)s %(function)s %(message)s"
        )
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())

    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module.

    Args:
        name: The logger name (typically __name__ from the calling module).

    Returns:
        logging.Logger: Logger instance.
    """
    return logging.getLogger(name)


__all__ = ["CorrelationIdFilter", "CustomJsonFormatter", "get_logger", "setup_logging"]
