"""Structured logging configuration for RSS Writer."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

CONTEXT_FIELDS = ("document_id", "component", "channel_title", "item_title", "metrics")


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class DocumentLogger:
    """Logger that tags every record with the document it belongs to."""

    def __init__(self, document_id: str, component: str = "document"):
        """Initialize document logger.

        Args:
            document_id: Identifier of the document being logged about
            component: Component name (e.g., 'document', 'config')
        """
        self.document_id = document_id
        self.component = component
        self.logger = logging.getLogger(f"rss_writer.{component}")

    def _log_with_context(self, level: int, message: str, **kwargs) -> None:
        """Log message with document context."""
        extra = {
            "document_id": self.document_id,
            "component": self.component,
            **kwargs,
        }
        self.logger.log(level, message, extra=extra)

    def info(self, message: str, **kwargs) -> None:
        """Log info message with context."""
        self._log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message with context."""
        self._log_with_context(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message with context."""
        self._log_with_context(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message with context."""
        self._log_with_context(logging.DEBUG, message, **kwargs)

    def log_item_added(self, item_title: str | None, items_count: int) -> None:
        """Log an item being appended to the document."""
        self.debug(
            f"Item added: {item_title or '(untitled)'}",
            item_title=item_title,
            items_count=items_count,
        )

    def log_render(self, channel_title: str, metrics: dict[str, Any]) -> None:
        """Log a render of the document."""
        self.debug(
            f"Rendered channel: {channel_title}",
            channel_title=channel_title,
            metrics=metrics,
        )


def setup_structured_logging(log_level: str = "INFO") -> None:
    """Setup structured logging for an application using RSS Writer.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(console_handler)

    for logger_name in ("rss_writer", "rss_writer.document", "rss_writer.config"):
        logger = logging.getLogger(logger_name)
        logger.setLevel(getattr(logging, log_level.upper()))
        logger.propagate = True


def create_document_logger(
    component: str, document_id: str | None = None
) -> DocumentLogger:
    """Create a document logger for a component.

    Args:
        component: Component name
        document_id: Optional document ID (will generate one if not provided)

    Returns:
        DocumentLogger instance
    """
    if not document_id:
        document_id = f"doc_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"

    return DocumentLogger(document_id, component)
