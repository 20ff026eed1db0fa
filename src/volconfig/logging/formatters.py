"""
Log formatters for the supported output formats: JSON, console and rich.
"""

import json
import logging
import traceback
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

from volconfig.constants import DEFAULT_SERVICE_NAME


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME, version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if hasattr(record, "correlation_id"):
            log_entry["correlation_id"] = record.correlation_id

        # Structured fields never overwrite the fixed ones above
        if hasattr(record, "extra_context"):
            for key, value in record.extra_context.items():
                log_entry.setdefault(key, value)

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter that appends structured fields as key=value."""

    def __init__(self):
        super().__init__(
            "%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        result = super().format(record)
        context = getattr(record, "extra_context", None)
        if context:
            fields = " ".join(f"{k}={v}" for k, v in context.items())
            # Keep tracebacks last
            head, sep, tail = result.partition("\n")
            result = f"{head} {fields}{sep}{tail}"
        return result


def create_console_formatter() -> logging.Formatter:
    return ConsoleFormatter()


def create_rich_handler() -> logging.Handler:
    """Rich handler for terminal output."""
    return RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )


def create_structured_formatter(
    service_name: str = DEFAULT_SERVICE_NAME, version: str = "unknown"
) -> StructuredFormatter:
    return StructuredFormatter(service_name, version)
