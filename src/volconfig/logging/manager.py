"""
Centralized logging setup.

``LoggingManager`` owns the handlers it puts on the root logger. Configuring
again, or calling ``reset``, takes down only those handlers; anything the
host application installed stays in place.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from .config import LoggingConfig
from .formatters import (
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
)
from .loggers import VolumeLogger

LOGGER_NAMESPACE = "volconfig"


def _formatter_for(config: LoggingConfig) -> logging.Formatter:
    if config.format_type == "json":
        return StructuredFormatter(config.service_name, config.version)
    return create_console_formatter()


def _stream_handler(config: LoggingConfig) -> logging.Handler:
    if config.format_type == "rich":
        # rich renders level and time itself
        handler = create_rich_handler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter_for(config))
    return handler


def _file_handler(config: LoggingConfig) -> logging.Handler:
    path = config.file_path or Path("logs") / f"{config.service_name}.log"
    path.parent.mkdir(parents=True, exist_ok=True)
    config.file_path = path

    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=config.max_file_size,
        backupCount=config.backup_count,
    )
    # rich markup makes no sense in a file
    handler.setFormatter(_formatter_for(config))
    return handler


_HANDLER_FACTORIES = {
    "console": _stream_handler,
    "file": _file_handler,
}


class LoggingManager:
    """Process-wide owner of the volconfig log handlers."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config: Optional[LoggingConfig] = None
            self.handlers: List[logging.Handler] = []
            self._root_level: Optional[int] = None
            self._initialized = True

    def configure(self, config: LoggingConfig):
        """Install one handler per output named in ``config``."""
        self.reset()
        root = logging.getLogger()
        self._root_level = root.level
        self.config = config

        root.setLevel(config.level)
        logging.getLogger(LOGGER_NAMESPACE).setLevel(config.level)
        for output in config.output:
            handler = _HANDLER_FACTORIES[output](config)
            handler.setLevel(config.level)
            root.addHandler(handler)
            self.handlers.append(handler)

    def reset(self):
        """Remove and close the installed handlers, restoring the levels."""
        root = logging.getLogger()
        while self.handlers:
            handler = self.handlers.pop()
            root.removeHandler(handler)
            handler.close()
        if self._root_level is not None:
            root.setLevel(self._root_level)
            self._root_level = None
        if self.config is not None:
            logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.NOTSET)
            self.config = None

    def get_logger(
        self, name: str, correlation_id: Optional[str] = None
    ) -> VolumeLogger:
        return VolumeLogger(name, correlation_id)


logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
