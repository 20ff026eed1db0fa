"""
Logger wrapper with correlation IDs and keyword context.

Keyword arguments passed to the log methods end up in the record's
``extra_context``, which the JSON formatter flattens into the entry. This
is how callers attach structured fields such as ``confpath``.
"""

import logging
from typing import Any, Dict, Optional
from uuid import uuid4


class VolumeLogger:
    """Structured logger used by the configuration loader."""

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())
        self.extra_context: Dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self.logger.name

    def _log(self, level: int, msg: str, **kwargs):
        extra: Dict[str, Any] = {"correlation_id": self.correlation_id}
        context = {**self.extra_context, **kwargs}
        if context:
            extra["extra_context"] = context
        self.logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def with_context(self, **kwargs) -> "VolumeLogger":
        """Copy of this logger whose entries all carry ``kwargs``."""
        new_logger = VolumeLogger(self.logger.name, self.correlation_id)
        new_logger.extra_context = {**self.extra_context, **kwargs}
        return new_logger


def get_logger(name: str, correlation_id: Optional[str] = None) -> VolumeLogger:
    return VolumeLogger(name, correlation_id)
