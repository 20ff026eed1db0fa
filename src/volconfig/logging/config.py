"""
Logging configuration.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from volconfig.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_SERVICE_NAME,
)

if TYPE_CHECKING:
    from volconfig.core.config.models import ServerConfig

VALID_FORMATS = ("console", "json", "rich")
VALID_OUTPUTS = ("console", "file")


class LoggingConfig:
    """Configuration for the logging system."""

    def __init__(
        self,
        level: Union[str, int] = logging.INFO,
        format_type: str = "console",
        output: Union[str, List[str]] = "console",
        file_path: Optional[Path] = None,
        max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES,
        backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
        service_name: str = DEFAULT_SERVICE_NAME,
        version: str = "unknown",
    ):
        self.level = (
            level if isinstance(level, int) else getattr(logging, level.upper())
        )
        if format_type not in VALID_FORMATS:
            raise ValueError(f"format_type must be one of: {', '.join(VALID_FORMATS)}")
        self.format_type = format_type
        self.output = output if isinstance(output, list) else [output]
        for name in self.output:
            if name not in VALID_OUTPUTS:
                raise ValueError(f"output must contain only: {', '.join(VALID_OUTPUTS)}")
        self.file_path = Path(file_path) if file_path else None
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.service_name = service_name
        self.version = version

    @classmethod
    def from_server_config(
        cls, server: Optional["ServerConfig"], **kwargs
    ) -> "LoggingConfig":
        """Logging setup for a loaded server section.

        ``debug_trace`` switches the level to DEBUG; without a server section
        the level stays at INFO.
        """
        debug = bool(server and server.debug_trace)
        kwargs.setdefault("level", logging.DEBUG if debug else logging.INFO)
        return cls(**kwargs)


def create_default_config() -> LoggingConfig:
    return LoggingConfig()
