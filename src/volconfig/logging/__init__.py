"""
Logging for volconfig.

- formatters: JSON, console and rich output
- loggers: VolumeLogger with correlation IDs and keyword context
- config: LoggingConfig, including the debug_trace mapping
- manager: LoggingManager singleton and configure_logging
"""

from .config import LoggingConfig, create_default_config
from .formatters import StructuredFormatter
from .loggers import VolumeLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "StructuredFormatter",
    "VolumeLogger",
    "configure_logging",
    "create_default_config",
    "get_logger",
    "logging_manager",
]
