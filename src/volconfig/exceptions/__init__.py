"""
volconfig exception hierarchy.

    VolConfigError (base)
    └── ConfigurationError
        └── ConfigLoadError
            ├── ConfigDecodeError
            └── ConfigOverlayError
"""

from .base import ExceptionContext, VolConfigError
from .config import (
    ConfigDecodeError,
    ConfigLoadError,
    ConfigOverlayError,
    ConfigurationError,
)

__all__ = [
    "ExceptionContext",
    "VolConfigError",
    "ConfigurationError",
    "ConfigLoadError",
    "ConfigDecodeError",
    "ConfigOverlayError",
]
