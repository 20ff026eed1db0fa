"""
volconfig: configuration loading for the IBM Cloud volume provider.

Decodes ``libconfig.toml`` into typed section models and overlays
environment variable overrides on top.
"""

__version__ = "0.1.0"

from .core.config import (
    ConfigLoader,
    VolumeConfig,
    get_conf_path,
    get_conf_path_dir,
    read_config,
)
from .exceptions import (
    ConfigDecodeError,
    ConfigLoadError,
    ConfigOverlayError,
    VolConfigError,
)

__all__ = [
    "ConfigLoader",
    "VolumeConfig",
    "read_config",
    "get_conf_path",
    "get_conf_path_dir",
    "VolConfigError",
    "ConfigLoadError",
    "ConfigDecodeError",
    "ConfigOverlayError",
]
