"""
Volume provider configuration.

Pydantic models for every section of ``libconfig.toml``, path resolution,
and the loader that merges the file with environment overrides.

Usage:
    from volconfig.core.config import read_config, ConfigLoadError

    try:
        config = read_config()
    except ConfigLoadError as e:
        config = e.config  # partially merged record, decide if that is fatal

    if config.vpc and config.vpc.enabled:
        ...
"""

from ...exceptions.config import (
    ConfigDecodeError,
    ConfigLoadError,
    ConfigOverlayError,
    ConfigurationError,
)
from .loader import ConfigLoader, parse_config, read_config
from .models import (
    APIConfig,
    BluemixConfig,
    IKSConfig,
    ServerConfig,
    SoftlayerConfig,
    VolumeConfig,
    VPCProviderConfig,
)
from .paths import (
    get_conf_path,
    get_conf_path_dir,
    get_default_conf_path,
    get_etc_path,
    get_go_path,
    resolve_config_path,
)
from .schema import ENV_FIELDS, FIELD_TABLE, SECTION_MODELS, FieldSpec
from .settings import EnvironmentSettings
from .writer import config_to_dict, dump_config, redacted_dict, write_config

__all__ = [
    # Models
    "VolumeConfig",
    "ServerConfig",
    "BluemixConfig",
    "SoftlayerConfig",
    "VPCProviderConfig",
    "IKSConfig",
    "APIConfig",
    # Field table
    "FieldSpec",
    "FIELD_TABLE",
    "ENV_FIELDS",
    "SECTION_MODELS",
    "EnvironmentSettings",
    # Paths
    "get_go_path",
    "get_etc_path",
    "get_default_conf_path",
    "get_conf_path",
    "get_conf_path_dir",
    "resolve_config_path",
    # Loading and writing
    "ConfigLoader",
    "read_config",
    "parse_config",
    "config_to_dict",
    "dump_config",
    "redacted_dict",
    "write_config",
    # Exceptions
    "ConfigurationError",
    "ConfigLoadError",
    "ConfigDecodeError",
    "ConfigOverlayError",
]
