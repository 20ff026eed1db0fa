"""
Configuration file path resolution.

All functions read from an environment mapping, the process environment by
default, and never touch the filesystem. Unset variables degrade to empty
strings, so a missing GOPATH yields a relative default path that only fails
later when the file is opened.
"""

import os
from typing import Mapping, Optional

from volconfig.constants import (
    CONFIG_FILE_NAME,
    ETC_DIRECTORY_NAME,
    GO_PATH_ENV,
    SECRET_CONFIG_PATH_ENV,
    WORKSPACE_SOURCE_PATH,
)


def _getenv(key: str, environ: Optional[Mapping[str, str]] = None) -> str:
    if environ is None:
        environ = os.environ
    return environ.get(key.upper(), "")


def get_go_path(environ: Optional[Mapping[str, str]] = None) -> str:
    """Workspace root from GOPATH, or an empty string."""
    return _getenv(GO_PATH_ENV, environ)


def get_etc_path(environ: Optional[Mapping[str, str]] = None) -> str:
    """Path to the default ``etc`` directory under the workspace root."""
    return os.path.join(
        get_go_path(environ), *WORKSPACE_SOURCE_PATH, ETC_DIRECTORY_NAME
    )


def get_default_conf_path(environ: Optional[Mapping[str, str]] = None) -> str:
    return os.path.join(get_etc_path(environ), CONFIG_FILE_NAME)


def get_conf_path(environ: Optional[Mapping[str, str]] = None) -> str:
    """Configuration file path, honouring SECRET_CONFIG_PATH."""
    secret_dir = _getenv(SECRET_CONFIG_PATH_ENV, environ)
    if secret_dir:
        return os.path.join(secret_dir, CONFIG_FILE_NAME)
    return get_default_conf_path(environ)


def get_conf_path_dir(environ: Optional[Mapping[str, str]] = None) -> str:
    """Configuration directory, honouring SECRET_CONFIG_PATH."""
    secret_dir = _getenv(SECRET_CONFIG_PATH_ENV, environ)
    if secret_dir:
        return secret_dir
    return get_etc_path(environ)


def resolve_config_path(
    conf_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> str:
    """Use ``conf_path`` verbatim when given, otherwise resolve from the environment."""
    if conf_path:
        return str(conf_path)
    return get_conf_path(environ)
