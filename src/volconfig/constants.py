"""
Constants for volume configuration loading.

File names, the workspace-relative location of the default ``etc`` directory
and the environment variables used to resolve the configuration path.
"""

# Configuration file
CONFIG_FILE_NAME = "libconfig.toml"
ETC_DIRECTORY_NAME = "etc"

# Relative to the Go workspace root (GOPATH)
WORKSPACE_SOURCE_PATH = ("src", "github.com", "IBM", "ibmcloud-volume-interface")

# Path resolution environment variables
GO_PATH_ENV = "GOPATH"
SECRET_CONFIG_PATH_ENV = "SECRET_CONFIG_PATH"

# Masking for secret values in logs and redacted dumps
REDACTED_VALUE = "********"

# Logging defaults
DEFAULT_SERVICE_NAME = "volconfig"
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 5
