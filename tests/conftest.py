"""
Pytest configuration and shared fixtures for volconfig tests.
"""

import tempfile
from pathlib import Path

import pytest

from volconfig.constants import GO_PATH_ENV, SECRET_CONFIG_PATH_ENV
from volconfig.core.config import ENV_FIELDS

SAMPLE_TOML = """\
[server]
debug_trace = false

[bluemix]
iam_url = "https://iam.cloud.ibm.com"
iam_client_id = "bx"
iam_client_secret = "bx-secret"
iam_api_key = "iam-api-key"
refresh_token = ""
containers_api_route = "https://containers.cloud.ibm.com"
containers_api_route_private = "https://private.containers.cloud.ibm.com"
encryption = false
containers_api_csrf_token = "csrf-token"

[softlayer]
softlayer_block_enabled = true
softlayer_block_provider_name = "SOFTLAYER-BLOCK"
softlayer_file_enabled = false
softlayer_file_provider_name = "SOFTLAYER-FILE"
softlayer_username = "sl-user"
softlayer_api_key = "sl-api-key"
softlayer_endpoint_url = "https://api.softlayer.com/rest/v3"
softlayer_datacenter = "dal10"
softlayer_api_timeout = "20s"
softlayer_vol_provision_timeout = "30m"
softlayer_api_retry_interval = "5s"
softlayer_jwt_kid = "kid-1"
softlayer_jwt_ttl = 3600
softlayer_jwt_valid = 60
softlayer_iam_endpoint_url = "https://iam.softlayer.com"

[vpc]
vpc_enabled = true
iam_client_id = "vpc-client"
iam_client_secret = "vpc-secret"
vpc_type_enabled = "g2"
provider_type = "vpc-classic"
vpc_provider_type = "vpc-block"
gc_riaas_endpoint_url = "https://us-south.iaas.cloud.ibm.com"
gc_riaas_endpoint_private_url = "https://private-us-south.iaas.cloud.ibm.com"
gc_token_exchange_endpoint_url = "https://iam.bluemix.net"
gc_api_key = "gc-api-key"
gc_resource_group_id = "rg-gc"
vpc_api_generation = 1
api_version = "2019-07-02"
g2_riaas_endpoint_url = "https://us-south.iaas.cloud.ibm.com/v1"
g2_riaas_endpoint_private_url = "https://private-us-south.iaas.cloud.ibm.com/v1"
g2_token_exchange_endpoint_url = "https://iam.cloud.ibm.com"
g2_api_key = "g2-api-key"
g2_resource_group_id = "rg-g2"
g2_vpc_api_generation = 2
g2_api_version = "2020-07-02"
encryption = false
vpc_api_timeout = "60s"
max_retry_attempt = 10
max_retry_gap = 5
iks_token_exchange_endpoint_private_url = "https://private.iam.cloud.ibm.com"
is_iks = true

[iks]
iks_enabled = true
iks_block_provider_name = "IKS-BLOCK"

[api]
PassthroughSecret = "passthrough"
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_dir(temp_dir):
    """Directory playing the part of SECRET_CONFIG_PATH."""
    config_dir = temp_dir / "secret"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def config_file(config_dir):
    """Path of a libconfig.toml that does not exist yet."""
    return config_dir / "libconfig.toml"


@pytest.fixture
def sample_toml():
    return SAMPLE_TOML


@pytest.fixture
def sample_config_file(config_file, sample_toml):
    """A complete libconfig.toml on disk."""
    config_file.write_text(sample_toml)
    return config_file


@pytest.fixture
def write_toml(temp_dir):
    """Write TOML text to a file and return its path."""

    def _write(text: str, name: str = "libconfig.toml") -> Path:
        path = temp_dir / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove every variable the loader reads from the process environment."""
    names = {GO_PATH_ENV, SECRET_CONFIG_PATH_ENV}
    for spec in ENV_FIELDS:
        names.update(spec.env_names)
    for name in names:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# Pytest hooks
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
