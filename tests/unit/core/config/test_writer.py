"""
Unit tests for TOML re-encoding and redaction.
"""

import sys

import pytest

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from volconfig.core.config import (
    ConfigLoader,
    IKSConfig,
    ServerConfig,
    VolumeConfig,
    config_to_dict,
    dump_config,
    redacted_dict,
    write_config,
)
from volconfig.constants import REDACTED_VALUE


@pytest.mark.unit
class TestDumpConfig:

    def test_round_trip(self, sample_config_file, temp_dir):
        loader = ConfigLoader(environ={})
        original = loader.load(str(sample_config_file))

        path = write_config(original, temp_dir / "out" / "libconfig.toml")
        reloaded = loader.load(str(path))

        assert reloaded == original

    def test_uses_file_keys(self, sample_config_file):
        config = ConfigLoader(environ={}).load(str(sample_config_file))

        data = tomllib.loads(dump_config(config))

        assert data["vpc"]["gc_api_key"] == "gc-api-key"
        assert data["vpc"]["vpc_api_timeout"] == "60s"
        assert data["api"]["PassthroughSecret"] == "passthrough"
        assert data["softlayer"]["SoftlayerAPIDebug"] is False

    def test_absent_sections_omitted(self):
        config = VolumeConfig(server=ServerConfig(debug_trace=True), iks=IKSConfig())

        data = tomllib.loads(dump_config(config))

        assert set(data) == {"server", "iks"}
        assert data["server"] == {"debug_trace": True}

    def test_empty_config(self):
        assert dump_config(VolumeConfig()) == ""


@pytest.mark.unit
class TestRedaction:

    def test_secrets_masked(self, sample_config_file):
        config = ConfigLoader(environ={}).load(str(sample_config_file))

        data = redacted_dict(config)

        assert data["vpc"]["gc_api_key"] == REDACTED_VALUE
        assert data["vpc"]["g2_api_key"] == REDACTED_VALUE
        assert data["bluemix"]["iam_api_key"] == REDACTED_VALUE
        assert data["softlayer"]["softlayer_api_key"] == REDACTED_VALUE
        assert data["api"]["PassthroughSecret"] == REDACTED_VALUE

    def test_non_secrets_kept(self, sample_config_file):
        config = ConfigLoader(environ={}).load(str(sample_config_file))

        data = redacted_dict(config)

        assert data["vpc"]["gc_riaas_endpoint_url"] == "https://us-south.iaas.cloud.ibm.com"
        assert data["iks"]["iks_block_provider_name"] == "IKS-BLOCK"

    def test_empty_secret_stays_empty(self, sample_config_file):
        config = ConfigLoader(environ={}).load(str(sample_config_file))

        assert redacted_dict(config)["bluemix"]["refresh_token"] == ""

    def test_model_not_modified(self, sample_config_file):
        config = ConfigLoader(environ={}).load(str(sample_config_file))

        redacted_dict(config)

        assert config.vpc.api_key == "gc-api-key"
        assert config_to_dict(config)["vpc"]["gc_api_key"] == "gc-api-key"
