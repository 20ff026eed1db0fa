"""
Unit tests for the environment override settings.
"""

import pytest
from pydantic import ValidationError

from volconfig.core.config import EnvironmentSettings


def _overrides_by_var(settings):
    return {spec.env_var: value for spec, value in settings.overrides().items()}


@pytest.mark.unit
class TestEnvironmentSettings:

    def test_empty_mapping_has_no_overrides(self):
        settings = EnvironmentSettings.from_environ({})
        assert settings.overrides() == {}

    def test_values_converted_to_field_types(self):
        settings = EnvironmentSettings.from_environ(
            {
                "DEBUG_TRACE": "true",
                "VPC_API_GENERATION": "2",
                "VPC_API_TIMEOUT": "45s",
                "SOFTLAYER_FILE_ENABLED": "0",
            }
        )

        assert _overrides_by_var(settings) == {
            "DEBUG_TRACE": True,
            "VPC_API_GENERATION": 2,
            "VPC_API_TIMEOUT": "45s",
            "SOFTLAYER_FILE_ENABLED": False,
        }

    @pytest.mark.parametrize("raw", ["1", "t", "true", "TRUE", "True"])
    def test_truthy_spellings(self, raw):
        settings = EnvironmentSettings.from_environ({"IKS_ENABLED": raw})
        assert _overrides_by_var(settings) == {"IKS_ENABLED": True}

    @pytest.mark.parametrize("raw", ["0", "f", "false", "FALSE", "False"])
    def test_falsy_spellings(self, raw):
        settings = EnvironmentSettings.from_environ({"IKS_ENABLED": raw})
        assert _overrides_by_var(settings) == {"IKS_ENABLED": False}

    def test_empty_string_kept_for_string_fields(self):
        settings = EnvironmentSettings.from_environ({"IKS_BLOCK_PROVIDER_NAME": ""})
        assert _overrides_by_var(settings) == {"IKS_BLOCK_PROVIDER_NAME": ""}

    def test_section_prefixed_variable_wins(self):
        settings = EnvironmentSettings.from_environ(
            {"DEBUG_TRACE": "false", "SERVER_DEBUG_TRACE": "true"}
        )
        assert _overrides_by_var(settings) == {"DEBUG_TRACE": True}

    def test_names_are_case_sensitive(self):
        settings = EnvironmentSettings.from_environ({"debug_trace": "true"})
        assert settings.overrides() == {}

    def test_untagged_fields_not_overridable(self):
        settings = EnvironmentSettings.from_environ({"GC_API_KEY": "key", "IAM_URL": "u"})
        assert settings.overrides() == {}

    def test_invalid_integer(self):
        with pytest.raises(ValidationError):
            EnvironmentSettings.from_environ({"VPC_API_GENERATION": "notanumber"})

    def test_invalid_bool(self):
        with pytest.raises(ValidationError):
            EnvironmentSettings.from_environ({"VPC_ENABLED": "maybe"})

    @pytest.mark.parametrize(
        "raw", ["yes", "no", "on", "off", "y", "n", "tRuE", " true", "true ", ""]
    )
    def test_bool_spellings_rejected(self, raw):
        with pytest.raises(ValidationError):
            EnvironmentSettings.from_environ({"IKS_ENABLED": raw})

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("5", 5),
            ("+5", 5),
            ("-5", -5),
            ("0", 0),
            ("00", 0),
            ("010", 8),
            ("-010", -8),
            ("0x10", 16),
            ("0X1f", 31),
            ("0o17", 15),
            ("0b101", 5),
            ("1_000", 1000),
            ("0x_ff", 255),
            ("9223372036854775807", 2**63 - 1),
            ("-9223372036854775808", -(2**63)),
        ],
    )
    def test_integer_syntax(self, raw, expected):
        settings = EnvironmentSettings.from_environ({"VPC_RETRY_ATTEMPT": raw})
        assert _overrides_by_var(settings) == {"VPC_RETRY_ATTEMPT": expected}

    @pytest.mark.parametrize(
        "raw",
        [
            "5.0",
            " 5",
            "5 ",
            "",
            "+",
            "08",
            "0x",
            "1__0",
            "_1",
            "1_",
            "1e3",
            "١٢",
            "9223372036854775808",
        ],
    )
    def test_integer_syntax_rejected(self, raw):
        with pytest.raises(ValidationError):
            EnvironmentSettings.from_environ({"VPC_RETRY_ATTEMPT": raw})

    def test_mapping_isolated_from_process_environment(self, clean_environment):
        clean_environment.setenv("DEBUG_TRACE", "true")
        settings = EnvironmentSettings.from_environ({})
        assert settings.overrides() == {}

    def test_process_environment_by_default(self, clean_environment):
        clean_environment.setenv("VPC_RETRY_ATTEMPT", "7")
        settings = EnvironmentSettings.from_environ()
        assert _overrides_by_var(settings) == {"VPC_RETRY_ATTEMPT": 7}

    def test_dotenv_file_ignored(self, clean_environment, temp_dir):
        (temp_dir / ".env").write_text("DEBUG_TRACE=true\n")
        clean_environment.chdir(temp_dir)
        settings = EnvironmentSettings.from_environ()
        assert settings.overrides() == {}
