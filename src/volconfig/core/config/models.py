"""
Configuration models for the volume provider.

Each section mirrors one table of ``libconfig.toml``. Field aliases are the
TOML keys and must not change, since existing files depend on them.
``json_schema_extra`` carries the two other facts about a field: the
environment variable that overrides it (``env``) and whether its value is a
credential that must never be printed (``secret``).

Every leaf is optional and defaults to the zero value of its type. No
cross-field validation happens here; deciding whether the gc or g2 VPC
settings are in effect is left to the consumers.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


def _env(name: str) -> dict:
    return {"env": name}


_SECRET = {"secret": True}


class _Section(BaseModel):
    """Common settings for every configuration section."""

    model_config = ConfigDict(
        populate_by_name=True,  # Accept python names as well as TOML keys
        validate_assignment=True,
        extra="ignore",  # Unknown TOML keys are not an error
    )


class ServerConfig(_Section):
    """Options for the provider server itself."""

    debug_trace: StrictBool = Field(
        False,
        alias="debug_trace",
        description="Enable debug level trace within the provider code",
        json_schema_extra=_env("DEBUG_TRACE"),
    )


class BluemixConfig(_Section):
    """IAM and containers API settings."""

    iam_url: StrictStr = Field("", alias="iam_url")
    iam_client_id: StrictStr = Field("", alias="iam_client_id")
    iam_client_secret: StrictStr = Field(
        "", alias="iam_client_secret", json_schema_extra=_SECRET
    )
    iam_api_key: StrictStr = Field("", alias="iam_api_key", json_schema_extra=_SECRET)
    refresh_token: StrictStr = Field(
        "", alias="refresh_token", json_schema_extra=_SECRET
    )
    api_endpoint_url: StrictStr = Field("", alias="containers_api_route")
    private_api_route: StrictStr = Field("", alias="containers_api_route_private")
    encryption: StrictBool = Field(False, alias="encryption")
    csrf_token: StrictStr = Field(
        "", alias="containers_api_csrf_token", json_schema_extra=_SECRET
    )


class SoftlayerConfig(_Section):
    """Softlayer (classic infrastructure) block and file storage settings.

    Timeouts and retry intervals are kept as strings, e.g. ``"20s"``; the
    consumer parses them into durations.
    """

    softlayer_block_enabled: StrictBool = Field(
        False,
        alias="softlayer_block_enabled",
        json_schema_extra=_env("SOFTLAYER_BLOCK_ENABLED"),
    )
    softlayer_block_provider_name: StrictStr = Field(
        "",
        alias="softlayer_block_provider_name",
        json_schema_extra=_env("SOFTLAYER_BLOCK_PROVIDER_NAME"),
    )
    softlayer_file_enabled: StrictBool = Field(
        False,
        alias="softlayer_file_enabled",
        json_schema_extra=_env("SOFTLAYER_FILE_ENABLED"),
    )
    softlayer_file_provider_name: StrictStr = Field(
        "",
        alias="softlayer_file_provider_name",
        json_schema_extra=_env("SOFTLAYER_FILE_PROVIDER_NAME"),
    )
    softlayer_username: StrictStr = Field(
        "", alias="softlayer_username", json_schema_extra=_SECRET
    )
    softlayer_api_key: StrictStr = Field(
        "", alias="softlayer_api_key", json_schema_extra=_SECRET
    )
    softlayer_endpoint_url: StrictStr = Field("", alias="softlayer_endpoint_url")
    softlayer_datacenter: StrictStr = Field("", alias="softlayer_datacenter")
    softlayer_timeout: StrictStr = Field(
        "",
        alias="softlayer_api_timeout",
        json_schema_extra=_env("SOFTLAYER_API_TIMEOUT"),
    )
    softlayer_vol_provision_timeout: StrictStr = Field(
        "",
        alias="softlayer_vol_provision_timeout",
        json_schema_extra=_env("SOFTLAYER_VOL_PROVISION_TIMEOUT"),
    )
    softlayer_retry_interval: StrictStr = Field(
        "",
        alias="softlayer_api_retry_interval",
        json_schema_extra=_env("SOFTLAYER_API_RETRY_INTERVAL"),
    )

    # JWT token settings
    softlayer_jwt_kid: StrictStr = Field("", alias="softlayer_jwt_kid")
    softlayer_jwt_ttl: StrictInt = Field(0, alias="softlayer_jwt_ttl")
    softlayer_jwt_valid_from: StrictInt = Field(0, alias="softlayer_jwt_valid")

    softlayer_ims_endpoint_url: StrictStr = Field(
        "", alias="softlayer_iam_endpoint_url"
    )
    softlayer_api_debug: StrictBool = Field(False, alias="SoftlayerAPIDebug")


class VPCProviderConfig(_Section):
    """Settings for one VPC provider instance.

    Two parallel field sets exist, one per API generation: ``gc_*`` keys and
    ``g2_*`` keys. ``vpc_type_enabled`` selects between them (``gc`` or
    ``g2``); when unset and both are configured, gc takes precedence.
    """

    enabled: StrictBool = Field(
        False, alias="vpc_enabled", json_schema_extra=_env("VPC_ENABLED")
    )

    iam_client_id: StrictStr = Field("", alias="iam_client_id")
    iam_client_secret: StrictStr = Field(
        "", alias="iam_client_secret", json_schema_extra=_SECRET
    )

    vpc_type_enabled: StrictStr = Field(
        "", alias="vpc_type_enabled", json_schema_extra=_env("VPC_TYPE_ENABLED")
    )
    vpc_block_provider_type: StrictStr = Field("", alias="provider_type")
    vpc_provider_type: StrictStr = Field("", alias="vpc_provider_type")

    # gc generation
    endpoint_url: StrictStr = Field("", alias="gc_riaas_endpoint_url")
    private_endpoint_url: StrictStr = Field("", alias="gc_riaas_endpoint_private_url")
    token_exchange_url: StrictStr = Field("", alias="gc_token_exchange_endpoint_url")
    api_key: StrictStr = Field("", alias="gc_api_key", json_schema_extra=_SECRET)
    resource_group_id: StrictStr = Field("", alias="gc_resource_group_id")
    vpc_api_generation: StrictInt = Field(
        0, alias="vpc_api_generation", json_schema_extra=_env("VPC_API_GENERATION")
    )
    api_version: StrictStr = Field(
        "", alias="api_version", json_schema_extra=_env("VPC_API_VERSION")
    )

    # g2 generation
    g2_endpoint_url: StrictStr = Field("", alias="g2_riaas_endpoint_url")
    g2_endpoint_private_url: StrictStr = Field(
        "", alias="g2_riaas_endpoint_private_url"
    )
    g2_token_exchange_url: StrictStr = Field(
        "", alias="g2_token_exchange_endpoint_url"
    )
    g2_api_key: StrictStr = Field("", alias="g2_api_key", json_schema_extra=_SECRET)
    g2_resource_group_id: StrictStr = Field("", alias="g2_resource_group_id")
    g2_vpc_api_generation: StrictInt = Field(
        0,
        alias="g2_vpc_api_generation",
        json_schema_extra=_env("G2_VPC_API_GENERATION"),
    )
    g2_api_version: StrictStr = Field(
        "", alias="g2_api_version", json_schema_extra=_env("G2_VPC_API_VERSION")
    )

    encryption: StrictBool = Field(False, alias="encryption")
    vpc_timeout: StrictStr = Field(
        "", alias="vpc_api_timeout", json_schema_extra=_env("VPC_API_TIMEOUT")
    )
    max_retry_attempt: StrictInt = Field(
        0, alias="max_retry_attempt", json_schema_extra=_env("VPC_RETRY_ATTEMPT")
    )
    max_retry_gap: StrictInt = Field(
        0, alias="max_retry_gap", json_schema_extra=_env("VPC_RETRY_INTERVAL")
    )
    # Private cluster support, used for all cluster types
    iks_token_exchange_private_url: StrictStr = Field(
        "", alias="iks_token_exchange_endpoint_private_url"
    )

    is_iks: StrictBool = Field(False, alias="is_iks")


class IKSConfig(_Section):
    """IKS (managed Kubernetes) block provider settings."""

    enabled: StrictBool = Field(
        False, alias="iks_enabled", json_schema_extra=_env("IKS_ENABLED")
    )
    iks_block_provider_name: StrictStr = Field(
        "",
        alias="iks_block_provider_name",
        json_schema_extra=_env("IKS_BLOCK_PROVIDER_NAME"),
    )


class APIConfig(_Section):
    """API passthrough settings."""

    passthrough_secret: StrictStr = Field(
        "", alias="PassthroughSecret", json_schema_extra=_SECRET
    )


class VolumeConfig(BaseModel):
    """Root configuration: one record per section.

    Sections default to ``None`` on a bare instance. A loaded record has
    all of them, zero-valued where neither the file nor the environment
    set anything, so consumers can read any field without a presence check.
    """

    server: Optional[ServerConfig] = Field(None, alias="server")
    bluemix: Optional[BluemixConfig] = Field(None, alias="bluemix")
    softlayer: Optional[SoftlayerConfig] = Field(None, alias="softlayer")
    vpc: Optional[VPCProviderConfig] = Field(None, alias="vpc")
    iks: Optional[IKSConfig] = Field(None, alias="iks")
    api: Optional[APIConfig] = Field(None, alias="api")

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )
