"""
Static field table for the configuration schema.

The table is read once from the model declarations in ``models.py`` and
lists, for every leaf field, where it lives, which TOML key fills it, which
environment variable overrides it and whether it holds a secret. The loader,
the environment settings and the writer all work from this table instead of
inspecting models at call time.
"""

from typing import Dict, NamedTuple, Optional, Tuple, Type

from pydantic import BaseModel

from .models import (
    APIConfig,
    BluemixConfig,
    IKSConfig,
    ServerConfig,
    SoftlayerConfig,
    VPCProviderConfig,
)

# Attribute name on VolumeConfig -> section model. Order follows the file layout.
SECTION_MODELS: Dict[str, Type[BaseModel]] = {
    "server": ServerConfig,
    "bluemix": BluemixConfig,
    "softlayer": SoftlayerConfig,
    "vpc": VPCProviderConfig,
    "iks": IKSConfig,
    "api": APIConfig,
}


class FieldSpec(NamedTuple):
    """Mapping of one configuration field."""

    section: str
    name: str
    file_key: str
    env_var: Optional[str]
    type: type
    secret: bool

    @property
    def env_names(self) -> Tuple[str, ...]:
        """Variables checked for an override, highest priority first."""
        if not self.env_var:
            return ()
        return (f"{self.section.upper()}_{self.env_var}", self.env_var)

    @property
    def settings_name(self) -> str:
        """Attribute name of this field on EnvironmentSettings."""
        return f"{self.section}_{self.name}"


def _build_field_table() -> Tuple[FieldSpec, ...]:
    specs = []
    for section, model in SECTION_MODELS.items():
        for name, info in model.model_fields.items():
            extra = info.json_schema_extra or {}
            specs.append(
                FieldSpec(
                    section=section,
                    name=name,
                    file_key=info.alias or name,
                    env_var=extra.get("env"),
                    type=info.annotation,
                    secret=bool(extra.get("secret", False)),
                )
            )
    return tuple(specs)


FIELD_TABLE: Tuple[FieldSpec, ...] = _build_field_table()

ENV_FIELDS: Tuple[FieldSpec, ...] = tuple(s for s in FIELD_TABLE if s.env_var)


def section_fields(section: str) -> Tuple[FieldSpec, ...]:
    """All field specs belonging to ``section``."""
    if section not in SECTION_MODELS:
        raise KeyError(f"Unknown configuration section '{section}'")
    return tuple(s for s in FIELD_TABLE if s.section == section)


def secret_file_keys(section: str) -> Tuple[str, ...]:
    """TOML keys of ``section`` whose values must be masked."""
    return tuple(s.file_key for s in section_fields(section) if s.secret)
