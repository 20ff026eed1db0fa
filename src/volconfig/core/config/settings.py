"""
Environment variable overrides.

``EnvironmentSettings`` is a pydantic-settings model with one optional field
per env-overridable configuration field, generated from the field table so
the variable names live only on the section models. Each field accepts the
section-prefixed variable first (``VPC_VPC_API_GENERATION``) and then the
plain one (``VPC_API_GENERATION``).

Values are read from the process environment by default, or from an
explicit mapping passed to :meth:`EnvironmentSettingsBase.from_environ`.

Booleans and integers use the spellings existing deployments already set:
``1 t T TRUE true True`` and ``0 f F FALSE false False`` for booleans, and
signed 64-bit integers with an optional ``0x``/``0o``/``0b`` prefix, a
leading ``0`` for octal and ``_`` between digits. Anything else, including
surrounding whitespace or a fraction, is rejected.
"""

import re
from contextvars import ContextVar
from typing import Annotated, Any, Dict, Mapping, Optional, Tuple

from pydantic import AliasChoices, BeforeValidator, Field, create_model
from pydantic_settings import (
    BaseSettings,
    EnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .schema import ENV_FIELDS, FieldSpec

_TRUE_VALUES = frozenset(("1", "t", "T", "TRUE", "true", "True"))
_FALSE_VALUES = frozenset(("0", "f", "F", "FALSE", "false", "False"))

_INT_SYNTAX = re.compile(r"[+-]?[0-9A-Za-z_]+\Z")
_INT_MIN, _INT_MAX = -(2**63), 2**63 - 1


def parse_env_bool(value: Any) -> Any:
    """Convert an override string to bool; other inputs pass through."""
    if not isinstance(value, str):
        return value
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    # The value is left out of the message
    raise ValueError("invalid boolean syntax")


def parse_env_int(value: Any) -> Any:
    """Convert an override string to a signed 64-bit int; other inputs pass through."""
    if not isinstance(value, str):
        return value
    if not _INT_SYNTAX.match(value):
        raise ValueError("invalid integer syntax")

    sign = ""
    digits = value
    if digits[0] in "+-":
        sign, digits = digits[0], digits[1:]
    if len(digits) > 1 and digits[0] == "0" and digits[1] not in "xXoObB":
        digits = "0o" + digits[1:]  # 010 == 8

    try:
        number = int(sign + digits, 0)
    except ValueError:
        raise ValueError("invalid integer syntax") from None
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError("integer out of range")
    return number


_PARSERS = {bool: parse_env_bool, int: parse_env_int}

_environ_override: ContextVar[Optional[Mapping[str, str]]] = ContextVar(
    "volconfig_environ_override", default=None
)


class MappingEnvSettingsSource(EnvSettingsSource):
    """Environment source that reads from a given mapping instead of os.environ."""

    def __init__(self, settings_cls: type, environ: Mapping[str, str]):
        self._environ = environ
        super().__init__(settings_cls)

    def _load_env_vars(self) -> Mapping[str, Optional[str]]:
        # Case-sensitive lookups, so the mapping is used as is
        return dict(self._environ)


class EnvironmentSettingsBase(BaseSettings):
    """Base for the generated settings class."""

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_ignore_empty=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type,
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # No .env or secrets dir: only explicit values and the environment
        environ = _environ_override.get()
        if environ is not None:
            env_settings = MappingEnvSettingsSource(settings_cls, environ)
        return init_settings, env_settings

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None):
        """Build settings from ``environ``, or from the process environment if None."""
        token = _environ_override.set(environ)
        try:
            return cls()
        finally:
            _environ_override.reset(token)

    def overrides(self) -> Dict[FieldSpec, Any]:
        """Field spec -> value for every variable that was set."""
        return {
            spec: getattr(self, spec.settings_name)
            for spec in ENV_FIELDS
            if spec.settings_name in self.model_fields_set
        }


def _settings_field(spec: FieldSpec):
    field_type = spec.type
    parser = _PARSERS.get(spec.type)
    if parser is not None:
        field_type = Annotated[spec.type, BeforeValidator(parser)]
    return (
        Optional[field_type],
        Field(None, validation_alias=AliasChoices(*spec.env_names)),
    )


EnvironmentSettings = create_model(
    "EnvironmentSettings",
    __base__=EnvironmentSettingsBase,
    __module__=__name__,
    __doc__="Typed values of the configuration override variables.",
    **{spec.settings_name: _settings_field(spec) for spec in ENV_FIELDS},
)

# Any accepted variable name or settings attribute -> field spec
SPEC_BY_NAME: Dict[str, FieldSpec] = {}
for _spec in ENV_FIELDS:
    SPEC_BY_NAME[_spec.settings_name] = _spec
    for _name in _spec.env_names:
        SPEC_BY_NAME[_name] = _spec
