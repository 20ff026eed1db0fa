"""
Configuration loader: TOML file first, environment variables on top.

A load is one synchronous two-pass merge into a fresh ``VolumeConfig``:

1. decode the TOML file into the record;
2. overlay every set override variable onto the same record.

A failing pass is logged and does not stop the other one. When anything
failed, the first failure is raised with the merged record attached as
``error.config`` and later failures in ``error.related_errors``, so the
record is available to callers even on error.
"""

import os
import sys
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from ...exceptions.config import (
    ConfigDecodeError,
    ConfigLoadError,
    ConfigOverlayError,
)
from ...logging import VolumeLogger, get_logger
from .models import IKSConfig, VolumeConfig
from .paths import resolve_config_path
from .schema import SECTION_MODELS, section_fields
from .settings import SPEC_BY_NAME, EnvironmentSettings


def _match_keys(table: Mapping[str, Any], known: Iterable[str]) -> Dict[str, Any]:
    """Map ``table`` keys onto ``known`` names.

    An exact match wins; otherwise keys match case-insensitively. Keys that
    match nothing are dropped.
    """
    known = list(known)
    folded = {name.lower(): name for name in known}
    matched: Dict[str, Any] = {}
    for key, value in table.items():
        if key in known:
            matched[key] = value
    for key, value in table.items():
        name = folded.get(key.lower())
        if name is not None and name not in matched:
            matched[name] = value
    return matched


def _details(error: Exception) -> str:
    return f"{type(error).__name__}: {error}"


def _format_validation_error(section: str, error: ValidationError) -> List[str]:
    # Input values are left out: they may be credentials
    problems = []
    for detail in error.errors():
        key = ".".join(str(part) for part in detail["loc"])
        problems.append(f"[{section}] {key}: {detail['msg']}")
    return problems


class ConfigLoader:
    """Loads ``VolumeConfig`` records.

    Args:
        logger: Logger receiving the progress and failure lines. Defaults
            to a logger named after this module.
        environ: Variables used for path resolution and overrides. Defaults
            to the process environment.
    """

    def __init__(
        self,
        logger: Optional[VolumeLogger] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.logger = logger or get_logger(__name__)
        self.environ = environ

    def load(self, conf_path: Optional[str] = None) -> VolumeConfig:
        """Resolve the file path, then decode and overlay a new record."""
        path = resolve_config_path(conf_path, self.environ)

        # iks exists before decoding, the other sections once both passes ran
        config = VolumeConfig(iks=IKSConfig())
        self.logger.info("parsing conf file", confpath=path)
        return self.parse(path, config)

    def parse(self, path: str, config: VolumeConfig) -> VolumeConfig:
        """Decode ``path`` into ``config`` and overlay the environment.

        Every section is present on the returned (or attached) record; the
        ones neither the file nor the environment filled hold zero values.

        Raises:
            ConfigDecodeError: The file could not be decoded, fully or in part.
            ConfigOverlayError: An override variable has the wrong type and
                the file decoded cleanly.
        """
        logger = self.logger.with_context(confpath=path)
        errors: List[ConfigLoadError] = []

        try:
            self.decode_file(path, config)
        except ConfigDecodeError as e:
            logger.error(
                "Failed to parse config file",
                error=e.message,
                error_id=e.correlation_id,
            )
            errors.append(e)

        try:
            self.apply_environment(config)
        except ConfigOverlayError as e:
            e.path = path
            e.add_context(path=path)
            logger.error(
                "Failed to gather environment config variable",
                variables=",".join(e.variables),
                error=e.message,
                error_id=e.correlation_id,
            )
            errors.append(e)

        for section, model in SECTION_MODELS.items():
            if getattr(config, section) is None:
                setattr(config, section, model())

        if errors:
            primary = errors[0]
            primary.config = config
            primary.related_errors.extend(errors[1:])
            raise primary
        return config

    def decode_file(self, path: str, config: VolumeConfig) -> VolumeConfig:
        """Decode the TOML file at ``path`` into ``config``.

        Sections are decoded independently: a section with a bad value keeps
        its previous content while the others are still filled in. Values
        from the file are merged over what the section already holds.
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            raise ConfigDecodeError(path, ["file not found"]) from None
        except OSError as e:
            raise ConfigDecodeError(
                path, [f"cannot read file: {e.strerror or e}"], _details(e)
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigDecodeError(
                path, [f"invalid TOML syntax: {e}"], _details(e)
            ) from e
        except UnicodeDecodeError as e:
            raise ConfigDecodeError(path, ["file is not valid UTF-8"], _details(e)) from e

        problems: List[str] = []
        for section, table in _match_keys(data, SECTION_MODELS).items():
            if not isinstance(table, dict):
                problems.append(
                    f"[{section}] expected a table, got {type(table).__name__}"
                )
                continue

            model = SECTION_MODELS[section]
            values = _match_keys(table, (s.file_key for s in section_fields(section)))
            current = getattr(config, section)
            if current is not None:
                values = {**current.model_dump(by_alias=True), **values}

            try:
                setattr(config, section, model.model_validate(values))
            except ValidationError as e:
                problems.extend(_format_validation_error(section, e))

        if problems:
            raise ConfigDecodeError(path, problems)
        return config

    def apply_environment(self, config: VolumeConfig) -> VolumeConfig:
        """Overwrite fields of ``config`` with the set override variables.

        Either every override applies or none does. A section that is still
        absent is created when one of its fields is overridden.
        """
        try:
            settings = EnvironmentSettings.from_environ(self.environ)
        except ValidationError as e:
            raise ConfigOverlayError(self._overlay_failures(e)) from e

        for spec, value in settings.overrides().items():
            section = getattr(config, spec.section)
            if section is None:
                section = SECTION_MODELS[spec.section]()
                setattr(config, spec.section, section)
            setattr(section, spec.name, value)
        return config

    def _overlay_failures(self, error: ValidationError) -> Dict[str, str]:
        environ = os.environ if self.environ is None else self.environ
        failures: Dict[str, str] = {}
        for detail in error.errors():
            spec = SPEC_BY_NAME.get(str(detail["loc"][0])) if detail["loc"] else None
            if spec is None:
                failures[str(detail["loc"])] = detail["msg"]
                continue
            name = next((n for n in spec.env_names if n in environ), spec.env_var)
            failures[name] = detail["msg"]
        return failures


def read_config(
    conf_path: Optional[str] = None,
    logger: Optional[VolumeLogger] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> VolumeConfig:
    """Load the configuration from ``conf_path`` or the resolved default path."""
    return ConfigLoader(logger, environ).load(conf_path)


def parse_config(
    file_path: str,
    config: VolumeConfig,
    logger: Optional[VolumeLogger] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> VolumeConfig:
    """Merge ``file_path`` and the environment into an existing record."""
    return ConfigLoader(logger, environ).parse(file_path, config)
