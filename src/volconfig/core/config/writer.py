"""
TOML re-encoding and redacted views of a configuration.

``dump_config`` writes every present section with its file keys, so the
output decodes back into an equal record.
"""

from pathlib import Path
from typing import Any, Dict, Union

import tomli_w

from volconfig.constants import REDACTED_VALUE

from .models import VolumeConfig
from .schema import SECTION_MODELS, secret_file_keys


def config_to_dict(config: VolumeConfig) -> Dict[str, Dict[str, Any]]:
    """File-keyed dictionary of the present sections."""
    data = {}
    for section in SECTION_MODELS:
        value = getattr(config, section)
        if value is not None:
            data[section] = value.model_dump(by_alias=True)
    return data


def redacted_dict(config: VolumeConfig) -> Dict[str, Dict[str, Any]]:
    """Like ``config_to_dict`` with non-empty secret values masked."""
    data = config_to_dict(config)
    for section, values in data.items():
        for key in secret_file_keys(section):
            if values.get(key):
                values[key] = REDACTED_VALUE
    return data


def dump_config(config: VolumeConfig) -> str:
    return tomli_w.dumps(config_to_dict(config))


def write_config(config: VolumeConfig, path: Union[str, Path]) -> Path:
    """Write ``config`` as TOML to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        tomli_w.dump(config_to_dict(config), f)
    return path
