"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "resolver": {
        "default_field_modifier": "internal",
    },
    "logging": {
        "level": "WARNING",
    },
}


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge `update` over `base`.

    Non-mapping values replace; null values (an empty YAML section) keep the base.
    """
    result = base.copy()
    for key, value in update.items():
        if value is None:
            continue
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_config(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Raises ValueError when the file or one of its sections is not a mapping.
    """
    config = merge_config(DEFAULT_CONFIG, {})
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"{path}: expected a mapping at the top level"
                raise ValueError(msg)
            config = merge_config(config, user_config)
            for section in DEFAULT_CONFIG:
                if not isinstance(config[section], dict):
                    msg = f"{path}: section '{section}' must be a mapping"
                    raise ValueError(msg)
    return config
