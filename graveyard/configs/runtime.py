"""
Graveyard Runtime Configuration

Runtime defaults and configuration merging logic.
Combines defaults, YAML config, and environment variables.
"""

import os
from typing import Any

from graveyard.configs.constants import (
    DEBOUNCE_MS,
    DEFAULT_MIN_SCORE,
    NAME_MATCH_BOOST,
    PARTIAL_NAME_BOOST,
)
from graveyard.configs.yaml_config import load_yaml_config
from graveyard.exceptions import ConfigurationError

# --- Default Runtime Configuration ---

DEFAULT_CONFIG = {
    "min_score": DEFAULT_MIN_SCORE,
    "name_match_boost": NAME_MATCH_BOOST,
    "partial_name_boost": PARTIAL_NAME_BOOST,
    "debounce_ms": DEBOUNCE_MS,
    "default_sort": "dateClose-desc",
}

# Keys that must be non-negative numbers
_NUMERIC_KEYS = ("min_score", "name_match_boost", "partial_name_boost", "debounce_ms")

# Environment overrides: env var -> config key
_ENV_OVERRIDES = {
    "GRAVEYARD_MIN_SCORE": "min_score",
    "GRAVEYARD_DEBOUNCE_MS": "debounce_ms",
}


def _as_number(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigurationError("Expected a number", {"key": key, "value": value})
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError("Expected a number", {"key": key, "value": value}) from None
    if number < 0:
        raise ConfigurationError("Expected a non-negative number", {"key": key, "value": value})
    return number


def get_full_config() -> dict:
    """
    Get the merged runtime configuration.

    Priority (highest first):
    1. Environment variables (GRAVEYARD_MIN_SCORE, GRAVEYARD_DEBOUNCE_MS)
    2. search: and browse: sections of config.yaml
    3. DEFAULT_CONFIG

    Returns:
        Configuration dictionary with every DEFAULT_CONFIG key present

    Raises:
        ConfigurationError: A numeric setting is not a non-negative number
    """
    config = dict(DEFAULT_CONFIG)

    yaml_config = load_yaml_config()
    for section in ("search", "browse"):
        values = yaml_config.get(section) or {}
        if not isinstance(values, dict):
            raise ConfigurationError("Config section must be a mapping", {"section": section})
        for key, value in values.items():
            if key in config:
                config[key] = value

    for env_var, key in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            config[key] = value

    for key in _NUMERIC_KEYS:
        config[key] = _as_number(key, config[key])

    return config
