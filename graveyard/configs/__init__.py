"""
Graveyard Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from graveyard.configs.logging import get_logger, setup_logging

# Paths
from graveyard.configs.paths import get_data_path, ensure_data_dir

# Constants
from graveyard.configs.constants import (
    DEBOUNCE_MS,
    DEFAULT_MIN_SCORE,
    NAME_MATCH_BOOST,
    PARTIAL_NAME_BOOST,
    STOP_WORDS,
)

# YAML config
from graveyard.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    get_config_path,
    load_yaml_config,
    save_yaml_config,
    create_default_config,
)

# Runtime
from graveyard.configs.runtime import DEFAULT_CONFIG, get_full_config

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    # Constants
    "DEBOUNCE_MS",
    "DEFAULT_MIN_SCORE",
    "NAME_MATCH_BOOST",
    "PARTIAL_NAME_BOOST",
    "STOP_WORDS",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "save_yaml_config",
    "create_default_config",
    # Runtime
    "DEFAULT_CONFIG",
    "get_full_config",
]
