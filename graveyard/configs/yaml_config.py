"""
Graveyard YAML Configuration

Loading, saving, and defaults for ~/.graveyard/config.yaml.
"""

from pathlib import Path

import yaml

from graveyard.configs.logging import get_logger
from graveyard.configs.paths import ensure_data_dir, get_data_path

logger = get_logger("configs.yaml")

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# Graveyard Configuration
# Edit this file to customize search behavior.

# Enable debug logging
debug: false

# Relevance search
search:
  # Results scoring below this are dropped (applied after name boosts)
  min_score: 1.0

  # Added when a product name contains the whole query
  name_match_boost: 2.0

  # Added when a product name contains any single query word
  partial_name_boost: 0.5

  # Quiet interval in milliseconds before a typed query is searched
  debounce_ms: 150

# Result ordering when no query is active
browse:
  # One of: dateClose-desc, dateClose-asc, lifespan-desc, lifespan-asc,
  # name-asc, name-desc
  default_sort: "dateClose-desc"
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config() -> dict:
    """
    Load configuration from ~/.graveyard/config.yaml.

    Returns:
        Configuration dictionary (empty if the file doesn't exist or is unreadable)
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        content = config_path.read_text()
        loaded = yaml.safe_load(content) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return {}

    if not isinstance(loaded, dict):
        logger.warning(f"Ignoring config {config_path}: top level is not a mapping")
        return {}
    return loaded


def save_yaml_config(config: dict) -> bool:
    """
    Save configuration to ~/.graveyard/config.yaml.

    Args:
        config: Configuration dictionary to save

    Returns:
        True if successful
    """
    config_path = get_config_path()
    ensure_data_dir()

    try:
        content = yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
        config_path.write_text(content)
        return True
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to save config {config_path}: {e}")
        return False


def create_default_config() -> bool:
    """
    Create default config.yaml if it doesn't exist.

    Returns:
        True if file was created, False if it already exists
    """
    config_path = get_config_path()
    if config_path.exists():
        return False

    ensure_data_dir()
    config_path.write_text(DEFAULT_CONFIG_YAML)
    return True
