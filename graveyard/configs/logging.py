"""
Graveyard Logging Configuration

Configures logging based on environment variables:
- GRAVEYARD_DEBUG: Enable debug logging (default: the config.yaml ``debug`` key, else false)
- GRAVEYARD_LOG_FILE: Log file path (default: none, stderr only)
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


def _debug_from_yaml() -> bool:
    # Imported here: yaml_config logs through this module
    from graveyard.configs.yaml_config import load_yaml_config

    return load_yaml_config().get("debug") is True


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for Graveyard.

    Args:
        debug: Enable debug level. Defaults to GRAVEYARD_DEBUG env var,
               then the ``debug`` key of config.yaml.
        log_file: Log file path. Defaults to GRAVEYARD_LOG_FILE env var.
                  When neither is set, logs go to stderr only.

    Returns:
        Root logger for graveyard
    """
    # Read from env if not provided
    if debug is None:
        env_debug = os.environ.get("GRAVEYARD_DEBUG")
        if env_debug:
            debug = env_debug.lower() in ("true", "1", "yes")
        else:
            debug = _debug_from_yaml()
    if log_file is None:
        log_file = os.environ.get("GRAVEYARD_LOG_FILE") or None

    level = logging.DEBUG if debug else logging.INFO

    # Create formatter with component tags
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("graveyard")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if log_file:
        # If logging to file, only show warnings on stderr
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_file}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "search.tfidf", "facets", "catalog")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"graveyard.{component}")
