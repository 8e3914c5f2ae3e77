"""
Graveyard Data Paths

Location of the user data directory holding config.yaml and the log file.
"""

import os
from pathlib import Path

DEFAULT_DATA_PATH = Path.home() / ".graveyard"


def get_data_path() -> Path:
    """Get the Graveyard data directory path.

    GRAVEYARD_DATA_PATH overrides the default of ~/.graveyard.

    Returns:
        Path to the data directory
    """
    data_path = os.environ.get("GRAVEYARD_DATA_PATH")
    if data_path:
        return Path(data_path).expanduser()
    return DEFAULT_DATA_PATH


def ensure_data_dir() -> Path:
    """Ensure the data directory exists.

    Returns:
        Path to data directory
    """
    data_path = get_data_path()
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path
