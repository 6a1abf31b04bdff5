"""Path management utilities for network-profiles library."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import CONFIG_PATH_ENV, DEFAULT_CONFIG_FILENAME


def get_default_config_path() -> Path:
    """
    Get default configuration file path.

    Returns:
        Path from $NETWORK_PROFILES_CONFIG if set, else ./networks.json
    """
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).absolute()
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def get_config_path(config_path: Optional[Union[Path, str]] = None) -> Path:
    """
    Get configuration file path.

    Args:
        config_path: Custom file path (defaults to get_default_config_path())

    Returns:
        Absolute path to the configuration file
    """
    if config_path is None:
        return get_default_config_path()
    return Path(config_path).absolute()
