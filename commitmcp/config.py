"""Configuration module for commitmcp.

This module provides access to user configuration stored in one of these locations:
1. $COMMITMCP_CONFIG_DIR/commitmcprc if $COMMITMCP_CONFIG_DIR is defined
2. $XDG_CONFIG_HOME/commitmcp/commitmcprc if $XDG_CONFIG_HOME is defined
3. $HOME/.commitmcprc

The configuration is stored in TOML format.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import tomli

__all__ = [
    "DEFAULT_LOG_COUNT",
    "get_config_path",
    "load_config",
    "get_logger_verbosity",
    "get_logger_path",
    "get_log_count",
]

DEFAULT_LOG_COUNT = 10

DEFAULT_CONFIG: dict[str, Any] = {
    "logger": {
        "verbosity": "INFO",  # Default logging level
        "path": str(Path.home() / ".commitmcp"),  # Default logger path
    },
    "git": {
        "log_count": DEFAULT_LOG_COUNT,  # Commits shown by git_log
    },
}


def get_config_path() -> Path:
    """Return the path to the user's config file.

    Checks the following locations in order:
    1. $COMMITMCP_CONFIG_DIR/commitmcprc if $COMMITMCP_CONFIG_DIR is defined
    2. $XDG_CONFIG_HOME/commitmcp/commitmcprc if $XDG_CONFIG_HOME is defined
    3. Fallback to $HOME/.commitmcprc

    Returns:
        Path to the config file
    """
    # Check $COMMITMCP_CONFIG_DIR first
    if "COMMITMCP_CONFIG_DIR" in os.environ:
        path = Path(os.environ["COMMITMCP_CONFIG_DIR"]) / "commitmcprc"
        if path.exists():
            return path

    # Check $XDG_CONFIG_HOME next
    if "XDG_CONFIG_HOME" in os.environ:
        path = Path(os.environ["XDG_CONFIG_HOME"]) / "commitmcp" / "commitmcprc"
        if path.exists():
            return path

    # Fallback to $HOME/.commitmcprc
    return Path.home() / ".commitmcprc"


def load_config() -> dict[str, Any]:
    """Load configuration from the config file.

    Returns:
        Dict containing the merged configuration (defaults + user config).
    """
    # Deep copy so merging never mutates the module defaults
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                user_config = tomli.load(f)

            # Merge user config with defaults
            _merge_configs(config, user_config)
        except (OSError, tomli.TOMLDecodeError) as e:
            logging.warning(f"Error loading config from {config_path}: {e}")

    return config


def _merge_configs(base: dict[str, Any], override: dict[str, Any]) -> None:
    """Recursively merge override dict into base dict."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            # Type annotation to help the type checker understand that value is dict[str, Any]
            nested_value: dict[str, Any] = value
            _merge_configs(base[key], nested_value)
        else:
            base[key] = value


def get_logger_verbosity() -> str:
    """Get the configured logger verbosity level.

    Returns:
        String representing the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    config = load_config()
    return str(config["logger"]["verbosity"])


def get_logger_path() -> str:
    """Get the configured logger path, with ~ expanded."""
    config = load_config()
    return os.path.expanduser(str(config["logger"]["path"]))


def get_log_count() -> int:
    """Get the number of commits git_log shows when no count is given."""
    config = load_config()
    try:
        count = int(config["git"]["log_count"])
    except (TypeError, ValueError):
        logging.warning(
            f"Invalid git.log_count {config['git']['log_count']!r}, using {DEFAULT_LOG_COUNT}"
        )
        return DEFAULT_LOG_COUNT
    return count if count > 0 else DEFAULT_LOG_COUNT
