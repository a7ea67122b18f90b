"""Configuration management for deptree."""

import json
import os
from typing import Any, Dict

CONFIG_DIR = os.path.expanduser("~/.deptree")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")

OUTPUT_FORMATS = ("json", "tree", "yaml")

DEFAULT_CONFIG: Dict[str, Any] = {
    "index_path": "deptree.yml",
    "indent": 2,
    "output_format": "json",
    "strict": True,
    "max_depth": 32,
}


def ensure_config_exists() -> None:
    """Ensure the configuration directory and file exist."""
    if not os.path.exists(CONFIG_DIR):
        os.makedirs(CONFIG_DIR)

    if not os.path.exists(CONFIG_FILE):
        with open(CONFIG_FILE, "w") as f:
            json.dump(DEFAULT_CONFIG, f, indent=2)


def get_config() -> Dict[str, Any]:
    """Get the current configuration, filled in with defaults.

    Returns:
        dict: Current configuration.
    """
    ensure_config_exists()
    try:
        with open(CONFIG_FILE, "r") as f:
            stored = json.load(f)
    except (json.JSONDecodeError, OSError):
        stored = {}
    if not isinstance(stored, dict):
        stored = {}
    config = dict(DEFAULT_CONFIG)
    config.update(stored)
    return config


def update_config(updates: Dict[str, Any]) -> None:
    """Update the configuration with new values.

    Args:
        updates: Dictionary of configuration values to update.
    """
    config = get_config()
    config.update(updates)
    with open(CONFIG_FILE, "w") as f:
        json.dump(config, f, indent=2)


def reset_config() -> None:
    """Restore the default configuration."""
    ensure_config_exists()
    with open(CONFIG_FILE, "w") as f:
        json.dump(DEFAULT_CONFIG, f, indent=2)


def get_index_path() -> str:
    """Path of the dependency index; DEPTREE_INDEX overrides the config file."""
    return os.environ.get("DEPTREE_INDEX") or get_config()["index_path"]


def set_index_path(path: str) -> None:
    update_config({"index_path": path})


def get_indent() -> int:
    """Number of spaces per nesting level in JSON output (0 = single line)."""
    return int(get_config()["indent"])


def set_indent(indent: int) -> None:
    if indent < 0:
        raise ValueError("indent must not be negative")
    update_config({"indent": indent})


def get_output_format() -> str:
    return get_config()["output_format"]


def set_output_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format '{output_format}', expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
    update_config({"output_format": output_format})


def get_strict() -> bool:
    return bool(get_config()["strict"])


def set_strict(strict: bool) -> None:
    update_config({"strict": strict})


def get_max_depth() -> int:
    return int(get_config()["max_depth"])


def set_max_depth(max_depth: int) -> None:
    if max_depth < 1:
        raise ValueError("max_depth must be at least 1")
    update_config({"max_depth": max_depth})
