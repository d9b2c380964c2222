"""Configuration loaders for the Clue backend."""

from .yaml_loader import (
    get_settings_path,
    load_settings,
    load_yaml_file,
    parse_settings,
)

__all__ = [
    "get_settings_path",
    "load_settings",
    "load_yaml_file",
    "parse_settings",
]
