"""YAML configuration loader for table settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import SettingsError
from ..settings import TableSettings


def get_settings_path() -> Path:
    """Get the path to the bundled settings directory."""
    # clue/backend/loaders/ -> clue/settings
    return Path(__file__).parent.parent.parent / "settings"


def load_yaml_file(filepath: Path) -> Dict[str, Any]:
    """Load a single YAML file."""
    with open(filepath, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(path: Optional[Union[str, Path]] = None) -> TableSettings:
    """Load and validate a table file; defaults to the bundled ``table.yaml``."""
    filepath = Path(path) if path else get_settings_path() / "table.yaml"
    if not filepath.exists():
        raise SettingsError(f"settings file not found: {filepath}")
    try:
        data = load_yaml_file(filepath)
    except yaml.YAMLError as exc:
        raise SettingsError(f"{filepath} is not valid YAML: {exc}") from exc
    return parse_settings(data, source=str(filepath))


def parse_settings(data: Dict[str, Any], source: str = "<settings>") -> TableSettings:
    try:
        return TableSettings.model_validate(data)
    except ValidationError as exc:
        raise SettingsError(f"{source}: {exc}") from exc
