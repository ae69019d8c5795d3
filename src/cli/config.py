"""Configuration loading and management."""

from pathlib import Path
from typing import Optional

import yaml

from .config_models import MoodboardConfig


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".moodboard" / "config.yaml",
        Path.home() / "moodboard" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config_model(config_path: Optional[Path] = None) -> MoodboardConfig:
    """Load configuration as Pydantic model with validation."""
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    try:
        return MoodboardConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")


def get_paths(config: dict) -> dict:
    """Get expanded paths from config."""
    paths = config.get("paths") or MoodboardConfig().to_dict()["paths"]
    return {
        "db_path": Path(paths["db_path"]).expanduser(),
        "log_file": Path(paths["log_file"]).expanduser(),
    }
