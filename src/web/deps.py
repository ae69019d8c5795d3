"""Dependency injection for FastAPI routes."""

from datetime import tzinfo
from functools import lru_cache
from typing import Optional

from cli.config import get_paths, load_config_model
from cli.config_models import MoodboardConfig
from mood.storage import MoodStore
from mood.windows import resolve_timezone


@lru_cache
def get_config() -> MoodboardConfig:
    """Load shared config (config.yaml or defaults)."""
    return load_config_model()


def get_db_path():
    return get_paths(get_config().to_dict())["db_path"]


@lru_cache
def get_store() -> MoodStore:
    """Process-wide store; it opens a connection per call, so sharing is safe."""
    return MoodStore(get_db_path())


def get_week_start() -> str:
    return get_config().dashboard.week_start


def get_bucketing_tz() -> Optional[tzinfo]:
    return resolve_timezone(get_config().dashboard.bucketing_timezone)
