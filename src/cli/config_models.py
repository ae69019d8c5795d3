"""Pydantic configuration models for moodboard."""

import os
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator, model_validator

from shared_types import ChartPeriod, WeekStart


def default_home() -> Path:
    """Data directory; MOODBOARD_HOME overrides ~/moodboard."""
    return Path(os.environ.get("MOODBOARD_HOME", Path.home() / "moodboard"))


class PathsConfig(BaseModel):
    """File paths configuration."""

    db_path: Path = Field(default_factory=lambda: default_home() / "moods.db")
    log_file: Path = Field(default_factory=lambda: default_home() / "moodboard.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.db_path = self.db_path.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


class DashboardConfig(BaseModel):
    """Windowing and bucketing behaviour."""

    week_start: str = WeekStart.SUNDAY.value
    # None = host local time zone
    bucketing_timezone: Optional[str] = None
    default_period: str = ChartPeriod.WEEK.value
    recent_limit: int = 5

    @field_validator("week_start")
    @classmethod
    def validate_week_start(cls, v: str) -> str:
        v_lower = v.lower()
        valid = {w.value for w in WeekStart}
        if v_lower not in valid:
            raise ValueError(f"Invalid week_start: {v}. Must be one of {sorted(valid)}")
        return v_lower

    @field_validator("bucketing_timezone")
    @classmethod
    def validate_timezone(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown time zone: {v}")
        return v

    @field_validator("default_period")
    @classmethod
    def validate_period(cls, v: str) -> str:
        valid = {p.value for p in ChartPeriod}
        if v not in valid:
            raise ValueError(f"Invalid default_period: {v}. Must be one of {sorted(valid)}")
        return v

    @field_validator("recent_limit")
    @classmethod
    def validate_recent_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"recent_limit must be >= 1, got {v}")
        return v


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class MoodboardConfig(BaseModel):
    """Main configuration model."""

    user_id: str = "local"
    paths: PathsConfig = Field(default_factory=PathsConfig)
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("user_id must not be empty")
        return v

    @classmethod
    def from_dict(cls, data: dict) -> "MoodboardConfig":
        """Create config from dict, accepting string paths."""
        if "paths" in data:
            for key in ["db_path", "log_file"]:
                if key in data["paths"] and isinstance(data["paths"][key], str):
                    data["paths"][key] = Path(data["paths"][key])
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
