"""Shared CLI utilities."""

from datetime import date, datetime, timezone, tzinfo
from typing import Optional

import click

from mood.scoring import energy_band, mood_band
from mood.windows import localize

ENERGY_STYLE = {
    "none": "grey50",
    "very_low": "red",
    "low": "dark_orange",
    "medium": "yellow",
    "high": "green",
    "very_high": "blue",
}

MOOD_STYLE = {
    "very_low": "red",
    "low": "dark_orange",
    "medium": "yellow",
    "high": "green",
    "very_high": "blue",
}


def get_components():
    """Initialize store and settings from config."""
    from cli.config import get_paths, load_config_model
    from mood.storage import MoodStore
    from mood.windows import resolve_timezone

    config_model = load_config_model()
    config = config_model.to_dict()
    paths = get_paths(config)

    return {
        "config": config,
        "config_model": config_model,
        "paths": paths,
        "store": MoodStore(paths["db_path"]),
        "user_id": config_model.user_id,
        "week_start": config_model.dashboard.week_start,
        "tz": resolve_timezone(config_model.dashboard.bucketing_timezone),
    }


def _parse_iso(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD or ISO datetime, got {value!r}")


def parse_reference(value: Optional[str], tz: Optional[tzinfo] = None) -> datetime:
    """Parse a --date option into wall-clock time in the bucketing zone.

    Defaults to the current time in ``tz`` (host local when None). Naive
    values are already wall-clock time there; aware ones are converted.
    """
    if not value:
        return localize(datetime.now(timezone.utc), tz)
    return localize(_parse_iso(value), tz)


def parse_timestamp(value: str, tz: Optional[tzinfo] = None) -> datetime:
    """Parse an --at option into an instant; naive values are read in ``tz``."""
    parsed = _parse_iso(value)
    if parsed.tzinfo is None and tz is not None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def energy_bar(level: int, width: int = 10) -> str:
    """Rich markup bar for an energy percentage."""
    filled = round(level / 100 * width)
    style = ENERGY_STYLE[energy_band(level)]
    return f"[{style}]{'█' * filled}[/][dim]{'░' * (width - filled)}[/]"


def styled_score(score: float) -> str:
    return f"[{MOOD_STYLE[mood_band(score)]}]{score:.0f}[/]"


def format_day(d: date) -> str:
    return d.strftime("%Y-%m-%d")
