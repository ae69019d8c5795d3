"""Shared test fixtures for moodboard."""

import itertools
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mood.catalog import emoji_for  # noqa: E402
from mood.models import MoodEntry  # noqa: E402

# Wednesday; its Sunday-start week runs May 12 - May 18
WEDNESDAY = datetime(2024, 5, 15, 12, 0)


@pytest.fixture
def make_entry():
    """Factory for MoodEntry objects with sequential ids."""
    ids = itertools.count(1)

    def _make(
        mood: str = "Happy",
        energy: int = 50,
        created_at: datetime = WEDNESDAY,
        emoji: str | None = None,
        notes: str | None = None,
        user_id: str = "user-1",
    ) -> MoodEntry:
        return MoodEntry(
            id=f"entry-{next(ids)}",
            mood=mood,
            mood_emoji=emoji or emoji_for(mood),
            energy_level=energy,
            created_at=created_at,
            user_id=user_id,
            notes=notes,
        )

    return _make


@pytest.fixture
def week_entries(make_entry):
    """Monday Sad at 40, two Wednesday Happy at 80."""
    return [
        make_entry("Sad", 40, datetime(2024, 5, 13, 8, 30)),
        make_entry("Happy", 80, datetime(2024, 5, 15, 9, 0)),
        make_entry("Happy", 80, datetime(2024, 5, 15, 21, 15)),
    ]


@pytest.fixture
def store(tmp_path):
    from mood.storage import MoodStore

    return MoodStore(tmp_path / "moods.db")
