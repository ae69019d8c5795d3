"""Entry and aggregate types for mood tracking."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class MoodEntry:
    """A single recorded mood. Immutable once created."""

    id: str
    mood: str
    mood_emoji: str
    energy_level: int
    created_at: datetime
    user_id: str
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "mood": self.mood,
            "mood_emoji": self.mood_emoji,
            "energy_level": self.energy_level,
            "notes": self.notes,
            "created_at": self.created_at.isoformat(),
            "user_id": self.user_id,
        }


@dataclass(frozen=True)
class PeriodBucket:
    """Entries falling inside one sub-period, with their aggregates.

    ``average_energy == 0`` and ``dominant_mood == ""`` are the "no data"
    sentinels; use ``has_data`` to tell them apart from a real zero.
    """

    period_start: datetime
    period_end: datetime
    label: str
    entries: tuple[MoodEntry, ...] = ()
    average_energy: int = 0
    dominant_mood: str = ""
    dominant_emoji: str = ""

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    @property
    def has_data(self) -> bool:
        return bool(self.entries)


@dataclass(frozen=True)
class MoodCount:
    mood: str
    emoji: str
    count: int
    percentage: float


@dataclass(frozen=True)
class WindowSummary:
    """Whole-window aggregates alongside the per-sub-period buckets."""

    start: datetime
    end: datetime
    entries: tuple[MoodEntry, ...]
    average_energy: int
    dominant_mood: str
    dominant_emoji: str
    buckets: list[PeriodBucket] = field(default_factory=list)
    distribution: list[MoodCount] = field(default_factory=list)

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    @property
    def has_data(self) -> bool:
        return bool(self.entries)

    @property
    def active_days(self) -> int:
        """Number of buckets holding at least one entry."""
        return sum(1 for b in self.buckets if b.has_data)


@dataclass(frozen=True)
class DataPoint:
    """One resampled chart point. Zero-filled when the period is empty."""

    period_label: str
    period_start: datetime
    energy: int = 0
    mood_score: float = 0.0
    entry_count: int = 0

    @property
    def has_data(self) -> bool:
        return self.entry_count > 0
