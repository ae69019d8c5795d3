"""Pydantic request/response schemas for the web API."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from mood.models import DataPoint, MoodEntry, PeriodBucket, WindowSummary

# --- Entries ---


class MoodEntryCreate(BaseModel):
    mood: str = Field(..., min_length=1, max_length=50)
    mood_emoji: Optional[str] = Field(None, max_length=16)
    energy_level: int = Field(50, ge=0, le=100)
    notes: Optional[str] = Field(None, max_length=280)
    created_at: Optional[datetime] = None


class MoodEntryOut(BaseModel):
    id: str
    mood: str
    mood_emoji: str
    energy_level: int
    notes: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: MoodEntry) -> "MoodEntryOut":
        return cls(
            id=entry.id,
            mood=entry.mood,
            mood_emoji=entry.mood_emoji,
            energy_level=entry.energy_level,
            notes=entry.notes,
            created_at=entry.created_at,
        )


# --- Dashboard ---


class BucketOut(BaseModel):
    label: str
    period_start: datetime
    period_end: datetime
    entry_count: int
    has_data: bool
    average_energy: int
    dominant_mood: str
    dominant_emoji: str

    @classmethod
    def from_bucket(cls, bucket: PeriodBucket) -> "BucketOut":
        return cls(
            label=bucket.label,
            period_start=bucket.period_start,
            period_end=bucket.period_end,
            entry_count=bucket.entry_count,
            has_data=bucket.has_data,
            average_energy=bucket.average_energy,
            dominant_mood=bucket.dominant_mood,
            dominant_emoji=bucket.dominant_emoji,
        )


class MoodCountOut(BaseModel):
    mood: str
    emoji: str
    count: int
    percentage: float


class OverviewResponse(BaseModel):
    """Calendar-grid data: whole-window summary plus one bucket per day."""

    start: datetime
    end: datetime
    entry_count: int
    has_data: bool
    active_days: int
    average_energy: int
    dominant_mood: str
    dominant_emoji: str
    distribution: list[MoodCountOut] = []
    days: list[BucketOut] = []

    @classmethod
    def from_summary(cls, summary: WindowSummary) -> "OverviewResponse":
        return cls(
            start=summary.start,
            end=summary.end,
            entry_count=summary.entry_count,
            has_data=summary.has_data,
            active_days=summary.active_days,
            average_energy=summary.average_energy,
            dominant_mood=summary.dominant_mood,
            dominant_emoji=summary.dominant_emoji,
            distribution=[
                MoodCountOut(mood=m.mood, emoji=m.emoji, count=m.count, percentage=m.percentage)
                for m in summary.distribution
            ],
            days=[BucketOut.from_bucket(b) for b in summary.buckets],
        )


class DataPointOut(BaseModel):
    label: str
    period_start: datetime
    energy: int
    mood_score: float
    entry_count: int
    has_data: bool

    @classmethod
    def from_point(cls, point: DataPoint) -> "DataPointOut":
        return cls(
            label=point.period_label,
            period_start=point.period_start,
            energy=point.energy,
            mood_score=round(point.mood_score, 2),
            entry_count=point.entry_count,
            has_data=point.has_data,
        )


class ChartResponse(BaseModel):
    period: str
    points: list[DataPointOut]
