"""Bucket mood entries into calendar sub-periods and summarize them."""

from datetime import tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

import structlog

from .models import MoodCount, MoodEntry, PeriodBucket, WindowSummary
from .windows import (
    Instant,
    Window,
    day_of_month_label,
    days_in,
    localize,
    month_window,
    week_window,
)

logger = structlog.get_logger()


def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def average_energy(entries: Sequence[MoodEntry]) -> int:
    """Mean energy rounded half-up (50.5 -> 51). Empty input gives 0."""
    if not entries:
        return 0
    total = sum(e.energy_level for e in entries)
    return round_half_up(Decimal(total) / Decimal(len(entries)))


def _count_moods(entries: Iterable[MoodEntry]) -> dict[str, list]:
    """Ordered map of mood -> [count, emoji of first entry with that mood]."""
    counts: dict[str, list] = {}
    for entry in entries:
        if entry.mood in counts:
            counts[entry.mood][0] += 1
        else:
            counts[entry.mood] = [1, entry.mood_emoji]
    return counts


def dominant_mood(entries: Sequence[MoodEntry]) -> tuple[str, str]:
    """Most frequent mood and its emoji.

    Moods are visited in order of first appearance and only a strictly
    greater count replaces the current best, so the earliest mood wins ties.
    Returns ("", "") for no entries.
    """
    best_count = 0
    best_mood, best_emoji = "", ""
    for mood, (count, emoji) in _count_moods(entries).items():
        if count > best_count:
            best_count = count
            best_mood, best_emoji = mood, emoji
    return best_mood, best_emoji


def mood_distribution(entries: Sequence[MoodEntry]) -> list[MoodCount]:
    """Per-mood counts with percentage of total, most frequent first."""
    total = len(entries)
    if not total:
        return []
    stats = [
        MoodCount(mood=mood, emoji=emoji, count=count, percentage=round(count / total * 100, 1))
        for mood, (count, emoji) in _count_moods(entries).items()
    ]
    # sorted() is stable: equal counts keep first-occurrence order
    return sorted(stats, key=lambda s: s.count, reverse=True)


def _local_dates(entries: Sequence[MoodEntry], tz: Optional[tzinfo]) -> list:
    return [localize(e.created_at, tz).date() for e in entries]


def make_bucket(window: Window, entries: Sequence[MoodEntry]) -> PeriodBucket:
    mood, emoji = dominant_mood(entries)
    return PeriodBucket(
        period_start=window.start,
        period_end=window.end,
        label=window.label,
        entries=tuple(entries),
        average_energy=average_energy(entries),
        dominant_mood=mood,
        dominant_emoji=emoji,
    )


def bucketize(
    entries: Sequence[MoodEntry],
    windows: Sequence[Window],
    tz: Optional[tzinfo] = None,
) -> list[PeriodBucket]:
    """One bucket per window, in window order, empty windows included.

    Entries are matched by their calendar date in the bucketing zone, not by
    instant comparison: two entries share a day bucket iff their local dates
    are equal. Input order is preserved inside each bucket.
    """
    dates = _local_dates(entries, tz)
    buckets = []
    for window in windows:
        matched = [e for e, d in zip(entries, dates) if window.contains_date(d)]
        buckets.append(make_bucket(window, matched))
    logger.debug(
        "aggregator.bucketized",
        entries=len(entries),
        buckets=len(buckets),
        filled=sum(1 for b in buckets if b.has_data),
    )
    return buckets


def summarize(
    entries: Sequence[MoodEntry],
    window: Window,
    sub_windows: Sequence[Window],
    tz: Optional[tzinfo] = None,
) -> WindowSummary:
    """Whole-window aggregates over entries inside ``window`` plus per-sub-period buckets."""
    dates = _local_dates(entries, tz)
    inside = tuple(e for e, d in zip(entries, dates) if window.contains_date(d))
    mood, emoji = dominant_mood(inside)
    return WindowSummary(
        start=window.start,
        end=window.end,
        entries=inside,
        average_energy=average_energy(inside),
        dominant_mood=mood,
        dominant_emoji=emoji,
        buckets=bucketize(inside, sub_windows, tz),
        distribution=mood_distribution(inside),
    )


def week_overview(
    entries: Sequence[MoodEntry],
    reference: Instant,
    week_start: str = "sunday",
    tz: Optional[tzinfo] = None,
) -> WindowSummary:
    """Seven day buckets for the week containing ``reference``, plus the week summary."""
    window = week_window(localize(reference, tz), week_start)
    return summarize(entries, window, days_in(window), tz)


def month_overview(
    entries: Sequence[MoodEntry],
    reference: Instant,
    tz: Optional[tzinfo] = None,
) -> WindowSummary:
    """One bucket per calendar day of the reference's month, plus the month summary."""
    window = month_window(localize(reference, tz))
    return summarize(entries, window, days_in(window, label=day_of_month_label), tz)
