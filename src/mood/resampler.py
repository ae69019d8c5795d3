"""Resample sparse mood entries into fixed-length chart series."""

from datetime import tzinfo
from decimal import Decimal
from typing import Optional, Sequence

import structlog

from shared_types import ChartPeriod

from .aggregator import average_energy, bucketize
from .models import DataPoint, MoodEntry, PeriodBucket
from .scoring import mood_score
from .windows import Instant, Window, days_in, localize, months_ending, week_window, weeks_of_month

logger = structlog.get_logger()


def average_mood_score(entries: Sequence[MoodEntry]) -> float:
    """Mean mood score of ``entries``; 0 when empty."""
    if not entries:
        return 0.0
    total = sum(mood_score(e.mood) for e in entries)
    return float(Decimal(total) / Decimal(len(entries)))


def sub_periods(
    period: str,
    reference: Instant,
    week_start: str = "sunday",
) -> list[Window]:
    """Sub-period windows giving the x-axis of a chart period.

    WEEK: 7 days. MONTH: ceil(days/7) week chunks. YEAR: the 12 calendar
    months ending with the reference's month.
    """
    period = ChartPeriod(period)
    if period == ChartPeriod.WEEK:
        return days_in(week_window(reference, week_start))
    if period == ChartPeriod.MONTH:
        return weeks_of_month(reference)
    return months_ending(reference, 12)


def _to_point(bucket: PeriodBucket) -> DataPoint:
    return DataPoint(
        period_label=bucket.label,
        period_start=bucket.period_start,
        energy=average_energy(bucket.entries),
        mood_score=average_mood_score(bucket.entries),
        entry_count=bucket.entry_count,
    )


def resample(
    entries: Sequence[MoodEntry],
    period: str,
    reference: Instant,
    *,
    week_start: str = "sunday",
    tz: Optional[tzinfo] = None,
) -> list[DataPoint]:
    """One DataPoint per sub-period of ``period`` around ``reference``.

    Periods without entries still produce a zero-filled point so the x-axis
    is stable regardless of how much data exists.
    """
    windows = sub_periods(period, localize(reference, tz), week_start)
    points = [_to_point(b) for b in bucketize(entries, windows, tz)]
    logger.debug("resampler.resampled", period=str(period), points=len(points))
    return points


def plottable(points: Sequence[DataPoint]) -> list[DataPoint]:
    """Points worth drawing on a line chart.

    A point with both series at zero is indistinguishable from an empty
    period under the zero sentinel and is dropped, even if it held entries
    (e.g. Angry at 0% energy). Aggregate summaries must not use this filter.
    """
    return [p for p in points if p.energy > 0 or p.mood_score > 0]
