"""Calendar windows anchored at a reference instant.

All bounds are inclusive at the instant level: a window starts at 00:00:00 of
its first day and ends at 23:59:59.999999 of its last day. Windows live in a
naive wall-clock frame; ``localize`` moves aware instants into that frame for
a given bucketing time zone.
"""

import calendar
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Callable, Optional, Union
from zoneinfo import ZoneInfo

from shared_types import WeekStart, WindowKind

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

YEAR_DAYS = 365

_WEEKDAY_INDEX = {
    WeekStart.MONDAY: 0,
    WeekStart.TUESDAY: 1,
    WeekStart.WEDNESDAY: 2,
    WeekStart.THURSDAY: 3,
    WeekStart.FRIDAY: 4,
    WeekStart.SATURDAY: 5,
    WeekStart.SUNDAY: 6,
}

Instant = Union[datetime, date]


@dataclass(frozen=True)
class Window:
    """Inclusive time interval, optionally labelled for display."""

    start: datetime
    end: datetime
    label: str = ""

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end

    def contains_date(self, day: date) -> bool:
        return self.start.date() <= day <= self.end.date()

    @property
    def days(self) -> int:
        return (self.end.date() - self.start.date()).days + 1


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """Turn a configured IANA zone name into a tzinfo. None means host local."""
    if not name:
        return None
    return ZoneInfo(name)


def localize(instant: Instant, tz: Optional[tzinfo] = None) -> datetime:
    """Wall-clock time of ``instant`` in the bucketing zone, as a naive datetime.

    Naive datetimes are taken to be wall-clock time already. Plain dates map
    to their midnight.
    """
    if not isinstance(instant, datetime):
        return datetime.combine(instant, time.min)
    if instant.tzinfo is None:
        return instant
    local = instant.astimezone(tz) if tz is not None else instant.astimezone()
    return local.replace(tzinfo=None)


def start_of_day(day: Instant) -> datetime:
    d = day.date() if isinstance(day, datetime) else day
    return datetime.combine(d, time.min)


def end_of_day(day: Instant) -> datetime:
    d = day.date() if isinstance(day, datetime) else day
    return datetime.combine(d, time.max)


def weekday_index(week_start: str) -> int:
    """Python weekday number (Monday=0) of a week-start name."""
    try:
        return _WEEKDAY_INDEX[WeekStart(week_start.lower())]
    except ValueError:
        raise ValueError(
            f"Invalid week start: {week_start}. Must be one of {[w.value for w in WeekStart]}"
        )


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def day_window(reference: Instant) -> Window:
    return Window(start_of_day(reference), end_of_day(reference))


def week_window(reference: Instant, week_start: str = "sunday") -> Window:
    """Week containing ``reference``, starting on the most recent ``week_start`` day."""
    ref = localize(reference).date()
    offset = (ref.weekday() - weekday_index(week_start)) % 7
    first = ref - timedelta(days=offset)
    return Window(start_of_day(first), end_of_day(first + timedelta(days=6)))


def month_window(reference: Instant) -> Window:
    ref = localize(reference).date()
    first = ref.replace(day=1)
    last = ref.replace(day=days_in_month(ref.year, ref.month))
    return Window(start_of_day(first), end_of_day(last))


def trailing_window(reference: Instant, days: int) -> Window:
    """``days`` days before ``reference`` (inclusive) through the end of its day."""
    if days < 0:
        raise ValueError(f"Trailing window needs a non-negative day count, got {days}")
    ref = localize(reference).date()
    return Window(start_of_day(ref - timedelta(days=days)), end_of_day(ref))


def window_for(
    kind: str,
    reference: Instant,
    *,
    week_start: str = "sunday",
    days: Optional[int] = None,
    tz: Optional[tzinfo] = None,
) -> Window:
    """Compute the window of ``kind`` anchored at ``reference``.

    Args:
        kind: A WindowKind value.
        reference: Anchor instant; aware values are converted to ``tz`` first.
        week_start: First day of the week for WEEK windows.
        days: Day count, required for TRAILING_DAYS.
        tz: Bucketing time zone. None means host local time.
    """
    ref = localize(reference, tz)
    kind = WindowKind(kind)
    if kind == WindowKind.DAY:
        return day_window(ref)
    if kind == WindowKind.WEEK:
        return week_window(ref, week_start)
    if kind == WindowKind.MONTH:
        return month_window(ref)
    if kind == WindowKind.YEAR:
        return trailing_window(ref, YEAR_DAYS)
    if days is None:
        raise ValueError("TRAILING_DAYS window requires a day count")
    return trailing_window(ref, days)


def weekday_label(day: date) -> str:
    return WEEKDAY_LABELS[day.weekday()]


def day_of_month_label(day: date) -> str:
    return f"{MONTH_LABELS[day.month - 1]} {day.day}"


def days_in(window: Window, label: Callable[[date], str] = weekday_label) -> list[Window]:
    """One single-day window per calendar day of ``window``."""
    first = window.start.date()
    result = []
    for i in range(window.days):
        day = first + timedelta(days=i)
        result.append(Window(start_of_day(day), end_of_day(day), label(day)))
    return result


def weeks_of_month(reference: Instant) -> list[Window]:
    """Seven-day chunks of the month from day 1; the last chunk may be shorter."""
    month = month_window(reference)
    first = month.start.date()
    last = month.end.date()
    result = []
    for i in range(math.ceil(month.days / 7)):
        start = first + timedelta(days=7 * i)
        end = min(start + timedelta(days=6), last)
        result.append(Window(start_of_day(start), end_of_day(end), f"Week {i + 1}"))
    return result


def months_ending(reference: Instant, count: int = 12) -> list[Window]:
    """``count`` calendar months, oldest first, ending with the reference's month."""
    ref = localize(reference).date()
    result = []
    year, month = ref.year, ref.month
    for _ in range(count):
        first = date(year, month, 1)
        last = date(year, month, days_in_month(year, month))
        result.append(Window(start_of_day(first), end_of_day(last), MONTH_LABELS[month - 1]))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    result.reverse()
    return result
