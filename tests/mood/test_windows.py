"""Tests for period windows and sub-period generation."""

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

import pytest

from mood.windows import (
    Window,
    days_in,
    localize,
    month_window,
    months_ending,
    resolve_timezone,
    week_window,
    weeks_of_month,
    window_for,
)
from shared_types import WindowKind

WEDNESDAY = datetime(2024, 5, 15, 15, 30)


class TestWindowFor:
    def test_day_bounds_inclusive(self):
        w = window_for(WindowKind.DAY, WEDNESDAY)
        assert w.start == datetime(2024, 5, 15, 0, 0)
        assert w.end == datetime.combine(date(2024, 5, 15), time.max)
        assert w.contains(datetime(2024, 5, 15, 0, 0))
        assert w.contains(datetime(2024, 5, 15, 23, 59, 59, 999999))
        assert not w.contains(datetime(2024, 5, 16, 0, 0))

    def test_week_is_sunday_anchored_by_default(self):
        w = window_for(WindowKind.WEEK, WEDNESDAY)
        assert w.start == datetime(2024, 5, 12)
        assert w.end.date() == date(2024, 5, 18)
        assert w.days == 7

    def test_week_on_sunday_starts_same_day(self):
        w = week_window(datetime(2024, 5, 12, 8, 0))
        assert w.start.date() == date(2024, 5, 12)

    def test_week_on_saturday_ends_same_day(self):
        w = week_window(datetime(2024, 5, 18, 23, 0))
        assert w.start.date() == date(2024, 5, 12)
        assert w.end.date() == date(2024, 5, 18)

    def test_week_monday_start(self):
        w = window_for(WindowKind.WEEK, WEDNESDAY, week_start="monday")
        assert w.start.date() == date(2024, 5, 13)
        assert w.end.date() == date(2024, 5, 19)

    def test_week_crosses_month_boundary(self):
        w = week_window(datetime(2024, 6, 1))  # Saturday
        assert w.start.date() == date(2024, 5, 26)
        assert w.end.date() == date(2024, 6, 1)

    def test_invalid_week_start(self):
        with pytest.raises(ValueError, match="week start"):
            week_window(WEDNESDAY, "funday")

    @pytest.mark.parametrize(
        "ref,last_day",
        [
            (datetime(2024, 2, 10), 29),
            (datetime(2023, 2, 10), 28),
            (datetime(2024, 4, 30), 30),
            (datetime(2024, 12, 1), 31),
        ],
    )
    def test_month_uses_calendar_length(self, ref, last_day):
        w = window_for(WindowKind.MONTH, ref)
        assert w.start == datetime(ref.year, ref.month, 1)
        assert w.end.date() == date(ref.year, ref.month, last_day)
        assert w.days == last_day

    def test_year_is_trailing_365_days(self):
        w = window_for(WindowKind.YEAR, WEDNESDAY)
        assert w.start == datetime(2023, 5, 16)
        assert w.end.date() == date(2024, 5, 15)

    def test_trailing_days(self):
        w = window_for(WindowKind.TRAILING_DAYS, WEDNESDAY, days=6)
        assert w.start == datetime(2024, 5, 9)
        assert w.days == 7

    def test_trailing_zero_is_single_day(self):
        w = window_for(WindowKind.TRAILING_DAYS, WEDNESDAY, days=0)
        assert w.days == 1

    def test_trailing_requires_days(self):
        with pytest.raises(ValueError):
            window_for(WindowKind.TRAILING_DAYS, WEDNESDAY)

    def test_trailing_rejects_negative(self):
        with pytest.raises(ValueError):
            window_for(WindowKind.TRAILING_DAYS, WEDNESDAY, days=-1)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            window_for("fortnight", WEDNESDAY)

    def test_accepts_plain_date(self):
        w = window_for(WindowKind.DAY, date(2024, 5, 15))
        assert w.start == datetime(2024, 5, 15)

    def test_aware_reference_is_moved_to_bucketing_zone(self):
        # 02:00 UTC on the 16th is still the 15th in New York
        ref = datetime(2024, 5, 16, 2, 0, tzinfo=timezone.utc)
        w = window_for(WindowKind.DAY, ref, tz=ZoneInfo("America/New_York"))
        assert w.start.date() == date(2024, 5, 15)


class TestLocalize:
    def test_naive_is_unchanged(self):
        assert localize(WEDNESDAY, ZoneInfo("Asia/Tokyo")) == WEDNESDAY

    def test_aware_converted_and_stripped(self):
        ref = datetime(2024, 5, 15, 20, 0, tzinfo=timezone.utc)
        local = localize(ref, ZoneInfo("Asia/Tokyo"))
        assert local == datetime(2024, 5, 16, 5, 0)
        assert local.tzinfo is None

    def test_resolve_timezone(self):
        assert resolve_timezone(None) is None
        assert resolve_timezone("") is None
        assert resolve_timezone("Europe/Paris") == ZoneInfo("Europe/Paris")


class TestSubPeriods:
    def test_days_in_week_labels(self):
        days = days_in(week_window(WEDNESDAY))
        assert [d.label for d in days] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert all(d.days == 1 for d in days)

    def test_weeks_of_31_day_month(self):
        weeks = weeks_of_month(datetime(2024, 5, 20))
        assert len(weeks) == 5
        assert [w.label for w in weeks] == ["Week 1", "Week 2", "Week 3", "Week 4", "Week 5"]
        assert weeks[0].start.date() == date(2024, 5, 1)
        assert weeks[0].end.date() == date(2024, 5, 7)
        assert weeks[-1].start.date() == date(2024, 5, 29)
        assert weeks[-1].end.date() == date(2024, 5, 31)

    def test_weeks_of_28_day_month(self):
        weeks = weeks_of_month(datetime(2023, 2, 1))
        assert len(weeks) == 4
        assert weeks[-1].end.date() == date(2023, 2, 28)

    def test_weeks_cover_month_without_gaps(self):
        weeks = weeks_of_month(datetime(2024, 2, 14))
        month = month_window(datetime(2024, 2, 14))
        assert sum(w.days for w in weeks) == month.days

    def test_months_ending_reference_month(self):
        months = months_ending(datetime(2024, 3, 10))
        assert len(months) == 12
        assert months[0].start == datetime(2023, 4, 1)
        assert months[-1].start == datetime(2024, 3, 1)
        assert months[-1].end.date() == date(2024, 3, 31)
        assert [m.label for m in months][:3] == ["Apr", "May", "Jun"]

    def test_window_contains_date(self):
        w = Window(datetime(2024, 5, 1), datetime.combine(date(2024, 5, 7), time.max))
        assert w.contains_date(date(2024, 5, 7))
        assert not w.contains_date(date(2024, 5, 8))
