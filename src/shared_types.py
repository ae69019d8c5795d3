"""Shared enums and types for moodboard."""

from enum import StrEnum


class WindowKind(StrEnum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    TRAILING_DAYS = "trailing_days"


class ChartPeriod(StrEnum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class WeekStart(StrEnum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
