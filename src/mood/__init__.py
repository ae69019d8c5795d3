from .aggregator import bucketize, dominant_mood, month_overview, summarize, week_overview
from .models import DataPoint, MoodEntry, PeriodBucket, WindowSummary
from .resampler import plottable, resample
from .scoring import mood_score
from .storage import EntryValidationError, MoodStore
from .windows import Window, window_for

__all__ = [
    "MoodEntry",
    "PeriodBucket",
    "WindowSummary",
    "DataPoint",
    "Window",
    "window_for",
    "mood_score",
    "bucketize",
    "dominant_mood",
    "summarize",
    "week_overview",
    "month_overview",
    "resample",
    "plottable",
    "MoodStore",
    "EntryValidationError",
]
