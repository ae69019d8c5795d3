"""CLI command modules."""

from .charts import chart
from .entries import add, delete, list_entries, moods
from .mood import month, week

__all__ = [
    "add",
    "list_entries",
    "delete",
    "moods",
    "week",
    "month",
    "chart",
]
