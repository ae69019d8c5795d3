"""SQLite-backed store for mood entries (per-user)."""

import sqlite3
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

import structlog

from .catalog import emoji_for, normalize_mood
from .models import MoodEntry
from .windows import Window

logger = structlog.get_logger()

MAX_NOTES_CHARS = 280
MIN_ENERGY = 0
MAX_ENERGY = 100
# Widest UTC offset spread between any two zones is 26h
WINDOW_SLACK = timedelta(days=2)


class EntryValidationError(ValueError):
    """Submitted entry is rejected before it reaches storage."""


def _connect(db_path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode=WAL")
    conn.row_factory = sqlite3.Row
    return conn


def _to_utc(dt: datetime) -> datetime:
    """Aware UTC instant; naive values are treated as host local time."""
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return dt.astimezone(timezone.utc)


def validate_entry(mood: str, energy_level: int, notes: Optional[str]) -> None:
    if not mood or not mood.strip():
        raise EntryValidationError("Please select a mood")
    if isinstance(energy_level, bool) or not isinstance(energy_level, int):
        raise EntryValidationError(f"Energy level must be an integer, got {energy_level!r}")
    if not MIN_ENERGY <= energy_level <= MAX_ENERGY:
        raise EntryValidationError(
            f"Energy level must be {MIN_ENERGY}-{MAX_ENERGY}, got {energy_level}"
        )
    if notes is not None and len(notes) > MAX_NOTES_CHARS:
        raise EntryValidationError(
            f"Notes are limited to {MAX_NOTES_CHARS} characters, got {len(notes)}"
        )


class MoodStore:
    """SQLite persistence for mood entries.

    Each operation opens its own connection; the store holds no other state.
    """

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        with _connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS mood_entries (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    mood TEXT NOT NULL,
                    mood_emoji TEXT NOT NULL,
                    energy_level INTEGER NOT NULL CHECK(energy_level BETWEEN 0 AND 100),
                    notes TEXT,
                    created_at TIMESTAMP NOT NULL
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_mood_user_created ON mood_entries(user_id, created_at DESC)"
            )

    def add_entry(
        self,
        user_id: str,
        mood: str,
        energy_level: int = 50,
        notes: Optional[str] = None,
        created_at: Optional[datetime] = None,
        mood_emoji: Optional[str] = None,
    ) -> MoodEntry:
        """Validate and persist a new entry.

        Raises:
            EntryValidationError: empty mood, energy outside 0-100, or notes too long.
        """
        validate_entry(mood, energy_level, notes)
        mood = normalize_mood(mood)
        if notes is not None:
            notes = notes.strip() or None
        entry = MoodEntry(
            id=uuid.uuid4().hex,
            mood=mood,
            mood_emoji=mood_emoji or emoji_for(mood),
            energy_level=energy_level,
            created_at=_to_utc(created_at or datetime.now(timezone.utc)),
            user_id=user_id,
            notes=notes,
        )
        with _connect(self.db_path) as conn:
            conn.execute(
                "INSERT INTO mood_entries (id, user_id, mood, mood_emoji, energy_level, notes, created_at) "
                "VALUES (?, ?, ?, ?, ?, ?, ?)",
                (
                    entry.id,
                    entry.user_id,
                    entry.mood,
                    entry.mood_emoji,
                    entry.energy_level,
                    entry.notes,
                    entry.created_at.isoformat(),
                ),
            )
        logger.info("store.entry_added", user_id=user_id, mood=entry.mood, entry_id=entry.id)
        return entry

    def fetch_entries(
        self,
        user_id: str,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> list[MoodEntry]:
        """All entries for a user, newest first, optionally bounded in time."""
        query = "SELECT * FROM mood_entries WHERE user_id = ?"
        params: list = [user_id]
        if since is not None:
            query += " AND created_at >= ?"
            params.append(_to_utc(since).isoformat())
        if until is not None:
            query += " AND created_at <= ?"
            params.append(_to_utc(until).isoformat())
        query += " ORDER BY created_at DESC"

        with _connect(self.db_path) as conn:
            rows = conn.execute(query, params).fetchall()
        return [self._row_to_entry(r) for r in rows]

    def fetch_window(self, user_id: str, window: Window) -> list[MoodEntry]:
        """Entries that may fall inside a wall-clock ``window``.

        The window is in the bucketing zone, not UTC, so the query is padded
        by WINDOW_SLACK on each side; the aggregator does the exact filtering.
        """
        return self.fetch_entries(
            user_id,
            since=window.start - WINDOW_SLACK,
            until=window.end + WINDOW_SLACK,
        )

    def recent_entries(self, user_id: str, limit: int = 5) -> list[MoodEntry]:
        with _connect(self.db_path) as conn:
            rows = conn.execute(
                "SELECT * FROM mood_entries WHERE user_id = ? ORDER BY created_at DESC LIMIT ?",
                (user_id, limit),
            ).fetchall()
        return [self._row_to_entry(r) for r in rows]

    def get_entry(self, user_id: str, entry_id: str) -> MoodEntry | None:
        with _connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT * FROM mood_entries WHERE id = ? AND user_id = ?",
                (entry_id, user_id),
            ).fetchone()
        return self._row_to_entry(row) if row else None

    def delete_entry(self, user_id: str, entry_id: str) -> bool:
        """Delete an entry if it belongs to the user. Returns True if deleted."""
        with _connect(self.db_path) as conn:
            cur = conn.execute(
                "DELETE FROM mood_entries WHERE id = ? AND user_id = ?",
                (entry_id, user_id),
            )
        deleted = cur.rowcount > 0
        if deleted:
            logger.info("store.entry_deleted", user_id=user_id, entry_id=entry_id)
        return deleted

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> MoodEntry:
        return MoodEntry(
            id=row["id"],
            mood=row["mood"],
            mood_emoji=row["mood_emoji"],
            energy_level=row["energy_level"],
            created_at=datetime.fromisoformat(row["created_at"]),
            user_id=row["user_id"],
            notes=row["notes"],
        )
