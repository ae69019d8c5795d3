"""Mood entry CLI commands."""

import sys
from typing import Optional

import click
import structlog
from rich.console import Console
from rich.table import Table

from cli.utils import energy_bar, get_components, parse_timestamp
from mood.catalog import MOOD_CATALOG
from mood.storage import EntryValidationError

console = Console()
logger = structlog.get_logger()


@click.command()
@click.argument("mood")
@click.option("-e", "--energy", default=50, type=int, help="Energy level 0-100")
@click.option("-n", "--notes", help="Optional note (max 280 chars)")
@click.option("--at", "at", help="Timestamp (ISO format), defaults to now")
@click.option("--emoji", help="Emoji for a mood outside the built-in list")
def add(mood: str, energy: int, notes: Optional[str], at: Optional[str], emoji: Optional[str]):
    """Record a mood entry.

    MOOD is one of the built-in labels (Happy, Sad, ...) or any custom label.
    """
    c = get_components()
    created_at = parse_timestamp(at, c["tz"]) if at else None

    try:
        entry = c["store"].add_entry(
            c["user_id"],
            mood,
            energy_level=energy,
            notes=notes,
            created_at=created_at,
            mood_emoji=emoji,
        )
    except EntryValidationError as e:
        logger.warning("cli.entry_rejected", error=str(e))
        console.print(f"[red]Invalid entry:[/] {e}")
        sys.exit(1)

    console.print(
        f"[green]Recorded:[/] {entry.mood_emoji} {entry.mood} "
        f"({entry.energy_level}% energy)"
    )


@click.command("list")
@click.option("-n", "--limit", default=None, type=int, help="Max entries to show")
def list_entries(limit: Optional[int]):
    """List recent mood entries."""
    c = get_components()
    limit = limit or c["config_model"].dashboard.recent_limit
    entries = c["store"].recent_entries(c["user_id"], limit=limit)

    if not entries:
        console.print("[yellow]No mood entries yet. Add one with 'moodboard add'.[/]")
        return

    table = Table(show_header=True, title="Recent Mood Entries")
    table.add_column("When", style="dim")
    table.add_column("Mood")
    table.add_column("Energy")
    table.add_column("Notes", max_width=40)
    table.add_column("ID", style="dim")

    for entry in entries:
        when = entry.created_at.astimezone(c["tz"]) if c["tz"] else entry.created_at.astimezone()
        table.add_row(
            when.strftime("%Y-%m-%d %H:%M"),
            f"{entry.mood_emoji} {entry.mood}",
            f"{energy_bar(entry.energy_level)} {entry.energy_level}%",
            entry.notes or "",
            entry.id[:8],
        )

    console.print(table)


@click.command()
@click.argument("entry_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete(entry_id: str, yes: bool):
    """Delete a mood entry by id (or unique id prefix)."""
    c = get_components()
    store = c["store"]

    matches = [e for e in store.fetch_entries(c["user_id"]) if e.id.startswith(entry_id)]
    if not matches:
        console.print(f"[red]Not found:[/] {entry_id}")
        sys.exit(1)
    if len(matches) > 1:
        console.print(f"[red]Ambiguous id prefix:[/] {entry_id} matches {len(matches)} entries")
        sys.exit(1)

    entry = matches[0]
    if not yes and not click.confirm(f"Delete {entry.mood_emoji} {entry.mood} entry {entry.id[:8]}?"):
        console.print("[yellow]Cancelled.[/]")
        return

    store.delete_entry(c["user_id"], entry.id)
    console.print(f"[green]Deleted:[/] {entry.id[:8]}")


@click.command()
def moods():
    """Show the built-in mood labels."""
    from mood.scoring import mood_score

    table = Table(show_header=True, title="Moods")
    table.add_column("Emoji")
    table.add_column("Mood")
    table.add_column("Score", justify="right")
    for label, emoji in MOOD_CATALOG.items():
        table.add_row(emoji, label, str(mood_score(label)))
    console.print(table)
