"""Weekly and monthly mood overview CLI commands."""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.utils import energy_bar, format_day, get_components, parse_reference
from mood.models import WindowSummary

console = Console()


def _print_summary(summary: WindowSummary, title: str) -> None:
    if summary.has_data:
        mood = f"{summary.dominant_emoji} {summary.dominant_mood}"
        energy = f"{energy_bar(summary.average_energy)} {summary.average_energy}%"
    else:
        mood = "😐 No data"
        energy = "-"
    console.print(f"\n[bold]{title}[/]")
    console.print(f"  Dominant mood: {mood}")
    console.print(f"  Avg energy:    {energy}")
    console.print(
        f"  Entries: {summary.entry_count}  |  Active days: {summary.active_days}/{len(summary.buckets)}"
    )

    if summary.distribution:
        parts = [f"{m.emoji} {m.mood} {m.percentage:.0f}%" for m in summary.distribution]
        console.print("  Breakdown: " + ", ".join(parts))


def _print_days(summary: WindowSummary, title: str) -> None:
    table = Table(show_header=True, title=title)
    table.add_column("Day")
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("Energy")
    table.add_column("Entries", justify="right")

    for bucket in summary.buckets:
        if bucket.has_data:
            mood = f"{bucket.dominant_emoji} {bucket.dominant_mood}"
            energy = f"{energy_bar(bucket.average_energy)} {bucket.average_energy}%"
            count = str(bucket.entry_count)
        else:
            mood, energy, count = "[dim]No data[/]", "", ""
        table.add_row(bucket.label, format_day(bucket.period_start), mood, energy, count)

    console.print(table)


@click.command()
@click.option("--date", "ref", help="Any day inside the week (YYYY-MM-DD), defaults to today")
def week(ref: Optional[str]):
    """Show the weekly mood overview."""
    from mood.aggregator import week_overview
    from mood.windows import week_window

    c = get_components()
    reference = parse_reference(ref, c["tz"])
    window = week_window(reference, c["week_start"])
    entries = c["store"].fetch_window(c["user_id"], window)
    summary = week_overview(entries, reference, week_start=c["week_start"], tz=c["tz"])

    title = f"Week of {format_day(summary.start)} - {format_day(summary.end)}"
    _print_days(summary, title)
    _print_summary(summary, "Weekly Summary")


@click.command()
@click.option("--date", "ref", help="Any day inside the month (YYYY-MM-DD), defaults to today")
def month(ref: Optional[str]):
    """Show the monthly mood overview."""
    from mood.aggregator import month_overview
    from mood.windows import month_window

    c = get_components()
    reference = parse_reference(ref, c["tz"])
    window = month_window(reference)
    entries = c["store"].fetch_window(c["user_id"], window)
    summary = month_overview(entries, reference, tz=c["tz"])

    _print_days(summary, summary.start.strftime("%B %Y"))
    _print_summary(summary, "Monthly Summary")
