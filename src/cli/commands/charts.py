"""Mood and energy chart series CLI command."""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.utils import energy_bar, get_components, parse_reference, styled_score
from shared_types import ChartPeriod

console = Console()


@click.command()
@click.option(
    "-p",
    "--period",
    type=click.Choice([p.value for p in ChartPeriod]),
    help="Chart period (defaults to dashboard.default_period)",
)
@click.option("--date", "ref", help="Reference day (YYYY-MM-DD), defaults to today")
@click.option("--all", "show_all", is_flag=True, help="Include periods without data")
def chart(period: Optional[str], ref: Optional[str], show_all: bool):
    """Show energy and mood score per period."""
    from mood.resampler import plottable, resample, sub_periods
    from mood.windows import Window

    c = get_components()
    period = period or c["config_model"].dashboard.default_period
    reference = parse_reference(ref, c["tz"])

    windows = sub_periods(period, reference, c["week_start"])
    outer = Window(windows[0].start, windows[-1].end)
    entries = c["store"].fetch_window(c["user_id"], outer)
    points = resample(entries, period, reference, week_start=c["week_start"], tz=c["tz"])

    shown = points if show_all else plottable(points)
    if not shown:
        console.print(f"[yellow]No mood data available for this {period}.[/]")
        return

    table = Table(title=f"Mood & Energy ({period})", show_header=True)
    table.add_column("Period")
    table.add_column("Energy")
    table.add_column("Mood score", justify="right")
    table.add_column("Entries", justify="right")

    for point in shown:
        if point.has_data:
            table.add_row(
                point.period_label,
                f"{energy_bar(point.energy)} {point.energy}%",
                styled_score(point.mood_score),
                str(point.entry_count),
            )
        else:
            table.add_row(point.period_label, "[dim]No data[/]", "", "0")

    console.print(table)

    hidden = len(points) - len(shown)
    if hidden:
        console.print(f"[dim]{hidden} period(s) with nothing to plot hidden; use --all to show them.[/]")
