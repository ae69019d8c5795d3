"""CLI entry point for moodboard."""

import sys
from pathlib import Path

import click

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import add, chart, delete, list_entries, month, moods, week
from cli.config import load_config_model
from cli.logging_config import setup_logging


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def cli(verbose: bool, json_logs: bool):
    """Moodboard - personal mood and energy tracker."""
    try:
        config = load_config_model()
    except ValueError as e:
        click.echo(f"Config error: {e}", err=True)
        sys.exit(1)
    level = "DEBUG" if verbose else config.logging.level
    setup_logging(
        json_mode=json_logs or config.logging.json_mode,
        level=level,
        log_file=config.paths.log_file,
    )


cli.add_command(add)
cli.add_command(list_entries)
cli.add_command(delete)
cli.add_command(moods)
cli.add_command(week)
cli.add_command(month)
cli.add_command(chart)


if __name__ == "__main__":
    cli()
