"""Mood taxonomy CLI command."""

import click
from rich.console import Console
from rich.table import Table

from battery.taxonomy import MOOD_TAXONOMY

console = Console()


@click.command()
def moods():
    """List the mood labels offered when logging."""
    table = Table(show_header=True, title="Mood Labels")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Category", style="cyan")
    table.add_column("Mood")

    n = 1
    for category, labels in MOOD_TAXONOMY.items():
        for label in labels:
            table.add_row(str(n), str(category), label)
            n += 1

    console.print(table)
