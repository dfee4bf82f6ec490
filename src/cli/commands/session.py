"""Interactive logging session CLI command."""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
import structlog

from battery.codec import EntryDecodeError, export_json, export_markdown, import_json
from battery.models import LogEntry
from battery.taxonomy import MOOD_TAXONOMY, all_labels
from cli.utils import console, get_components, render_history, render_top_moods, render_trend
from observability import log_run_summary
from shared_types import ExportFormat

logger = structlog.get_logger()

ACTIONS = ["log", "trend", "top", "history", "export", "quit"]


def resolve_mood(raw: str) -> str:
    """Map a menu number to its taxonomy label; anything else is taken as typed."""
    value = raw.strip()
    labels = all_labels()
    if value.isdigit() and 1 <= int(value) <= len(labels):
        return labels[int(value) - 1]
    return value


def _print_mood_menu() -> None:
    n = 1
    for category, labels in MOOD_TAXONOMY.items():
        items = []
        for label in labels:
            items.append(f"[dim]{n}[/] {label}")
            n += 1
        console.print(f"[bold]{category}:[/] " + "  ".join(items))


def _capture_entry() -> LogEntry:
    level = click.prompt("Social battery (0-100)", type=click.IntRange(0, 100), default=100)
    _print_mood_menu()
    mood = resolve_mood(click.prompt("Mood (number or label)"))
    notes = click.prompt("Notes", default="", show_default=False)
    return LogEntry.create(battery_level=level, mood_label=mood, notes=notes.strip())


def _default_export_path(export_dir: Path, fmt: str) -> Path:
    suffix = "json" if fmt == ExportFormat.JSON else "md"
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return export_dir / f"battery_{stamp}.{suffix}"


def _export(c: dict) -> None:
    fmt = click.prompt(
        "Format",
        type=click.Choice([f.value for f in ExportFormat]),
        default=ExportFormat.JSON.value,
    )
    default_path = _default_export_path(c["paths"].export_dir, fmt)
    output = Path(click.prompt("Path", default=str(default_path)))

    try:
        if fmt == ExportFormat.JSON:
            count = export_json(c["store"], output)
        else:
            count = export_markdown(c["store"], output, c["views"].timestamp_format)
    except OSError as e:
        console.print(f"[red]Export failed:[/] {e}")
        return

    console.print(f"[green]Exported {count} entries to[/] {output}")


@click.command()
@click.option(
    "--import",
    "import_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Seed the session from a JSON export",
)
def session(import_path: Optional[str]):
    """Log social battery entries interactively and view trends."""
    store = None
    if import_path:
        try:
            store = import_json(Path(import_path))
        except (EntryDecodeError, OSError) as e:
            console.print(f"[red]Import failed:[/] {e}")
            sys.exit(1)
        console.print(f"[green]Loaded {len(store)} entries[/] from {import_path}")

    c = get_components(store=store)
    aggregator = c["aggregator"]
    views = c["views"]

    while True:
        action = click.prompt("Action", type=click.Choice(ACTIONS), default="log")

        if action == "quit":
            break
        if action == "log":
            entry = _capture_entry()
            aggregator.append(entry)
            console.print(f"[green]Saved:[/] {entry.battery_level}% - {entry.mood_label}")
            render_trend(aggregator.recent_trend(datetime.now().astimezone()), views.trend_window_days)
            render_top_moods(aggregator.top_moods())
        elif action == "trend":
            render_trend(aggregator.recent_trend(datetime.now().astimezone()), views.trend_window_days)
        elif action == "top":
            render_top_moods(aggregator.top_moods())
        elif action == "history":
            render_history(aggregator.history(), views.timestamp_format)
        elif action == "export":
            _export(c)

    console.print(f"[dim]Session ended with {len(c['store'])} entries.[/]")
    log_run_summary()
