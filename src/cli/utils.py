"""Shared CLI utilities: component wiring and Rich rendering of views."""

from typing import Optional

import structlog
from rich.console import Console
from rich.table import Table

from battery import EntryStore, FrequencyBucket, LogEntry, MoodAggregator, RecencyWindowPoint
from battery.taxonomy import battery_band
from shared_types import BatteryBand

console = Console()
logger = structlog.get_logger()

BAND_STYLE = {
    BatteryBand.HIGH: "green",
    BatteryBand.MEDIUM: "yellow",
    BatteryBand.LOW: "red",
}

SPARK_BLOCKS = "▁▂▃▄▅▆▇█"


def get_components(store: Optional[EntryStore] = None, config_model=None) -> dict:
    """Wire a store and aggregator from config.

    Args:
        store: Existing store to wrap; a fresh empty one if None
        config_model: Loaded TrackerConfig; read from disk if None
    """
    from cli.config import load_config_model

    config_model = config_model or load_config_model()
    views = config_model.views
    store = store if store is not None else EntryStore()

    aggregator = MoodAggregator(
        store,
        window=views.trend_window,
        limit=views.top_moods_limit,
        date_format=views.display_date_format,
    )

    return {
        "config_model": config_model,
        "views": views,
        "paths": config_model.paths,
        "store": store,
        "aggregator": aggregator,
    }


def battery_markup(level: int) -> str:
    style = BAND_STYLE[battery_band(level)]
    return f"[{style}]{level}%[/]"


def sparkline(values: list[int], vmin: int = 0, vmax: int = 100) -> str:
    """Block sparkline of battery levels; out-of-range values are pinned to the ends."""
    if not values:
        return ""
    span = max(1, vmax - vmin)
    out = []
    for v in values:
        idx = int(round((v - vmin) / span * (len(SPARK_BLOCKS) - 1)))
        idx = max(0, min(len(SPARK_BLOCKS) - 1, idx))
        out.append(SPARK_BLOCKS[idx])
    return "".join(out)


def render_trend(points: list[RecencyWindowPoint], days: float) -> None:
    if not points:
        console.print(f"[yellow]No entries in the last {days:g} days.[/]")
        return

    table = Table(show_header=True, title=f"Social Battery - last {days:g} days")
    table.add_column("Date", style="dim")
    table.add_column("Battery", justify="right")
    table.add_column("Mood")

    for p in points:
        table.add_row(p.display_date, battery_markup(p.battery_level), p.mood_label)

    console.print(table)
    console.print(f"Trend: {sparkline([p.battery_level for p in points])}")


def render_top_moods(buckets: list[FrequencyBucket]) -> None:
    if not buckets:
        console.print("[yellow]No moods logged yet.[/]")
        return

    table = Table(show_header=True, title="Most Frequent Moods")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Mood")
    table.add_column("Count", justify="right")

    for rank, b in enumerate(buckets, 1):
        table.add_row(str(rank), b.mood_label, str(b.count))

    console.print(table)


def render_history(entries: list[LogEntry], timestamp_format: str) -> None:
    if not entries:
        console.print("[yellow]No entries yet.[/]")
        return

    table = Table(show_header=True, title="Recent Logs")
    table.add_column("When", style="cyan")
    table.add_column("Battery", justify="right")
    table.add_column("Mood")
    table.add_column("Notes", style="dim")

    for e in entries:
        table.add_row(
            e.display_timestamp(timestamp_format),
            battery_markup(e.battery_level),
            e.mood_label,
            e.notes if e.has_notes else "",
        )

    console.print(table)
