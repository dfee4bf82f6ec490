"""Report CLI command over an exported session file."""

import math
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

import click

from battery.aggregation import MoodAggregator
from battery.codec import EntryDecodeError, import_json
from cli.config import load_config_model
from cli.utils import console, render_top_moods, render_trend


def _parse_now(value: Optional[str]) -> datetime:
    if not value:
        return datetime.now().astimezone()
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"expected ISO-8601 timestamp, got {value!r}", param_hint="--now")
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return dt


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("-d", "--days", type=float, help="Trend window in days (default from config)")
@click.option("-n", "--limit", type=int, help="Number of top moods (default from config)")
@click.option("--now", "now_str", help="Reference instant (ISO-8601), defaults to current time")
def report(file: str, days: Optional[float], limit: Optional[int], now_str: Optional[str]):
    """Show battery trend and top moods from a JSON export."""
    now = _parse_now(now_str)

    try:
        store = import_json(Path(file))
    except (EntryDecodeError, OSError) as e:
        console.print(f"[red]Could not read export:[/] {e}")
        sys.exit(1)

    views = load_config_model().views
    window_days = days if days is not None else views.trend_window_days
    if not math.isfinite(window_days):
        raise click.BadParameter(f"must be a finite number, got {days!r}", param_hint="--days")
    try:
        window = timedelta(days=window_days)
    except OverflowError:
        window = timedelta.max

    aggregator = MoodAggregator(
        store,
        window=window,
        limit=limit if limit is not None else views.top_moods_limit,
        date_format=views.display_date_format,
    )

    render_trend(aggregator.recent_trend(now), window_days)
    console.print()
    render_top_moods(aggregator.top_moods())
    console.print(f"\n[bold]Entries:[/] {len(store)}")
