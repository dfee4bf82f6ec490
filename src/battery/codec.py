"""JSON and Markdown serialization of a session's entries."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

import structlog

from .models import LogEntry
from .store import EntryStore
from .taxonomy import battery_band

logger = structlog.get_logger()

_REQUIRED_KEYS = ("id", "created_at", "battery_level", "mood_label")


class EntryDecodeError(ValueError):
    """Raised when an exported payload cannot be turned back into entries."""


def encode_entry(entry: LogEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "created_at": entry.created_at.isoformat(),
        "battery_level": entry.battery_level,
        "mood_label": entry.mood_label,
        "notes": entry.notes,
    }


def decode_entry(data: Any, index: int = 0) -> LogEntry:
    if not isinstance(data, dict):
        raise EntryDecodeError(f"Entry {index}: expected an object, got {type(data).__name__}")

    missing = [k for k in _REQUIRED_KEYS if k not in data]
    if missing:
        raise EntryDecodeError(f"Entry {index}: missing keys {missing}")

    level = data["battery_level"]
    if isinstance(level, bool) or not isinstance(level, int):
        raise EntryDecodeError(f"Entry {index}: battery_level must be an integer, got {level!r}")

    label = data["mood_label"]
    if not isinstance(label, str):
        raise EntryDecodeError(f"Entry {index}: mood_label must be a string, got {label!r}")

    try:
        created_at = datetime.fromisoformat(str(data["created_at"]))
    except ValueError as e:
        raise EntryDecodeError(f"Entry {index}: bad created_at {data['created_at']!r}") from e
    return LogEntry(
        id=str(data["id"]),
        created_at=created_at,
        battery_level=level,
        mood_label=label,
        notes=str(data.get("notes") or ""),
    )


def encode_entries(entries: Iterable[LogEntry]) -> dict[str, Any]:
    """Build an export payload. ``entries`` must be in insertion order."""
    encoded = [encode_entry(e) for e in entries]
    return {
        "exported_at": datetime.now().astimezone().isoformat(),
        "count": len(encoded),
        "entries": encoded,
    }


def decode_entries(payload: Any) -> list[LogEntry]:
    """Inverse of encode_entries; returns entries in insertion order."""
    if not isinstance(payload, dict) or not isinstance(payload.get("entries"), list):
        raise EntryDecodeError("Payload must be an object with an 'entries' list")
    return [decode_entry(item, i) for i, item in enumerate(payload["entries"])]


def export_json(store: EntryStore, output_path: Path) -> int:
    """Write the store to a JSON file.

    Returns:
        Number of entries exported
    """
    payload = encode_entries(store.insertion_order())

    output_path = Path(output_path).expanduser()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(payload, f, indent=2)

    logger.info("entries_exported", path=str(output_path), count=payload["count"], fmt="json")
    return payload["count"]


def import_json(input_path: Path) -> EntryStore:
    """Rebuild a store from a file written by export_json.

    Raises:
        EntryDecodeError: If the file is not valid JSON or not an export payload
        OSError: If the file cannot be read
    """
    input_path = Path(input_path).expanduser()
    with open(input_path) as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise EntryDecodeError(f"Invalid JSON in {input_path}: {e}") from e

    store = EntryStore.from_entries(decode_entries(payload))
    logger.info("entries_imported", path=str(input_path), count=len(store))
    return store


def export_markdown(
    store: EntryStore,
    output_path: Path,
    timestamp_format: str = "%Y-%m-%d %H:%M",
) -> int:
    """Write a readable newest-first history to a Markdown file."""
    entries = store.all()

    lines = [
        "# Social Battery Log",
        "",
        f"Exported: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
        f"Entries: {len(entries)}",
        "",
        "---",
        "",
    ]
    for entry in entries:
        lines.append(f"## {entry.display_timestamp(timestamp_format)}")
        lines.append("")
        lines.append(
            f"**Battery:** {entry.battery_level}% ({battery_band(entry.battery_level)}) "
            f"| **Mood:** {entry.mood_label}"
        )
        if entry.has_notes:
            lines.append("")
            lines.append(entry.notes)
        lines.append("")
        lines.append("---")
        lines.append("")

    output_path = Path(output_path).expanduser()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write("\n".join(lines))

    logger.info("entries_exported", path=str(output_path), count=len(entries), fmt="markdown")
    return len(entries)
