"""Habit export documents: build, write atomically, load back."""

from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from pathlib import Path
from typing import Any, Iterable

from habitcore.fileio import read_json, write_json_atomic
from habitcore.models import Habit
from habitcore.workspace import exports_dir, get_user_timezone, now_local

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"


def export_filename(day: date) -> str:
    return f"habits-{day.isoformat()}.json"


def build_export(
    habits: Iterable[Habit],
    exported_at: datetime,
    tz: tzinfo | None = None,
) -> dict[str, Any]:
    """Build the export document for *habits*."""
    return {
        "version": EXPORT_VERSION,
        "exportDate": exported_at.timestamp(),
        "habits": [h.to_dict(tz) for h in habits],
    }


def parse_export(data: dict[str, Any], tz: tzinfo | None = None) -> list[Habit]:
    """Decode an export document. Raises ValueError if it is malformed."""
    if not data:
        return []
    habits = data.get("habits")
    if not isinstance(habits, list):
        raise ValueError("Export document has no 'habits' list")
    version = data.get("version")
    if version != EXPORT_VERSION:
        logger.warning("Reading export version %r (expected %s)", version, EXPORT_VERSION)
    return [Habit.from_dict(h, tz) for h in habits if isinstance(h, dict)]


def write_export(
    habits: Iterable[Habit],
    root: Path | None = None,
    exported_at: datetime | None = None,
) -> Path:
    """Write habits-YYYY-MM-DD.json under the exports directory. Returns its path."""
    tz = get_user_timezone(root)
    if exported_at is None:
        exported_at = now_local(root)
    habits = list(habits)
    path = exports_dir(root) / export_filename(exported_at.astimezone(tz).date())
    write_json_atomic(path, build_export(habits, exported_at, tz))
    logger.info("Exported %d habits to %s", len(habits), path)
    return path


def load_export(path: Path, root: Path | None = None) -> list[Habit]:
    """Load habits from an export file; a missing file yields no habits."""
    return parse_export(read_json(path), get_user_timezone(root))
