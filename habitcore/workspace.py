"""Data root, timezone and "now" helpers for habitcore."""

from __future__ import annotations

import logging
import os
from datetime import date, datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from habitcore.fileio import read_yaml, write_yaml_atomic

logger = logging.getLogger(__name__)


def workspace_root() -> Path:
    """Get the data root directory (contains config.yaml and exports/)."""
    return Path(
        os.environ.get("HABITS_ROOT", str(Path.home() / "habits"))
    ).expanduser().resolve()


def config_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "config.yaml"


def exports_dir(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "exports"


def load_config(root: Path | None = None) -> dict[str, Any]:
    """Load config.yaml, returning an empty dict when absent."""
    return read_yaml(config_path(root))


def save_config(config: dict[str, Any], root: Path | None = None) -> None:
    write_yaml_atomic(config_path(root), config)


def get_user_timezone(root: Path | None = None) -> ZoneInfo:
    """Get the configured timezone, defaulting to UTC."""
    name = load_config(root).get("timezone")
    if name:
        try:
            return ZoneInfo(str(name))
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r in config, falling back to UTC", name)
    return ZoneInfo("UTC")


def now_local(root: Path | None = None) -> datetime:
    """Get current datetime in the configured timezone."""
    return datetime.now(get_user_timezone(root))


def today_local(root: Path | None = None) -> date:
    """Get today's calendar day in the configured timezone."""
    return now_local(root).date()
