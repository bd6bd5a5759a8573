"""Shared test fixtures for habitcore tests."""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path

import pytest
import yaml

from habitcore.models import BOOLEAN, COUNTER, Habit


TODAY = date(2026, 2, 11)  # a Wednesday


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def habit() -> Habit:
    return Habit(id="READ-1", title="Read", type=BOOLEAN, creation_date=date(2026, 1, 1))


@pytest.fixture
def counter_habit() -> Habit:
    return Habit(id="WATER-1", title="Water", type=COUNTER, creation_date=date(2026, 1, 1))


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary data root with a config.yaml."""
    root = tmp_path / "habits"
    root.mkdir(parents=True)
    (root / "config.yaml").write_text(
        yaml.dump({"timezone": "UTC"}, default_flow_style=False), encoding="utf-8"
    )

    os.environ["HABITS_ROOT"] = str(root)
    yield root
    if "HABITS_ROOT" in os.environ:
        del os.environ["HABITS_ROOT"]
