"""Tests for habitcore/durations.py: duration resolver and editors."""

from datetime import date, datetime

import pytest

from habitcore.dates import date_range
from habitcore.durations import (
    current_duration,
    effective_duration,
    remove_duration,
    set_duration,
    validate_duration,
)
from habitcore.models import HabitDuration


def test_effective_duration_empty_history(habit):
    assert effective_duration(habit, date(2024, 1, 15)) == 0


def test_effective_duration_timeline(habit):
    habit.duration_history = [
        HabitDuration(30, date(2024, 1, 1), date(2024, 2, 1)),
        HabitDuration(45, date(2024, 2, 1)),
    ]
    assert effective_duration(habit, date(2024, 1, 15)) == 30
    assert effective_duration(habit, date(2024, 2, 1)) == 45
    assert effective_duration(habit, date(2024, 3, 1)) == 45
    assert effective_duration(habit, date(2023, 12, 31)) == 0


def test_effective_duration_ignores_time_of_day(habit):
    habit.duration_history = [HabitDuration(30, date(2024, 1, 1), date(2024, 2, 1))]
    assert effective_duration(habit, datetime(2024, 1, 31, 23, 59)) == 30


def test_overlap_resolves_to_last_stored_entry(habit):
    habit.duration_history = [
        HabitDuration(20, date(2024, 2, 1)),
        HabitDuration(10, date(2024, 1, 1)),
    ]
    # Later effective date loses to the entry stored after it
    assert effective_duration(habit, date(2024, 3, 1)) == 10
    assert effective_duration(habit, date(2024, 1, 15)) == 10


def test_invalid_interval_never_matches(habit):
    habit.duration_history = [
        HabitDuration(15, date(2024, 1, 1), date(2024, 1, 1)),
        HabitDuration(25, date(2024, 2, 1), date(2024, 1, 1)),
    ]
    assert effective_duration(habit, date(2024, 1, 1)) == 0
    assert effective_duration(habit, date(2024, 1, 15)) == 0
    assert effective_duration(habit, date(2024, 2, 1)) == 0


def test_validate_duration():
    assert validate_duration(HabitDuration(30, date(2024, 1, 1))) == []
    errors = validate_duration(HabitDuration(-1, date(2024, 1, 1)))
    assert any("non-negative" in e for e in errors)
    errors = validate_duration(HabitDuration(30, date(2024, 1, 1), date(2024, 1, 1)))
    assert any("expiration_date" in e for e in errors)


def test_set_duration_expires_open_entry(habit):
    first, errors = set_duration(habit, 30, date(2024, 1, 1))
    assert errors == []
    second, errors = set_duration(habit, 45, date(2024, 2, 1))
    assert errors == []
    assert first.expiration_date == date(2024, 2, 1)
    assert second.expiration_date is None
    assert effective_duration(habit, date(2024, 1, 31)) == 30
    assert effective_duration(habit, date(2024, 2, 1)) == 45


def _active_counts(habit, start, end):
    return {day: sum(d.is_active_on(day) for d in habit.duration_history) for day in date_range(start, end)}


def test_set_duration_same_day_replaces_entry(habit):
    set_duration(habit, 30, date(2024, 1, 1))
    set_duration(habit, 50, date(2024, 1, 1))
    assert len(habit.duration_history) == 1
    assert habit.duration_history[0].minutes == 50
    assert effective_duration(habit, date(2024, 1, 10)) == 50


def test_set_duration_backdated_entry_is_bounded(habit):
    set_duration(habit, 30, date(2024, 2, 1))
    earlier, errors = set_duration(habit, 45, date(2024, 1, 1))
    assert errors == []
    assert earlier.expiration_date == date(2024, 2, 1)
    assert [d.effective_date for d in habit.duration_history] == [date(2024, 1, 1), date(2024, 2, 1)]
    assert effective_duration(habit, date(2024, 1, 15)) == 45
    assert effective_duration(habit, date(2024, 3, 1)) == 30


@pytest.mark.parametrize("edits", [
    [(30, date(2024, 1, 1)), (45, date(2024, 2, 1)), (60, date(2024, 3, 1))],
    [(30, date(2024, 3, 1)), (45, date(2024, 1, 1)), (60, date(2024, 2, 1))],
    [(30, date(2024, 1, 1)), (45, date(2024, 2, 1)), (20, date(2024, 1, 1))],
    [(30, date(2024, 2, 1)), (45, date(2024, 2, 1)), (10, date(2024, 1, 15))],
])
def test_set_duration_never_overlaps(habit, edits):
    for minutes, day in edits:
        set_duration(habit, minutes, day)
        counts = _active_counts(habit, date(2023, 12, 1), date(2024, 4, 1))
        assert max(counts.values()) <= 1


def test_set_duration_invalid(habit):
    duration, errors = set_duration(habit, -5, date(2024, 1, 1))
    assert duration is None
    assert errors
    assert habit.duration_history == []


def test_remove_duration(habit):
    set_duration(habit, 30, date(2024, 1, 1))
    assert remove_duration(habit, 0) is True
    assert habit.duration_history == []
    assert remove_duration(habit, 0) is False
    assert remove_duration(habit, -1) is False


def test_current_duration(habit, today):
    set_duration(habit, 25, date(2026, 1, 1))
    assert current_duration(habit, today) == 25
