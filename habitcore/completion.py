"""Completion state and completion mutators.

Completion is always decided per calendar day. Boolean habits are completed
on a day listed in completed_dates; counter habits are completed on a day
whose counter is above zero.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from habitcore.counters import cleanup_daily_counters, counter_value, set_counter_value
from habitcore.dates import date_range, day_of, resolve_today, today_minus_days_ago, week_days
from habitcore.models import Habit

logger = logging.getLogger(__name__)


# ── Daily completion ──────────────────────────────────────────


def is_completed(habit: Habit, value: date | datetime) -> bool:
    day = day_of(value)
    if habit.is_counter:
        return counter_value(habit, day) > 0
    return any(day_of(d) == day for d in habit.completed_dates)


def is_completed_days_ago(habit: Habit, days_ago: int, today: date | datetime | None = None) -> bool:
    return is_completed(habit, today_minus_days_ago(days_ago, today))


def add_completed_date(habit: Habit, value: date | datetime) -> bool:
    """Mark a day completed. Returns False if it already was.

    Counters are left untouched.
    """
    day = day_of(value)
    if is_completed(habit, day) or any(day_of(d) == day for d in habit.completed_dates):
        logger.debug("Habit %s: %s already completed", habit.id, day)
        return False
    habit.completed_dates.append(day)
    logger.debug("Habit %s: completed %s", habit.id, day)
    return True


def remove_completed_date(habit: Habit, value: date | datetime) -> None:
    """Unmark every entry on the same day; counter habits also reset to 0."""
    day = day_of(value)
    habit.completed_dates[:] = [d for d in habit.completed_dates if day_of(d) != day]
    if habit.is_counter:
        set_counter_value(habit, 0, day)
    logger.debug("Habit %s: removed %s", habit.id, day)


def toggle_completion(habit: Habit, days_ago: int, today: date | datetime | None = None) -> bool:
    """Flip completion for today minus *days_ago*. Returns the new state."""
    day = today_minus_days_ago(days_ago, today)
    if is_completed(habit, day):
        remove_completed_date(habit, day)
    else:
        add_completed_date(habit, day)
    return is_completed(habit, day)


# ── Weekly habits ─────────────────────────────────────────────


def is_week_completed(habit: Habit, value: date | datetime) -> bool:
    """True if any day of the Monday-based week containing *value* is completed."""
    return any(is_completed(habit, d) for d in week_days(value))


def toggle_week_completion(habit: Habit, value: date | datetime) -> bool:
    """Clear the whole week if it is completed, otherwise mark all seven days.

    Returns the new week state. Counters are not touched, so a counter habit
    only reads as completed once a counter is set.
    """
    days = week_days(value)
    if is_week_completed(habit, value):
        for day in days:
            remove_completed_date(habit, day)
    else:
        for day in days:
            add_completed_date(habit, day)
    return is_week_completed(habit, value)


# ── Backfill ──────────────────────────────────────────────────


def backfill_completions(
    habit: Habit,
    start: date | datetime,
    today: date | datetime | None = None,
) -> int:
    """Mark every day from *start* through today completed.

    Counter habits get a count of 1 on each day. Returns the number of days
    visited.
    """
    days = date_range(start, resolve_today(today))
    for day in days:
        if habit.is_counter:
            set_counter_value(habit, 1, day)
        else:
            add_completed_date(habit, day)
    if habit.is_counter:
        cleanup_daily_counters(habit)
    logger.debug("Habit %s: backfilled %d days from %s", habit.id, len(days), day_of(start))
    return len(days)
