"""Duration history: which minutes-per-completion value was in force on a day."""

from __future__ import annotations

import logging
from datetime import date, datetime

from habitcore.dates import day_of, resolve_today
from habitcore.models import Habit, HabitDuration

logger = logging.getLogger(__name__)


# ── Resolver ──────────────────────────────────────────────────


def effective_duration(habit: Habit, value: date | datetime) -> int:
    """Minutes in effect on *value*, or 0 when no entry covers it.

    Overlapping entries resolve to the last match in stored order.
    """
    day = day_of(value)
    active = [d for d in habit.duration_history if d.is_active_on(day)]
    if not active:
        return 0
    return active[-1].minutes


def current_duration(habit: Habit, today: date | datetime | None = None) -> int:
    return effective_duration(habit, resolve_today(today))


# ── Editing ───────────────────────────────────────────────────


def validate_duration(duration: HabitDuration) -> list[str]:
    """Validate a duration entry and return list of errors (empty if valid)."""
    errors = []
    if isinstance(duration.minutes, bool) or not isinstance(duration.minutes, int):
        errors.append("minutes must be an integer")
    elif duration.minutes < 0:
        errors.append("minutes must be non-negative")
    if duration.expiration_date is not None:
        if day_of(duration.expiration_date) <= day_of(duration.effective_date):
            errors.append("expiration_date must be after effective_date")
    return errors


def set_duration(
    habit: Habit,
    minutes: int,
    effective_date: date | datetime,
) -> tuple[HabitDuration | None, list[str]]:
    """Start a new duration on *effective_date*. Returns (duration, errors).

    An entry starting on the same day is replaced. Entries still open on that
    day and starting before it are expired there. The new entry runs until
    the next entry starts, or stays open if none does. History is kept in
    ascending effective-date order.
    """
    new = HabitDuration(minutes=minutes, effective_date=day_of(effective_date))
    errors = validate_duration(new)
    if errors:
        return None, errors

    start = new.effective_date
    replaced = [d for d in habit.duration_history if day_of(d.effective_date) == start]
    if replaced:
        habit.duration_history[:] = [d for d in habit.duration_history if day_of(d.effective_date) != start]
        logger.debug("Habit %s: replaced %d duration(s) starting %s", habit.id, len(replaced), start)

    for existing in habit.duration_history:
        if existing.is_active_on(start) and day_of(existing.effective_date) < start:
            existing.expiration_date = start
            logger.debug("Expired %d min duration on %s", existing.minutes, start)

    later = [day_of(d.effective_date) for d in habit.duration_history if day_of(d.effective_date) > start]
    if later:
        new.expiration_date = min(later)

    index = len(habit.duration_history)
    for i, existing in enumerate(habit.duration_history):
        if day_of(existing.effective_date) > start:
            index = i
            break
    habit.duration_history.insert(index, new)
    logger.debug("Habit %s: %d min from %s until %s", habit.id, minutes, start, new.expiration_date)
    return new, []


def remove_duration(habit: Habit, index: int) -> bool:
    """Remove the duration entry at *index*. Returns False if out of range."""
    if not 0 <= index < len(habit.duration_history):
        return False
    removed = habit.duration_history.pop(index)
    logger.debug("Habit %s: removed %d min duration from %s", habit.id, removed.minutes, removed.effective_date)
    return True
