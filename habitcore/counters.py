"""Per-day counter values for counter habits."""

from __future__ import annotations

import logging
from datetime import date, datetime

from habitcore.dates import day_of
from habitcore.models import Habit

logger = logging.getLogger(__name__)


def counter_value(habit: Habit, value: date | datetime) -> int:
    """Count recorded on a day; 0 when the day has no entry."""
    day = day_of(value)
    for key, count in habit.daily_counters.items():
        if day_of(key) == day:
            return count
    return 0


def set_counter_value(habit: Habit, count: int, value: date | datetime) -> None:
    """Set a day's count and keep completed_dates in step with it.

    Negative counts clamp to 0. A positive count marks the day completed,
    zero clears both the counter entry and the completion.
    """
    day = day_of(value)
    count = max(0, int(count))

    for key in [k for k in habit.daily_counters if day_of(k) == day]:
        del habit.daily_counters[key]
    if count > 0:
        habit.daily_counters[day] = count

    listed = any(day_of(d) == day for d in habit.completed_dates)
    if count > 0 and not listed:
        habit.completed_dates.append(day)
    elif count == 0 and listed:
        habit.completed_dates[:] = [d for d in habit.completed_dates if day_of(d) != day]
    logger.debug("Habit %s: counter on %s set to %d", habit.id, day, count)


def increment_counter(habit: Habit, value: date | datetime) -> int:
    count = counter_value(habit, value) + 1
    set_counter_value(habit, count, value)
    return count


def decrement_counter(habit: Habit, value: date | datetime) -> int:
    """Decrease a day's count, never below 0."""
    count = max(0, counter_value(habit, value) - 1)
    set_counter_value(habit, count, value)
    return count


def cleanup_daily_counters(habit: Habit) -> int:
    """Drop zero-valued counter entries. Returns how many were removed.

    For counter habits the same days are also dropped from completed_dates,
    since a zero count means the day is not completed.
    """
    stale = [k for k, n in habit.daily_counters.items() if n == 0]
    for key in stale:
        del habit.daily_counters[key]
    if stale and habit.is_counter:
        zero_days = {day_of(k) for k in stale}
        habit.completed_dates[:] = [d for d in habit.completed_dates if day_of(d) not in zero_days]
    if stale:
        logger.debug("Habit %s: removed %d empty counter entries", habit.id, len(stale))
    return len(stale)
