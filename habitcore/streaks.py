"""Streaks and habit strength, computed from completed_dates.

Streaks count runs of completed days where consecutive entries are at most
one day apart. Weekly habits use the same day-gap rule; callers label the
result in weeks.

Strength is a logarithmic saturation score over the trailing
STRENGTH_CALCULATION_PERIOD days: with the chosen log base, completing
every day of the period scores 100.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Iterable

from habitcore.dates import day_of, days_between, is_within_last_days, resolve_today
from habitcore.models import Habit

logger = logging.getLogger(__name__)

STRENGTH_CALCULATION_PERIOD = 60
MAX_STRENGTH = 100


def process_dates_for_streak_calculation(
    dates: Iterable[date | datetime],
    today: date | datetime | None = None,
) -> list[date]:
    """Normalize to days, drop future days, de-duplicate, newest first."""
    today = resolve_today(today)
    unique = {day_of(d) for d in dates}
    return sorted((d for d in unique if d <= today), reverse=True)


def streak(habit: Habit, today: date | datetime | None = None) -> int:
    """Current streak ending today; 0 when today is not completed."""
    today = resolve_today(today)
    dates = process_dates_for_streak_calculation(habit.completed_dates, today)
    if not dates:
        return 0
    if dates[0] != today:
        logger.debug("Habit %s: most recent completion %s is not today", habit.id, dates[0])
        return 0

    count = 1
    previous = dates[0]
    for day in dates[1:]:
        if days_between(previous, day) > 1:
            logger.debug("Habit %s: streak broken before %s at %d", habit.id, day, count)
            break
        count += 1
        previous = day
    return count


def longest_streak(habit: Habit, today: date | datetime | None = None) -> int:
    dates = process_dates_for_streak_calculation(habit.completed_dates, today)
    if not dates:
        return 0

    longest = 0
    current = 1
    previous = dates[0]
    for day in dates[1:]:
        if days_between(previous, day) <= 1:
            current += 1
        else:
            longest = max(longest, current)
            current = 1
        previous = day
    return max(longest, current)


# ── Strength ──────────────────────────────────────────────────


def calculate_logarithm_base(value: float, result: float) -> float:
    """Base b such that b ** result == value."""
    return math.pow(value, 1 / result)


def calculate_strength_percentage(
    dates: Iterable[date | datetime],
    today: date | datetime | None = None,
) -> int:
    """Strength in [0, 100] from unique completed days in the trailing period."""
    today = resolve_today(today)
    recent = {day_of(d) for d in dates if is_within_last_days(d, STRENGTH_CALCULATION_PERIOD, today)}
    log_base = calculate_logarithm_base(STRENGTH_CALCULATION_PERIOD, MAX_STRENGTH)
    percentage = int(math.log(len(recent) + 1) / math.log(log_base))
    return min(percentage, MAX_STRENGTH)


def strength_percentage(habit: Habit, today: date | datetime | None = None) -> int:
    return calculate_strength_percentage(habit.completed_dates, today)


def strength_gained_within_last_days(
    habit: Habit,
    days_ago: int,
    today: date | datetime | None = None,
) -> int:
    """Strength now minus strength without the last *days_ago* days of completions."""
    today = resolve_today(today)
    older = [d for d in habit.completed_dates if not is_within_last_days(d, days_ago, today)]
    return calculate_strength_percentage(habit.completed_dates, today) - calculate_strength_percentage(older, today)
