"""Time-spent totals, completion counts and the habit overview."""

from __future__ import annotations

from datetime import date, datetime

from habitcore.counters import counter_value
from habitcore.dates import day_of, is_within_last_days, resolve_today
from habitcore.durations import effective_duration
from habitcore.models import Habit, HabitOverview
from habitcore.streaks import longest_streak, streak, strength_gained_within_last_days, strength_percentage

MONTH_DAYS = 30
YEAR_DAYS = 365
WEEK_DAYS = 7


def _completed_days(habit: Habit) -> list[date]:
    return list(dict.fromkeys(day_of(d) for d in habit.completed_dates))


def time_spent_on(habit: Habit, value: date | datetime) -> int:
    """Minutes logged on a day: duration in effect times the day's count."""
    count = counter_value(habit, value) if habit.is_counter else 1
    return effective_duration(habit, value) * count


def get_total_time_spent(habit: Habit) -> int:
    return sum(time_spent_on(habit, d) for d in _completed_days(habit))


def _time_spent_within_last_days(habit: Habit, days_ago: int, today: date | datetime | None) -> int:
    today = resolve_today(today)
    return sum(
        time_spent_on(habit, d)
        for d in _completed_days(habit)
        if is_within_last_days(d, days_ago, today)
    )


def get_total_time_spent_in_last_month(habit: Habit, today: date | datetime | None = None) -> int:
    return _time_spent_within_last_days(habit, MONTH_DAYS, today)


def get_total_time_spent_in_last_year(habit: Habit, today: date | datetime | None = None) -> int:
    return _time_spent_within_last_days(habit, YEAR_DAYS, today)


def completions_within_last_days(habit: Habit, days_ago: int, today: date | datetime | None = None) -> int:
    today = resolve_today(today)
    return sum(1 for d in _completed_days(habit) if is_within_last_days(d, days_ago, today))


def build_overview(habit: Habit, today: date | datetime | None = None) -> HabitOverview:
    """Collect the detail-screen metrics for one habit.

    Weekly habits report completions in weeks (integer division by 7);
    streak values are reported as computed, labelled with the weekly unit.
    """
    today = resolve_today(today)
    divisor = WEEK_DAYS if habit.is_weekly else 1
    return HabitOverview(
        strength=strength_percentage(habit, today),
        strength_gained_month=strength_gained_within_last_days(habit, MONTH_DAYS, today),
        strength_gained_year=strength_gained_within_last_days(habit, YEAR_DAYS, today),
        completions=len(_completed_days(habit)) // divisor,
        completions_month=completions_within_last_days(habit, MONTH_DAYS, today) // divisor,
        completions_year=completions_within_last_days(habit, YEAR_DAYS, today) // divisor,
        streak=streak(habit, today),
        longest_streak=longest_streak(habit, today),
        time_spent=get_total_time_spent(habit),
        time_spent_month=get_total_time_spent_in_last_month(habit, today),
        time_spent_year=get_total_time_spent_in_last_year(habit, today),
        unit="weeks" if habit.is_weekly else "days",
    )
