"""Tests for habitcore/aggregates.py: time spent, completions, overview."""

from datetime import date, timedelta

from habitcore.aggregates import (
    build_overview,
    completions_within_last_days,
    get_total_time_spent,
    get_total_time_spent_in_last_month,
    get_total_time_spent_in_last_year,
    time_spent_on,
)
from habitcore.counters import set_counter_value
from habitcore.durations import set_duration
from habitcore.models import HabitDuration
from habitcore.streaks import strength_percentage


def test_counter_time_spent(counter_habit, today):
    set_counter_value(counter_habit, 3, today)
    set_duration(counter_habit, 20, today - timedelta(days=10))
    assert time_spent_on(counter_habit, today) == 60
    assert get_total_time_spent(counter_habit) == 60


def test_boolean_time_spent_follows_duration_history(habit):
    habit.duration_history = [
        HabitDuration(30, date(2024, 1, 1), date(2024, 2, 1)),
        HabitDuration(45, date(2024, 2, 1)),
    ]
    habit.completed_dates = [date(2024, 1, 15), date(2024, 2, 5), date(2023, 12, 1)]
    assert get_total_time_spent(habit) == 75


def test_time_spent_untimed_habit(habit, today):
    habit.completed_dates = [today]
    assert get_total_time_spent(habit) == 0


def test_time_spent_windows(habit, today):
    set_duration(habit, 10, date(2025, 1, 1))
    habit.completed_dates = [
        today,
        today - timedelta(days=10),
        today - timedelta(days=40),
        today - timedelta(days=400),
    ]
    assert get_total_time_spent_in_last_month(habit, today) == 20
    assert get_total_time_spent_in_last_year(habit, today) == 30
    assert get_total_time_spent(habit) == 40


def test_completions_within_last_days(habit, today):
    habit.completed_dates = [today, today - timedelta(days=29), today - timedelta(days=30)]
    assert completions_within_last_days(habit, 30, today) == 2
    assert completions_within_last_days(habit, 365, today) == 3


def test_overview_daily(habit, today):
    set_duration(habit, 15, date(2026, 1, 1))
    habit.completed_dates = [today - timedelta(days=n) for n in range(3)]
    overview = build_overview(habit, today)
    assert overview.unit == "days"
    assert overview.streak == 3
    assert overview.longest_streak == 3
    assert overview.completions == 3
    assert overview.completions_month == 3
    assert overview.time_spent == 45
    assert overview.time_spent_month == 45
    assert overview.strength == strength_percentage(habit, today)
    assert overview.strength_gained_month == overview.strength


def test_overview_weekly(habit, today):
    habit.is_weekly = True
    habit.completed_dates = [today - timedelta(days=n) for n in range(14)]
    overview = build_overview(habit, today)
    assert overview.unit == "weeks"
    assert overview.completions == 2
    assert overview.completions_month == 2
    assert overview.completions_year == 2
    assert overview.streak == 14
    assert overview.to_dict()["unit"] == "weeks"
