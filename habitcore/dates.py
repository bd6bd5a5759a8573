"""Calendar-day helpers shared by the analytics modules.

Every comparison in habitcore happens at calendar-day granularity. Values
arriving with a time of day (``datetime``) are reduced to their ``date``
before use; timezone conversion is the caller's concern.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from habitcore.workspace import today_local


def day_of(value: date | datetime) -> date:
    """Reduce a date or datetime to its calendar day."""
    # datetime subclasses date
    if isinstance(value, datetime):
        return value.date()
    return value


def resolve_today(today: date | datetime | None = None) -> date:
    """Return *today* as a calendar day, defaulting to the configured local day."""
    if today is None:
        return today_local()
    return day_of(today)


def today_minus_days_ago(days_ago: int, today: date | datetime | None = None) -> date:
    return resolve_today(today) - timedelta(days=days_ago)


def days_between(later: date | datetime, earlier: date | datetime) -> int:
    """Whole calendar days from *earlier* to *later* (negative if reversed)."""
    return (day_of(later) - day_of(earlier)).days


def is_within_last_days(
    value: date | datetime,
    days_ago: int,
    today: date | datetime | None = None,
) -> bool:
    """True if *value* falls in the *days_ago*-day window ending today.

    The window is ``(today - days_ago, today]``: today counts, future days
    never do.
    """
    today = resolve_today(today)
    day = day_of(value)
    return today - timedelta(days=days_ago) < day <= today


def week_start(value: date | datetime) -> date:
    """Monday of the week containing *value*."""
    day = day_of(value)
    return day - timedelta(days=day.weekday())


def week_days(value: date | datetime) -> list[date]:
    """The seven days (Monday..Sunday) of the week containing *value*."""
    start = week_start(value)
    return [start + timedelta(days=i) for i in range(7)]


def date_range(start: date | datetime, end: date | datetime) -> list[date]:
    """Every day from *start* through *end* inclusive (empty if reversed)."""
    first, last = day_of(start), day_of(end)
    return [first + timedelta(days=i) for i in range((last - first).days + 1)]
