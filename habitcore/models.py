"""Typed dataclasses for the habitcore data model.

Habits serialize to the application's export format via from_dict/to_dict.
camelCase in JSON is mapped to snake_case in Python. Calendar days travel
as epoch seconds for the start of the day in the caller's timezone (UTC
when none is given). Unknown keys are ignored; missing keys use defaults.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone, tzinfo
from typing import Any

from habitcore.dates import day_of
from habitcore.workspace import today_local


BOOLEAN = "boolean"
COUNTER = "counter"
HABIT_TYPES = {BOOLEAN, COUNTER}


# ── Timestamps ────────────────────────────────────────────────


def day_to_timestamp(day: date, tz: tzinfo | None = None) -> float:
    """Epoch seconds for the start of *day* in *tz*."""
    return datetime.combine(day_of(day), time.min, tzinfo=tz or timezone.utc).timestamp()


def timestamp_to_day(value: Any, tz: tzinfo | None = None) -> date:
    """Calendar day in *tz* for an epoch timestamp (number or numeric string)."""
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timestamp: {value!r}") from None
    return datetime.fromtimestamp(seconds, tz or timezone.utc).date()


# ── Duration history ──────────────────────────────────────────


@dataclass
class HabitDuration:
    """Minutes per completion in force from effective_date until expiration_date."""

    minutes: int
    effective_date: date
    expiration_date: date | None = None

    def is_active_on(self, value: date | datetime) -> bool:
        """Half-open check: effective_date <= day < expiration_date."""
        day = day_of(value)
        if day < day_of(self.effective_date):
            return False
        return self.expiration_date is None or day < day_of(self.expiration_date)

    @classmethod
    def from_dict(cls, d: dict[str, Any], tz: tzinfo | None = None) -> HabitDuration:
        expiration = d.get("expirationDate")
        return cls(
            minutes=int(d.get("minutes", 0)),
            effective_date=timestamp_to_day(d.get("effectiveDate"), tz),
            expiration_date=timestamp_to_day(expiration, tz) if expiration is not None else None,
        )

    def to_dict(self, tz: tzinfo | None = None) -> dict[str, Any]:
        return {
            "minutes": self.minutes,
            "effectiveDate": day_to_timestamp(self.effective_date, tz),
            "expirationDate": (
                day_to_timestamp(self.expiration_date, tz) if self.expiration_date is not None else None
            ),
        }


# ── Habit ─────────────────────────────────────────────────────


@dataclass
class Habit:
    id: str = field(default_factory=lambda: str(uuid.uuid4()).upper())
    title: str = ""
    motivation: str = ""
    color: str = "blue"
    type: str = BOOLEAN  # boolean, counter
    is_weekly: bool = False
    creation_date: date = field(default_factory=today_local)
    completed_dates: list[date] = field(default_factory=list)
    daily_counters: dict[date, int] = field(default_factory=dict)
    duration_history: list[HabitDuration] = field(default_factory=list)

    @property
    def is_counter(self) -> bool:
        return self.type == COUNTER

    @classmethod
    def from_dict(cls, d: dict[str, Any], tz: tzinfo | None = None) -> Habit:
        if not d or not isinstance(d, dict):
            return cls()
        habit_type = str(d.get("type", BOOLEAN))
        if habit_type not in HABIT_TYPES:
            habit_type = BOOLEAN

        completed: list[date] = []
        for ts in d.get("completedDates") or []:
            day = timestamp_to_day(ts, tz)
            if day not in completed:
                completed.append(day)

        counters: dict[date, int] = {}
        for key, value in (d.get("dailyCounters") or {}).items():
            counters[timestamp_to_day(key, tz)] = max(0, int(value))

        history = [HabitDuration.from_dict(h, tz) for h in (d.get("durationHistory") or [])]

        creation = d.get("creationDate")
        kwargs: dict[str, Any] = {}
        if d.get("id"):
            kwargs["id"] = str(d["id"])
        if creation is not None:
            kwargs["creation_date"] = timestamp_to_day(creation, tz)
        return cls(
            title=str(d.get("title", "")),
            motivation=str(d.get("motivation", "")),
            color=str(d.get("color", "blue")),
            type=habit_type,
            is_weekly=bool(d.get("isWeekly", False)),
            completed_dates=completed,
            daily_counters=counters,
            duration_history=history,
            **kwargs,
        )

    def to_dict(self, tz: tzinfo | None = None) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "motivation": self.motivation,
            "color": self.color,
            "type": self.type,
            "isWeekly": self.is_weekly,
            "creationDate": day_to_timestamp(self.creation_date, tz),
            "completedDates": [day_to_timestamp(d, tz) for d in self.completed_dates],
            "dailyCounters": {
                str(day_to_timestamp(d, tz)): n for d, n in self.daily_counters.items()
            },
            "durationHistory": [h.to_dict(tz) for h in self.duration_history],
        }


# ── Overview ──────────────────────────────────────────────────


@dataclass
class HabitOverview:
    strength: int = 0
    strength_gained_month: int = 0
    strength_gained_year: int = 0
    completions: int = 0
    completions_month: int = 0
    completions_year: int = 0
    streak: int = 0
    longest_streak: int = 0
    time_spent: int = 0
    time_spent_month: int = 0
    time_spent_year: int = 0
    unit: str = "days"  # days, weeks

    def to_dict(self) -> dict[str, Any]:
        return {
            "strength": self.strength,
            "strengthGainedMonth": self.strength_gained_month,
            "strengthGainedYear": self.strength_gained_year,
            "completions": self.completions,
            "completionsMonth": self.completions_month,
            "completionsYear": self.completions_year,
            "streak": self.streak,
            "longestStreak": self.longest_streak,
            "timeSpent": self.time_spent,
            "timeSpentMonth": self.time_spent_month,
            "timeSpentYear": self.time_spent_year,
            "unit": self.unit,
        }
