"""Habit service helpers for streaks, filtering and chart statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from ..models.habit import DAY_LABELS, Habit


class HabitStatus(str, Enum):
    """Filter options offered by the habits list."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


def apply_progress(habit: Habit, value: float) -> None:
    """Record ``value`` as today's sample and carry the streak forward.

    The streak is bumped or reset from its previous value rather than
    re-derived from the whole window.
    """

    habit.progress[-1] = value
    if value >= habit.target:
        habit.current_streak = habit.current_streak + 1
    else:
        habit.current_streak = 0
    habit.longest_streak = max(habit.current_streak, habit.longest_streak)


def next_check_in_value(habit: Habit) -> float:
    """Return today's value after a single check-in, capped at the target."""

    return min(habit.today_value + 1, habit.target)


def advance_window(habit: Habit) -> None:
    """Close today and open a fresh day at the end of the window.

    A closing day below target breaks the current streak.
    """

    if habit.today_value < habit.target:
        habit.current_streak = 0
    habit.progress = [*habit.progress[1:], 0.0]


def filter_by_status(habits: Iterable[Habit], status: HabitStatus | str) -> list[Habit]:
    """Return habits matching ``status`` in their original order."""

    status = HabitStatus(status)
    if status is HabitStatus.ACTIVE:
        return [h for h in habits if h.today_value < h.target]
    if status is HabitStatus.COMPLETED:
        return [h for h in habits if h.today_value >= h.target]
    return list(habits)


def weekly_series(habits: Iterable[Habit], limit: int = 3) -> list[dict[str, object]]:
    """Return one row per day label with a column for each of the first ``limit`` habits.

    Labels are positional: index 0 is always "Mon".
    """

    shown = list(habits)[:limit]
    rows: list[dict[str, object]] = []
    for index, day in enumerate(DAY_LABELS):
        row: dict[str, object] = {"day": day}
        for habit in shown:
            row[habit.name] = habit.progress[index]
        rows.append(row)
    return rows


def habit_trend(habit: Habit) -> list[dict[str, object]]:
    """Return the 7-day line series shown on a habit's detail view."""

    return [{"day": day, "value": habit.progress[i]} for i, day in enumerate(DAY_LABELS)]


@dataclass(slots=True)
class AggregateSnapshot:
    """Raw per-habit values behind the proportion and bar charts, keyed by habit id."""

    completion_by_habit: dict[int, float] = field(default_factory=dict)
    streak_by_habit: dict[int, int] = field(default_factory=dict)


def aggregate_snapshot(habits: Iterable[Habit]) -> AggregateSnapshot:
    snapshot = AggregateSnapshot()
    for habit in habits:
        snapshot.completion_by_habit[habit.id] = habit.today_value
        snapshot.streak_by_habit[habit.id] = habit.current_streak
    return snapshot


def chart_rows(habits: Iterable[Habit]) -> list[dict[str, object]]:
    """Pair each habit's name and color with today's value and current streak."""

    return [
        {
            "name": h.name,
            "color": h.color,
            "value": h.today_value,
            "current_streak": h.current_streak,
        }
        for h in habits
    ]


def completion_ratio(habit: Habit) -> float:
    """Return today's progress as a fraction of target in ``[0, 1]``."""

    if habit.target <= 0:
        return 0.0
    return max(0.0, min(habit.today_value / habit.target, 1.0))


def streak_ratio(habit: Habit) -> float:
    """Return the current streak relative to the best streak, 0.0 with no history."""

    if habit.longest_streak == 0:
        return 0.0
    return habit.current_streak / habit.longest_streak


def daily_completion_rates(habits: Iterable[Habit]) -> list[dict[str, object]]:
    """Return, per day label, the percentage of habits that met their target."""

    habit_list = list(habits)
    rows: list[dict[str, object]] = []
    for index, day in enumerate(DAY_LABELS):
        if not habit_list:
            rate = 0.0
        else:
            met = sum(1 for h in habit_list if h.progress[index] >= h.target)
            rate = round(met / len(habit_list) * 100, 1)
        rows.append({"day": day, "rate": rate})
    return rows


@dataclass(slots=True)
class HabitSummary:
    """Headline numbers for the dashboard and stats page."""

    total: int
    completed_today: int
    completion_rate: float
    longest_active_streak: int
    average_streak: float
    best_streak: int


def summarize(habits: Iterable[Habit]) -> HabitSummary:
    """Compose the headline statistics for a collection of habits."""

    habit_list = list(habits)
    if not habit_list:
        return HabitSummary(
            total=0,
            completed_today=0,
            completion_rate=0.0,
            longest_active_streak=0,
            average_streak=0.0,
            best_streak=0,
        )

    completed = sum(1 for h in habit_list if h.is_completed)
    streaks = [h.current_streak for h in habit_list]
    return HabitSummary(
        total=len(habit_list),
        completed_today=completed,
        completion_rate=round(completed / len(habit_list) * 100, 1),
        longest_active_streak=max(streaks),
        average_streak=round(sum(streaks) / len(streaks), 1),
        best_streak=max(h.longest_streak for h in habit_list),
    )


__all__ = [
    "AggregateSnapshot",
    "HabitStatus",
    "HabitSummary",
    "advance_window",
    "aggregate_snapshot",
    "apply_progress",
    "chart_rows",
    "completion_ratio",
    "daily_completion_rates",
    "filter_by_status",
    "habit_trend",
    "next_check_in_value",
    "streak_ratio",
    "summarize",
    "weekly_series",
]
