"""Habit model exports."""

from .habit import DAY_LABELS, WINDOW_DAYS, Habit, HabitFrequency, empty_window

__all__ = [
    "DAY_LABELS",
    "WINDOW_DAYS",
    "Habit",
    "HabitFrequency",
    "empty_window",
]
