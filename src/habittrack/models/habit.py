"""Habit tracking data structures."""

from __future__ import annotations

from enum import Enum

from sqlmodel import Field, SQLModel

WINDOW_DAYS = 7
DAY_LABELS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class HabitFrequency(str, Enum):
    """Cadence options for habits (stored, not branched on)."""

    DAILY = "daily"
    WEEKLY = "weekly"


def empty_window() -> list[float]:
    """Return a zeroed progress window."""

    return [0.0] * WINDOW_DAYS


class Habit(SQLModel):
    """A user-defined habit with a rolling week of progress samples.

    ``progress`` always holds ``WINDOW_DAYS`` samples; the last one is today.
    """

    id: int
    name: str
    icon: str = ""
    target: float
    unit: str = ""
    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    frequency: HabitFrequency = HabitFrequency.DAILY
    progress: list[float] = Field(default_factory=empty_window)
    color: str = ""

    @property
    def today_value(self) -> float:
        return self.progress[-1]

    @property
    def is_completed(self) -> bool:
        """True when today's sample meets or exceeds the target."""

        return self.today_value >= self.target
