"""Habit repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ...models.habit import Habit
from ...services.habits import HabitStatus


@runtime_checkable
class HabitRepository(Protocol):
    """Operations presentation code uses to read and change habits."""

    def get_by_id(self, habit_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        ...

    def list_all(self) -> list[Habit]:
        """List all habits in insertion order."""
        ...

    def filter_by_status(self, status: HabitStatus | str) -> list[Habit]:
        """List habits by today's completion status."""
        ...

    def create(self, name: str, icon: str, target: float, unit: str, color: str) -> Habit:
        """Create a new habit with an empty progress window."""
        ...

    def delete(self, habit_id: int) -> None:
        """Delete a habit by ID."""
        ...

    def record_progress(self, habit_id: int, value: float) -> None:
        """Set today's value and update streaks."""
        ...

    def check_in(self, habit_id: int) -> Optional[tuple[float, float, str]]:
        """Add one unit to today's value, capped at the target."""
        ...

    def advance_day(self) -> None:
        """Roll every habit's window forward by one day."""
        ...
