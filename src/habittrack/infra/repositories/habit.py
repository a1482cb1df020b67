"""In-memory implementation of the Habit repository."""

from __future__ import annotations

import threading
from typing import Iterable, Optional

from ...logging_config import get_logger
from ...models.habit import Habit, HabitFrequency, empty_window
from ...services import habits as habit_service
from ...services.habits import HabitStatus

logger = get_logger(__name__)


class HabitStore:
    """Process-local habit collection; contents are lost when the process exits.

    Read-modify-write operations hold ``_lock`` so id assignment and streak
    updates stay atomic when the store is shared between threads. Operations
    that target an unknown id are no-ops.
    """

    def __init__(self, habits: Iterable[Habit] | None = None):
        self._habits: list[Habit] = []
        self._lock = threading.RLock()
        # the store mutates habits in place, so it keeps its own copies
        for habit in habits or []:
            self.add(habit.model_copy(deep=True))

    def __len__(self) -> int:
        return len(self._habits)

    def _find(self, habit_id: int) -> Optional[Habit]:
        for habit in self._habits:
            if habit.id == habit_id:
                return habit
        return None

    def _next_id(self) -> int:
        # max + 1, so deleting the highest id lets the next create reuse it
        if not self._habits:
            return 1
        return max(h.id for h in self._habits) + 1

    def get_by_id(self, habit_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        with self._lock:
            return self._find(habit_id)

    def list_all(self) -> list[Habit]:
        """List all habits in insertion order."""
        with self._lock:
            return list(self._habits)

    def filter_by_status(self, status: HabitStatus | str) -> list[Habit]:
        """List habits whose today value is below (active) or at/above (completed) target."""
        return habit_service.filter_by_status(self.list_all(), status)

    def add(self, habit: Habit) -> Habit:
        """Insert a fully-formed habit, keeping its id (used for seeding)."""
        with self._lock:
            if self._find(habit.id) is not None:
                raise ValueError(f"Habit id {habit.id} already exists")
            self._habits.append(habit)
            return habit

    def create(self, name: str, icon: str, target: float, unit: str, color: str) -> Habit:
        """Create a new habit with zero streaks and an empty week."""
        with self._lock:
            habit = Habit(
                id=self._next_id(),
                name=name,
                icon=icon,
                target=target,
                unit=unit,
                color=color,
                current_streak=0,
                longest_streak=0,
                frequency=HabitFrequency.DAILY,
                progress=empty_window(),
            )
            self._habits.append(habit)
        logger.info("Habit created", extra={"habit_id": habit.id, "habit_name": name})
        return habit

    def delete(self, habit_id: int) -> None:
        """Delete a habit by ID."""
        with self._lock:
            habit = self._find(habit_id)
            if habit is None:
                logger.debug("Delete skipped, habit not found", extra={"habit_id": habit_id})
                return
            self._habits.remove(habit)
        logger.info("Habit deleted", extra={"habit_id": habit_id})

    def record_progress(self, habit_id: int, value: float) -> None:
        """Replace today's value and bump or reset the current streak."""
        with self._lock:
            habit = self._find(habit_id)
            if habit is None:
                logger.debug("Progress ignored, habit not found", extra={"habit_id": habit_id})
                return
            habit_service.apply_progress(habit, value)
            current, longest = habit.current_streak, habit.longest_streak
        logger.info(
            "Progress recorded",
            extra={
                "habit_id": habit_id,
                "value": value,
                "current_streak": current,
                "longest_streak": longest,
            },
        )

    def check_in(self, habit_id: int) -> Optional[tuple[float, float, str]]:
        """Add one unit to today's value (capped at target).

        Returns:
            ``(new_value, target, unit)`` for the confirmation message, or None
            when the habit does not exist.
        """
        with self._lock:
            habit = self._find(habit_id)
            if habit is None:
                logger.debug("Check-in ignored, habit not found", extra={"habit_id": habit_id})
                return None
            new_value = habit_service.next_check_in_value(habit)
            self.record_progress(habit_id, new_value)
            return new_value, habit.target, habit.unit

    def advance_day(self) -> None:
        """Shift every habit's window by one day, breaking streaks on missed days."""
        with self._lock:
            for habit in self._habits:
                habit_service.advance_window(habit)
            count = len(self._habits)
        logger.info("Progress window advanced", extra={"habit_count": count})


__all__ = ["HabitStore"]
