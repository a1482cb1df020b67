"""Startup seed habits for a fresh session."""

from __future__ import annotations

from ..constants.palette import HABIT_ICONS
from ..infra.repositories import HabitStore
from ..logging_config import get_logger
from ..models.habit import Habit, HabitFrequency

logger = get_logger(__name__)

SEED_HABITS: list[dict] = [
    {
        "id": 1,
        "name": "Drink Water",
        "icon": HABIT_ICONS[0],
        "target": 8,
        "unit": "glasses",
        "current_streak": 5,
        "longest_streak": 14,
        "progress": [5, 7, 8, 6, 8, 7, 5],
        "color": "#3B82F6",
    },
    {
        "id": 2,
        "name": "Exercise",
        "icon": HABIT_ICONS[1],
        "target": 30,
        "unit": "minutes",
        "current_streak": 3,
        "longest_streak": 10,
        "progress": [20, 30, 45, 30, 0, 30, 15],
        "color": "#EF4444",
    },
    {
        "id": 3,
        "name": "Read",
        "icon": HABIT_ICONS[2],
        "target": 20,
        "unit": "pages",
        "current_streak": 7,
        "longest_streak": 21,
        "progress": [15, 20, 30, 20, 25, 20, 10],
        "color": "#10B981",
    },
    {
        "id": 4,
        "name": "Meditate",
        "icon": HABIT_ICONS[3],
        "target": 10,
        "unit": "minutes",
        "current_streak": 2,
        "longest_streak": 8,
        "progress": [5, 10, 10, 0, 0, 5, 10],
        "color": "#8B5CF6",
    },
    {
        "id": 5,
        "name": "Sleep",
        "icon": HABIT_ICONS[4],
        "target": 8,
        "unit": "hours",
        "current_streak": 4,
        "longest_streak": 12,
        "progress": [7, 8, 6.5, 7, 8, 7.5, 7],
        "color": "#EC4899",
    },
]


def seed_habits() -> list[Habit]:
    """Build fresh Habit instances for the seed set."""

    return [
        Habit(frequency=HabitFrequency.DAILY, **{**row, "progress": list(row["progress"])})
        for row in SEED_HABITS
    ]


def seed_store(store: HabitStore) -> int:
    """Load the seed habits into an empty store; returns the number added."""

    if len(store):
        logger.info("Seed skipped, store already populated", extra={"habit_count": len(store)})
        return 0
    for habit in seed_habits():
        store.add(habit)
    logger.info("Seed habits loaded", extra={"habit_count": len(SEED_HABITS)})
    return len(SEED_HABITS)


__all__ = ["SEED_HABITS", "seed_habits", "seed_store"]
