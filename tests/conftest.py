"""Pytest configuration and shared fixtures for HabitTrack tests.

Provides stores, a habit factory and an isolated configuration so tests never
write logs into the working directory.
"""

from __future__ import annotations

import logging

import pytest

from habittrack.config import TestConfig
from habittrack.constants.palette import DEFAULT_COLOR, DEFAULT_ICON
from habittrack.infra.repositories import HabitStore
from habittrack.logging_config import ROOT_LOGGER_NAME
from habittrack.models.habit import Habit
from habittrack.services.seed import seed_store


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def store() -> HabitStore:
    """Empty habit store."""
    return HabitStore()


@pytest.fixture
def seeded_store() -> HabitStore:
    """Store holding the five startup habits (ids 1-5)."""
    s = HabitStore()
    seed_store(s)
    return s


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def habit_factory(store):
    """Factory creating habits in ``store`` with optional preset state.

    Returns:
        Callable: Function that creates Habit instances through the store
    """

    def _create_habit(
        name: str = "Drink Water",
        target: float = 8,
        unit: str = "glasses",
        icon: str = DEFAULT_ICON,
        color: str = DEFAULT_COLOR,
        progress: list[float] | None = None,
        current_streak: int = 0,
        longest_streak: int = 0,
    ) -> Habit:
        habit = store.create(name, icon, target, unit, color)
        if progress is not None:
            habit.progress = list(progress)
        habit.current_streak = current_streak
        habit.longest_streak = longest_streak
        return habit

    return _create_habit


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def test_config(tmp_path, monkeypatch):
    """Configuration pointed at a temporary data directory."""
    monkeypatch.setenv("HABITTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("HABITTRACK_WEEKLY_LIMIT", raising=False)
    config = TestConfig()
    yield config

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
