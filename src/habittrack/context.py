"""Application context for dependency injection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import BaseConfig
from .domain.repositories import HabitRepository
from .infra.repositories import HabitStore
from .logging_config import setup_logging
from .services import habits as habit_service
from .services.seed import seed_store


@dataclass
class AppContext:
    """Centralized application context handed to presentation code."""

    config: BaseConfig
    habit_store: HabitRepository
    logger: logging.Logger
    weekly_limit: int = 3

    def weekly_series(self) -> list[dict[str, object]]:
        """Weekly chart rows for the configured number of habits."""

        return habit_service.weekly_series(self.habit_store.list_all(), limit=self.weekly_limit)

    def summary(self) -> habit_service.HabitSummary:
        return habit_service.summarize(self.habit_store.list_all())


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create the context: logging, the session's habit store and its seed data."""

    if config is None:
        config = BaseConfig()

    logger = setup_logging(config)

    store = HabitStore()
    if config.SEED_DEMO:
        seed_store(store)

    return AppContext(
        config=config,
        habit_store=store,
        logger=logger,
        weekly_limit=config.WEEKLY_LIMIT,
    )
