"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "HabitTrack"
    LOG_FILENAME = "habittrack.log"
    LOG_MAX_BYTES = 10 * 1024 * 1024
    LOG_BACKUP_COUNT = 5

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("HABITTRACK_DEV_MODE", default=True)
        self.SEED_DEMO = _env_bool("HABITTRACK_SEED_DEMO", default=True)
        self.WEEKLY_LIMIT = _env_int("HABITTRACK_WEEKLY_LIMIT", 3)
        if self.WEEKLY_LIMIT < 1:
            raise ValueError("HABITTRACK_WEEKLY_LIMIT must be at least 1.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("HABITTRACK_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path


class DevConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration for test runs: empty store, quiet console."""

    __test__ = False

    DEBUG = False
    TESTING = True

    def __init__(self, data_dir: Path | None = None) -> None:
        super().__init__()
        if data_dir is not None:
            self.DATA_DIR = Path(data_dir)
            self.DATA_DIR.mkdir(parents=True, exist_ok=True)
        self.DEV_MODE = False
        self.SEED_DEMO = False
