"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from habittrack.config import BaseConfig, DevConfig, TestConfig


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITTRACK_DATA_DIR", str(tmp_path / "data"))
    for name in ("HABITTRACK_DEV_MODE", "HABITTRACK_SEED_DEMO", "HABITTRACK_WEEKLY_LIMIT"):
        monkeypatch.delenv(name, raising=False)

    config = BaseConfig()

    assert config.DATA_DIR == (tmp_path / "data").resolve()
    assert config.DATA_DIR.is_dir()
    assert config.DEV_MODE is True
    assert config.SEED_DEMO is True
    assert config.WEEKLY_LIMIT == 3


@pytest.mark.parametrize("raw,expected", [("0", False), ("no", False), ("YES", True), (" on ", True)])
def test_bool_flags(tmp_path, monkeypatch, raw, expected):
    monkeypatch.setenv("HABITTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITTRACK_SEED_DEMO", raw)

    assert BaseConfig().SEED_DEMO is expected


def test_weekly_limit_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITTRACK_WEEKLY_LIMIT", "5")

    assert DevConfig().WEEKLY_LIMIT == 5


@pytest.mark.parametrize("raw", ["three", "0"])
def test_invalid_weekly_limit_raises(tmp_path, monkeypatch, raw):
    monkeypatch.setenv("HABITTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITTRACK_WEEKLY_LIMIT", raw)

    with pytest.raises(ValueError):
        BaseConfig()


def test_test_config_disables_seed_and_dev_mode(test_config):
    assert isinstance(test_config, TestConfig)
    assert test_config.SEED_DEMO is False
    assert test_config.DEV_MODE is False
    assert test_config.TESTING is True
