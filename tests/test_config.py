"""Environment-driven picker configuration."""

from datetime import date

import pytest

from domain.availability import AvailabilityWindow
from infrastructure.config import PickerConfig

ENV_KEYS = [
    "PICKER_EARLIEST_DAY",
    "PICKER_MOST_RECENT_DAY",
    "PICKER_INITIAL_VIEW",
    "PICKER_LOG_LEVEL",
    "PICKER_LOGS_DIR",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    config = PickerConfig(today=date(2024, 5, 3))

    assert config.earliest_day == date(2024, 1, 1)
    assert config.most_recent_day == date(2024, 5, 3)
    assert config.initial_view == "daily"
    assert config.log_level == "INFO"
    assert config.logs_dir.name == "logs"
    assert config.window == AvailabilityWindow(date(2024, 1, 1), date(2024, 5, 3))


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PICKER_EARLIEST_DAY", "2024-02-01")
    monkeypatch.setenv("PICKER_MOST_RECENT_DAY", "2024-04-30")
    monkeypatch.setenv("PICKER_INITIAL_VIEW", " Weekly ")
    monkeypatch.setenv("PICKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("PICKER_LOGS_DIR", str(tmp_path))

    config = PickerConfig(today=date(2024, 5, 3))

    assert config.window == AvailabilityWindow(date(2024, 2, 1), date(2024, 4, 30))
    assert config.initial_view == "weekly"
    assert config.log_level == "DEBUG"
    assert config.logs_dir == tmp_path.resolve()


def test_invalid_date_raises(monkeypatch):
    monkeypatch.setenv("PICKER_EARLIEST_DAY", "01/02/2024")
    with pytest.raises(ValueError, match="PICKER_EARLIEST_DAY"):
        PickerConfig(today=date(2024, 5, 3))


def test_invalid_view_raises(monkeypatch):
    monkeypatch.setenv("PICKER_INITIAL_VIEW", "yearly")
    with pytest.raises(ValueError, match="PICKER_INITIAL_VIEW"):
        PickerConfig(today=date(2024, 5, 3))


def test_earliest_after_today_raises_at_construction(monkeypatch):
    monkeypatch.setenv("PICKER_EARLIEST_DAY", "2030-01-01")
    with pytest.raises(ValueError, match="after upper bound"):
        PickerConfig(today=date(2024, 5, 3))


def test_earliest_after_most_recent_raises_at_construction(monkeypatch):
    monkeypatch.setenv("PICKER_EARLIEST_DAY", "2024-04-01")
    monkeypatch.setenv("PICKER_MOST_RECENT_DAY", "2024-03-01")
    with pytest.raises(ValueError, match="after upper bound"):
        PickerConfig(today=date(2024, 5, 3))
