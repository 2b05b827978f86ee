import pytest
from pydantic import ValidationError

from timeline_engine.config import Settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("TIMELINE_TIMEZONE", raising=False)
    monkeypatch.delenv("TIMELINE_MERGE_DAYS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.timezone == "UTC"
    assert settings.events_limit == 20
    assert settings.events_limit_per_course == 10
    assert settings.merge_days is False


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TIMELINE_TIMEZONE", "Australia/Perth")
    monkeypatch.setenv("TIMELINE_MERGE_DAYS", "true")
    settings = Settings(_env_file=None)
    assert settings.timezone == "Australia/Perth"
    assert settings.merge_days is True


def test_settings_reject_unknown_timezone():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, timezone="Mars/Olympus")
