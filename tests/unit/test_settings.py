import pytest

from crime_intent.utils.settings import (
    DEFAULT_DATABASE_URL,
    get_settings,
    refresh_settings_cache,
)


def test_defaults_without_environment():
    settings = get_settings()
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.auto_migrate is True
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CRIME_INTENT_DATABASE_URL", " sqlite+pysqlite:////tmp/crimes.db ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    refresh_settings_cache()

    settings = get_settings()
    assert settings.database_url == "sqlite+pysqlite:////tmp/crimes.db"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "raw,expected",
    [("false", False), ("0", False), ("off", False), ("", False), ("YES", True), ("1", True), ("maybe", True)],
)
def test_auto_migrate_flag_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("CRIME_INTENT_AUTO_MIGRATE", raw)
    refresh_settings_cache()
    assert get_settings().auto_migrate is expected


def test_settings_are_cached_until_refresh(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert get_settings() is first
    refresh_settings_cache()
    assert get_settings().log_level == "WARNING"
