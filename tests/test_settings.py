"""Tests for core.settings."""

from pathlib import Path

import pytest
import yaml

from core.settings import get_setting, load_settings, reload_settings


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch) -> None:
    for name in ("ONBOARDING_MODE", "ONBOARDING_LOCALE", "REDIS_HOST", "REDIS_PORT", "REDIS_DB"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_settings_file(tmp_path: Path) -> None:
    """When settings.yaml does not exist, defaults are returned."""
    settings = load_settings(tmp_path)
    assert get_setting(settings, "onboarding.mode") == "ephemeral"
    assert get_setting(settings, "onboarding.locale") == "en"
    assert get_setting(settings, "storage.port") == 6379
    assert get_setting(settings, "storage.max_attempts") == 20


def test_file_values_are_merged_over_defaults(tmp_path: Path) -> None:
    (tmp_path / "settings.yaml").write_text(
        yaml.safe_dump({"onboarding": {"mode": "persistent"}, "storage": {"host": "cache"}})
    )
    settings = load_settings(tmp_path)
    assert get_setting(settings, "onboarding.mode") == "persistent"
    assert get_setting(settings, "onboarding.locale") == "en"
    assert get_setting(settings, "storage.host") == "cache"
    assert get_setting(settings, "storage.port") == 6379


def test_malformed_yaml_falls_back_to_defaults(tmp_path: Path) -> None:
    (tmp_path / "settings.yaml").write_text("onboarding: [unclosed")
    assert get_setting(load_settings(tmp_path), "onboarding.mode") == "ephemeral"


def test_env_overrides_file(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "settings.yaml").write_text(yaml.safe_dump({"storage": {"port": 7000}}))
    monkeypatch.setenv("REDIS_PORT", "6390")
    monkeypatch.setenv("ONBOARDING_LOCALE", "fr")
    settings = load_settings(tmp_path)
    assert get_setting(settings, "storage.port") == 6390
    assert get_setting(settings, "onboarding.locale") == "fr"


def test_invalid_env_value_raises(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("REDIS_PORT", "not-a-port")
    with pytest.raises(ValueError, match="REDIS_PORT"):
        load_settings(tmp_path)


def test_settings_are_cached_until_reload(tmp_path: Path) -> None:
    first = load_settings(tmp_path)
    (tmp_path / "settings.yaml").write_text(yaml.safe_dump({"onboarding": {"locale": "fr"}}))
    assert load_settings(tmp_path) is first
    reload_settings()
    assert get_setting(load_settings(tmp_path), "onboarding.locale") == "fr"


def test_get_setting_missing_path_returns_default() -> None:
    assert get_setting({"a": {"b": 1}}, "a.c", default="x") == "x"
    assert get_setting({"a": 1}, "a.b") is None
