import pytest

from hoshi.config import DEFAULT_MAX_LISTENERS, Settings, get_settings, reset_settings
from hoshi.exceptions import ConfigError, HoshiError


def test_defaults():
    settings = Settings.from_env({})

    assert settings.max_listeners == DEFAULT_MAX_LISTENERS == 250
    assert settings.log_level == "INFO"
    assert settings.json_logs is False


def test_from_env_mapping():
    settings = Settings.from_env(
        {"HOSHI_MAX_LISTENERS": " -1 ", "HOSHI_LOG_LEVEL": "debug", "HOSHI_LOG_JSON": "true"}
    )

    assert settings.max_listeners == -1
    assert settings.log_level == "DEBUG"
    assert settings.json_logs is True


def test_invalid_max_listeners():
    with pytest.raises(ConfigError, match="HOSHI_MAX_LISTENERS"):
        Settings.from_env({"HOSHI_MAX_LISTENERS": "lots"})

    assert issubclass(ConfigError, HoshiError)


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("HOSHI_MAX_LISTENERS", "7")
    first = get_settings()
    monkeypatch.setenv("HOSHI_MAX_LISTENERS", "8")

    assert get_settings() is first
    assert first.max_listeners == 7

    reset_settings()
    assert get_settings().max_listeners == 8
