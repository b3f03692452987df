import pytest

from neptune_search.core import config


def setup_function(function):
    config.get_settings.cache_clear()


def teardown_function(function):
    config.get_settings.cache_clear()


def test_get_settings_reads_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "abc123")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-test")
    monkeypatch.setenv("GEMINI_TIMEOUT", "2.5")
    monkeypatch.setenv("PORT", "9100")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config.get_settings()

    assert settings.gemini_api_key == "abc123"
    assert settings.gemini_model == "gemini-test"
    assert settings.gemini_timeout == 2.5
    assert settings.port == 9100
    assert settings.log_level == "DEBUG"


def test_get_settings_warns_when_key_missing(monkeypatch, caplog):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "GEMINI_TIMEOUT", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    with caplog.at_level("WARNING"):
        settings = config.get_settings()

    assert "GEMINI_API_KEY is not configured" in " ".join(caplog.messages)
    assert settings.gemini_api_key == ""
    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.port == 8080


def test_get_settings_rejects_bad_numbers(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(config.ConfigError):
        config.get_settings()
