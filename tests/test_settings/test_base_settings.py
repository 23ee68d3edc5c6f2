import logging

import pytest
from loom_data.exceptions import ConfigValidationError
from loom_data.settings import LoomDataSettings, get_settings
from pydantic import ValidationError


def test_settings_should_have_defaults():
    """Test that settings load without any source."""
    settings = LoomDataSettings()
    assert settings.log_level == "info"
    assert settings.dev is False
    assert settings.logging_level == logging.INFO


def test_settings_should_read_environment(monkeypatch):
    """Test that LOOM_DATA_* environment variables are read."""
    # Given environment variables
    monkeypatch.setenv("LOOM_DATA_LOG_LEVEL", "warn")
    # When loading the settings
    settings = LoomDataSettings()
    # Then the values should come from the environment
    assert settings.log_level == "warn"
    assert settings.logging_level == logging.WARNING


def test_settings_should_read_dot_env_file(tmp_path):
    """Test that a .env file in the working directory is read."""
    (tmp_path / ".env").write_text("LOOM_DATA_LOG_LEVEL=error\n", encoding="utf-8")
    assert LoomDataSettings().logging_level == logging.ERROR


def test_settings_environment_should_take_precedence_over_dot_env(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("LOOM_DATA_LOG_LEVEL=error\n", encoding="utf-8")
    monkeypatch.setenv("LOOM_DATA_LOG_LEVEL", "debug")
    assert LoomDataSettings().log_level == "debug"


def test_dev_mode_should_force_debug_level(monkeypatch):
    monkeypatch.setenv("LOOM_DATA_DEV", "true")
    monkeypatch.setenv("LOOM_DATA_LOG_LEVEL", "error")
    assert LoomDataSettings().logging_level == logging.DEBUG


def test_settings_should_raise_config_validation_error(monkeypatch):
    """Test that invalid values raise ConfigValidationError."""
    # Given an unknown log level
    monkeypatch.setenv("LOOM_DATA_LOG_LEVEL", "verbose")
    # When loading the settings
    # Then it should raise the custom error
    with pytest.raises(ConfigValidationError):
        LoomDataSettings()


def test_settings_should_be_frozen():
    settings = LoomDataSettings()
    with pytest.raises(ValidationError):
        settings.log_level = "debug"


def test_get_settings_should_be_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
