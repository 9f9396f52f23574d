import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from shiftyhooks.core.config import Settings, get_settings
from shiftyhooks.core.hooks import HookRegistry


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    settings = Settings()

    assert settings.app_name == "ShiftyHooks"
    assert settings.environment == "development"
    assert settings.default_priority == 10
    assert settings.dispatch_order == "priority"
    assert settings.log_level == "INFO"
    assert settings.log_format == "console"
    assert settings.is_development is True
    assert settings.is_production is False
    assert settings.is_testing is False


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(os.environ, {
        "SHIFTYHOOKS_ENVIRONMENT": "production",
        "SHIFTYHOOKS_DEFAULT_PRIORITY": "25",
        "SHIFTYHOOKS_DISPATCH_ORDER": "reverse_insertion",
        "SHIFTYHOOKS_LOG_FORMAT": "json",
    }):
        settings = Settings()

    assert settings.environment == "production"
    assert settings.default_priority == 25
    assert settings.dispatch_order == "reverse_insertion"
    assert settings.log_format == "json"
    assert settings.is_production is True


def test_log_level_is_case_insensitive():
    """Test that log levels are upper-cased."""
    with patch.dict(os.environ, {"SHIFTYHOOKS_LOG_LEVEL": "debug"}):
        settings = Settings()

    assert settings.log_level == "DEBUG"


def test_invalid_dispatch_order():
    """Test that unknown dispatch orders are rejected."""
    with pytest.raises(ValidationError):
        Settings(dispatch_order="random")


def test_invalid_default_priority():
    """Test that a non-integer default priority is rejected."""
    with patch.dict(os.environ, {"SHIFTYHOOKS_DEFAULT_PRIORITY": "high"}):
        with pytest.raises(ValidationError):
            Settings()


def test_get_settings_cached():
    """Test that get_settings returns a cached instance."""
    s1 = get_settings()
    s2 = get_settings()
    assert s1 is s2

    get_settings.cache_clear()
    s3 = get_settings()
    assert s1 is not s3


def test_registry_uses_cached_settings_by_default():
    """Test that a registry without explicit settings uses get_settings()."""
    with patch.dict(os.environ, {"SHIFTYHOOKS_DEFAULT_PRIORITY": "2"}):
        get_settings.cache_clear()
        registry = HookRegistry()

    assert registry.settings is get_settings()
    assert registry.settings.default_priority == 2
