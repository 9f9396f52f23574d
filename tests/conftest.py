"""Pytest configuration for all tests."""

from typing import Generator

import pytest
import structlog

from shiftyhooks.core.config import Settings, get_settings
from shiftyhooks.core.hooks import HookRegistry, reset_default_registry


@pytest.fixture(autouse=True)
def _isolate_global_state() -> Generator[None, None, None]:
    """Reset cached settings, the default registry and structlog around each test."""
    get_settings.cache_clear()
    reset_default_registry()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()
    reset_default_registry()


@pytest.fixture
def settings() -> Settings:
    """Settings for tests, independent of the environment."""
    return Settings(environment="testing", default_priority=10, dispatch_order="priority")


@pytest.fixture
def registry(settings: Settings) -> HookRegistry:
    """A fresh registry dispatching by numeric priority."""
    return HookRegistry(settings=settings)


@pytest.fixture
def legacy_registry() -> HookRegistry:
    """A fresh registry dispatching in reverse insertion order."""
    return HookRegistry(settings=Settings(environment="testing", dispatch_order="reverse_insertion"))
