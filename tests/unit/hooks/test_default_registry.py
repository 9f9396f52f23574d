"""Unit tests for the process-wide default registry."""

import os
from unittest.mock import patch

import shiftyhooks
from shiftyhooks.core.hooks import get_default_registry, reset_default_registry


class Widget:
    pass


class TestDefaultRegistry:
    """Tests for the default registry module."""

    def test_default_registry_is_shared(self) -> None:
        """Test that the default registry is created once."""
        assert get_default_registry() is get_default_registry()

    def test_reset_creates_new_registry(self) -> None:
        """Test that reset_default_registry() drops registrations."""
        first = get_default_registry()
        shiftyhooks.create(Widget, "render")

        reset_default_registry()

        assert get_default_registry() is not first
        assert shiftyhooks.get(Widget) is False

    def test_module_functions_round_trip(self) -> None:
        """Test create/add/do_action/remove through the package namespace."""
        calls = []
        shiftyhooks.create(Widget, "render")
        shiftyhooks.add(Widget, "render", "low", lambda owner: calls.append("low"), 1)
        shiftyhooks.add(Widget, "render", "high", lambda owner: calls.append("high"), 30)

        shiftyhooks.do_action(Widget(), "render")
        outcome = shiftyhooks.remove(Widget, "render", "high", 30)
        shiftyhooks.do_action(Widget(), "render")

        assert outcome.ok is True
        assert calls == ["high", "low", "low"]
        assert set(shiftyhooks.get(Widget, "render")) == {1, 30}

    def test_default_registry_reads_settings_from_environment(self) -> None:
        """Test that the default registry picks up environment configuration."""
        with patch.dict(
            os.environ,
            {
                "SHIFTYHOOKS_DISPATCH_ORDER": "reverse_insertion",
                "SHIFTYHOOKS_DEFAULT_PRIORITY": "4",
            },
        ):
            registry = get_default_registry()

        assert registry.settings.dispatch_order == "reverse_insertion"
        assert registry.settings.default_priority == 4
