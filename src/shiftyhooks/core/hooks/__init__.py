"""Hook system core module.

Owners (classes) declare named hook lists; other code attaches callbacks
to them at a priority and later runs them, highest priority first.

Example usage:
    from shiftyhooks.core.hooks import HookRegistry

    registry = HookRegistry()
    registry.create(Widget, "before_render")
    registry.add(Widget, "before_render", "load-theme", load_theme, priority=20)
    registry.do_action(widget, "before_render")
"""

from shiftyhooks.core.hooks.default_registry import (
    get_default_registry,
    reset_default_registry,
)
from shiftyhooks.core.hooks.hook_decorator import HookDecorator
from shiftyhooks.core.hooks.hook_registry import (
    HookCallback,
    HookList,
    HookRegistry,
    HookState,
    PriorityBucket,
)

__all__ = [
    # Registry
    "HookRegistry",
    "HookCallback",
    "HookList",
    "HookState",
    "PriorityBucket",
    # Decorator
    "HookDecorator",
    # Default registry
    "get_default_registry",
    "reset_default_registry",
]
