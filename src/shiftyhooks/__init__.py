"""ShiftyHooks - priority-ordered hook lists for Python classes.

Independent code attaches named callbacks to hook lists declared on a
class, then runs them in descending priority order:

    import shiftyhooks

    shiftyhooks.create(Widget, "before_render")
    shiftyhooks.add(Widget, "before_render", "load-theme", load_theme, priority=20)
    shiftyhooks.do_action(widget, "before_render")
"""

__version__ = "0.1.0"

from shiftyhooks.core.hooks import HookDecorator, HookRegistry, get_default_registry
from shiftyhooks.core.hooks.default_registry import add, create, do_action, get, remove
from shiftyhooks.domain.entities.hook_outcome import (
    HookIssue,
    HookOutcome,
    HookRegistryError,
)

__all__ = [
    "__version__",
    "HookRegistry",
    "HookDecorator",
    "HookIssue",
    "HookOutcome",
    "HookRegistryError",
    "get_default_registry",
    "create",
    "add",
    "remove",
    "get",
    "do_action",
]
