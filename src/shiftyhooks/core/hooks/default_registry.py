"""Process-wide default hook registry.

Module-level create/add/remove/get/do_action functions operate on a
single lazily created HookRegistry, so independent modules can share
hook lists without passing a registry around.
"""

from typing import Any, Optional

from shiftyhooks.core.hooks.hook_registry import HookCallback, HookRegistry
from shiftyhooks.core.logging import get_logger
from shiftyhooks.domain.entities.hook_outcome import HookOutcome

logger = get_logger(__name__)

_default_registry: Optional[HookRegistry] = None


def get_default_registry() -> HookRegistry:
    """Get or create the default hook registry.

    Returns:
        The process-wide HookRegistry.
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = HookRegistry()
        logger.debug("Created default hook registry")
    return _default_registry


def reset_default_registry() -> None:
    """Drop the default registry; the next call creates a fresh one."""
    global _default_registry
    _default_registry = None


def create(owner: Any, hook_list: str) -> HookOutcome:
    """Declare a hook list on the default registry."""
    return get_default_registry().create(owner, hook_list)


def add(
    owner: Any,
    hook_list: str,
    hook_id: str,
    callback: HookCallback,
    priority: Optional[int] = None,
) -> HookOutcome:
    """Attach a hook on the default registry."""
    return get_default_registry().add(owner, hook_list, hook_id, callback, priority=priority)


def remove(
    owner: Any,
    hook_list: str,
    hook_id: str,
    priority: Optional[int] = None,
) -> HookOutcome:
    """Detach a hook from the default registry."""
    return get_default_registry().remove(owner, hook_list, hook_id, priority=priority)


def get(owner: Any, hook_list: Optional[str] = None):
    """Return hooks registered on the default registry."""
    return get_default_registry().get(owner, hook_list)


def do_action(owner: Any, hook_list: str) -> None:
    """Run a hook list on the default registry."""
    get_default_registry().do_action(owner, hook_list)
