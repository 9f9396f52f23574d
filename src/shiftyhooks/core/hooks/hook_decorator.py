"""Hook decorator API for declaring hook lists and attaching hooks.

Example:
    hooks = HookDecorator(registry)

    @hooks.declare("before_save", "after_save")
    class Document:
        def save(self):
            hooks.do_action(self, "before_save")
            ...
            hooks.do_action(self, "after_save")

    @hooks.on(Document, "before_save", priority=20)
    def stamp(document):
        document.updated_at = now()
"""

from typing import Any, Callable, Optional, TypeVar

from shiftyhooks.core.hooks.hook_registry import HookRegistry
from shiftyhooks.domain.entities.hook_outcome import HookOutcome

F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T", bound=type)


class HookDecorator:
    """Provides decorator syntax on top of a HookRegistry.

    Attributes:
        _registry: The underlying HookRegistry.
    """

    def __init__(self, registry: HookRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> HookRegistry:
        """Get the underlying hook registry."""
        return self._registry

    def declare(self, *hook_lists: str) -> Callable[[T], T]:
        """Class decorator declaring hook lists on the decorated class.

        Args:
            *hook_lists: Names of the hook lists to create.

        Returns:
            Decorator returning the class unchanged.
        """

        def decorator(cls: T) -> T:
            for hook_list in hook_lists:
                self._registry.create(cls, hook_list)
            return cls

        return decorator

    def on(
        self,
        owner: type,
        hook_list: str,
        hook_id: Optional[str] = None,
        priority: Optional[int] = None,
    ) -> Callable[[F], F]:
        """Function decorator attaching the function to a hook list.

        Args:
            owner: The owner class.
            hook_list: Hook list declared on ``owner``.
            hook_id: Hook identifier. Defaults to the function's ``__name__``.
            priority: Hook priority (higher = earlier).

        Returns:
            Decorator returning the function unchanged.
        """

        def decorator(func: F) -> F:
            self._registry.add(
                owner,
                hook_list,
                hook_id if hook_id is not None else func.__name__,
                func,
                priority=priority,
            )
            return func

        return decorator

    def remove(
        self,
        owner: type,
        hook_list: str,
        hook_id: str,
        priority: Optional[int] = None,
    ) -> HookOutcome:
        """Detach a hook. See HookRegistry.remove()."""
        return self._registry.remove(owner, hook_list, hook_id, priority=priority)

    def get(self, owner: type, hook_list: Optional[str] = None):
        """Return registered hooks. See HookRegistry.get()."""
        return self._registry.get(owner, hook_list)

    def do_action(self, owner: Any, hook_list: str) -> None:
        """Run a hook list. See HookRegistry.do_action()."""
        self._registry.do_action(owner, hook_list)
