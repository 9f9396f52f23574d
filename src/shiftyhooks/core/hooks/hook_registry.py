"""Hook registry - per-owner hook list storage and dispatch.

The HookRegistry keeps, for each owner class, a mapping of hook list
names to priority buckets of named callbacks:

    HookState  = {hook_list: HookList}
    HookList   = {priority: PriorityBucket}
    PriorityBucket = {hook_id: callback}

Hook lists must be declared with create() before hooks are attached.
All instances of an owner class share its hook lists, and subclasses
see the hook lists declared on their bases.

Misuse never raises. Every mutating operation validates all of its
preconditions, logs a single warning listing each one that failed, and
returns a HookOutcome describing what happened.
"""

import weakref
from typing import Any, Callable, Literal, Optional, Union

from shiftyhooks.core.config import Settings, get_settings
from shiftyhooks.core.logging import get_logger
from shiftyhooks.domain.entities.hook_outcome import HookIssue, HookOutcome

logger = get_logger(__name__)

HookCallback = Callable[[Any], object]
PriorityBucket = dict[str, HookCallback]
HookList = dict[int, PriorityBucket]
HookState = dict[str, HookList]


def describe_owner(owner: Any) -> str:
    """Return a readable name for an owner in log messages."""
    name = getattr(owner, "__qualname__", None)
    if isinstance(name, str):
        return name
    return repr(owner)


class HookRegistry:
    """Per-owner hook list registration and execution engine.

    Owners are classes. Hook state is held weakly per class, so it lives
    exactly as long as the class does.

    Example:
        registry = HookRegistry()

        registry.create(Widget, "before_render")
        registry.add(Widget, "before_render", "load-theme", load_theme, priority=20)
        registry.add(Widget, "before_render", "log", log_render)

        registry.do_action(widget, "before_render")  # load_theme, then log_render
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the hook registry.

        Args:
            settings: Optional settings. Defaults to the cached global settings.
        """
        self._settings = settings or get_settings()
        self._states: "weakref.WeakKeyDictionary[type, HookState]" = weakref.WeakKeyDictionary()

    @property
    def settings(self) -> Settings:
        """Settings this registry was created with."""
        return self._settings

    @staticmethod
    def is_capable(owner: Any) -> bool:
        """Check whether ``owner`` can hold hook lists."""
        return isinstance(owner, type)

    def create(self, owner: Any, hook_list: str) -> HookOutcome:
        """Declare a hook list on an owner.

        Creates the owner's hook state on first use. Re-declaring an
        existing hook list leaves it untouched and logs a warning.

        Args:
            owner: The owner class.
            hook_list: Name of the hook list.

        Returns:
            HookOutcome for the declaration.
        """
        owner_name = describe_owner(owner)
        issues: list[HookIssue] = []
        reasons: list[str] = []

        if not self.is_capable(owner):
            issues.append(HookIssue.NOT_CAPABLE)
            reasons.append("the object is not a class")
        if not isinstance(hook_list, str) or not hook_list:
            issues.append(HookIssue.INVALID_HOOK_LIST)
            reasons.append("no hook list name was provided")

        if issues:
            message = self._compose(f'Creating hook list on object "{owner_name}" failed since', reasons)
            logger.warning(message, operation="create", owner=owner_name, hook_list=hook_list)
            return HookOutcome("create", tuple(issues), message=message)

        state = self._states.get(owner)
        if state is None:
            state = self._states[owner] = {}

        if hook_list in state:
            message = f'Attempt to recreate an existing hook list "{hook_list}" on object "{owner_name}" was aborted!'
            logger.warning(message, operation="create", owner=owner_name, hook_list=hook_list)
            return HookOutcome("create", (HookIssue.REDECLARED,), message=message)

        state[hook_list] = {}
        logger.debug("Hook list created", owner=owner_name, hook_list=hook_list)
        return HookOutcome("create", changed=True)

    def add(
        self,
        owner: Any,
        hook_list: str,
        hook_id: str,
        callback: HookCallback,
        priority: Optional[int] = None,
    ) -> HookOutcome:
        """Attach a callback to a declared hook list.

        An existing callback with the same hook_id at the same priority
        is replaced, with a warning.

        Args:
            owner: The owner class.
            hook_list: Hook list previously declared with create().
            hook_id: Identifier of the hook, unique within its priority.
            callback: Callable invoked with the owner as only argument.
            priority: Hook priority, higher runs first. Defaults to
                ``settings.default_priority`` (10).

        Returns:
            HookOutcome for the registration.
        """
        if priority is None:
            priority = self._settings.default_priority
        owner_name = describe_owner(owner)

        issues, reasons = self._check_target(owner, hook_list)
        if not isinstance(hook_id, str) or not hook_id:
            issues.append(HookIssue.INVALID_HOOK_ID)
            reasons.append('no "hookId" was provided')
        if not callable(callback):
            issues.append(HookIssue.NOT_CALLABLE)
            reasons.append("the hook is not callable")
        if not self._is_priority(priority):
            issues.append(HookIssue.INVALID_PRIORITY)
            reasons.append(f'the priority "{priority!r}" is not an integer')

        if issues:
            message = self._compose(f'Adding hook "{hook_id}" on object "{owner_name}" failed since', reasons)
            logger.warning(
                message,
                operation="add",
                owner=owner_name,
                hook_list=hook_list,
                hook_id=hook_id,
                priority=priority,
            )
            return HookOutcome("add", tuple(issues), message=message)

        bucket = self._states[owner][hook_list].setdefault(priority, {})

        if hook_id in bucket:
            message = (
                f'The hook "{hook_id}" already exists in hook list "{hook_list}" '
                f'on priority "{priority}" of object "{owner_name}"! '
                "The existing hook function will be overridden!"
            )
            logger.warning(
                message,
                operation="add",
                owner=owner_name,
                hook_list=hook_list,
                hook_id=hook_id,
                priority=priority,
            )
            bucket[hook_id] = callback
            return HookOutcome("add", (HookIssue.DUPLICATE_HOOK_ID,), changed=True, message=message)

        bucket[hook_id] = callback
        logger.debug("Hook added", owner=owner_name, hook_list=hook_list, hook_id=hook_id, priority=priority)
        return HookOutcome("add", changed=True)

    def remove(
        self,
        owner: Any,
        hook_list: str,
        hook_id: str,
        priority: Optional[int] = None,
    ) -> HookOutcome:
        """Detach a single callback from a hook list.

        Removing something that is not registered is a logged no-op.

        Args:
            owner: The owner class.
            hook_list: Hook list the hook was added to.
            hook_id: Identifier the hook was added with.
            priority: Priority the hook was added at. Defaults to
                ``settings.default_priority`` (10).

        Returns:
            HookOutcome for the removal.
        """
        if priority is None:
            priority = self._settings.default_priority
        owner_name = describe_owner(owner)

        valid_id = isinstance(hook_id, str) and bool(hook_id)
        valid_priority = self._is_priority(priority)

        issues, reasons = self._check_target(owner, hook_list)
        if not issues and valid_priority:
            hooks = self._states[owner][hook_list]
            if priority not in hooks:
                issues.append(HookIssue.MISSING_PRIORITY)
                reasons.append(f'the priority "{priority}" on hook list "{hook_list}" doesn\'t exist')
            elif valid_id and hook_id not in hooks[priority]:
                issues.append(HookIssue.MISSING_HOOK_ID)
                reasons.append(
                    f'the requested hookId "{hook_id}" doesn\'t exist on priority "{priority}" '
                    f'on hook list "{hook_list}"'
                )
        if not valid_priority:
            issues.append(HookIssue.INVALID_PRIORITY)
            reasons.append(f'the priority "{priority!r}" is not an integer')
        if not valid_id:
            issues.append(HookIssue.INVALID_HOOK_ID)
            reasons.append('no "hookId" was provided')

        if issues:
            message = self._compose(f'Removing hook "{hook_id}" on object "{owner_name}" failed since', reasons)
            logger.warning(
                message,
                operation="remove",
                owner=owner_name,
                hook_list=hook_list,
                hook_id=hook_id,
                priority=priority,
            )
            return HookOutcome("remove", tuple(issues), message=message)

        del self._states[owner][hook_list][priority][hook_id]
        logger.debug("Hook removed", owner=owner_name, hook_list=hook_list, hook_id=hook_id, priority=priority)
        return HookOutcome("remove", changed=True)

    def get(
        self,
        owner: Any,
        hook_list: Optional[str] = None,
    ) -> Union[HookList, HookState, Literal[False]]:
        """Return the hooks registered on an owner.

        The returned mappings are the registry's own, not copies. Treat
        them as read-only.

        Args:
            owner: The owner class.
            hook_list: Optional hook list name. When omitted or unknown,
                the owner's whole hook state is returned.

        Returns:
            The hook list, the full hook state, or False if the owner has
            no hook state.
        """
        if not self.is_capable(owner):
            return False
        state = self._states.get(owner)
        if state is None:
            return False
        if isinstance(hook_list, str) and hook_list in state:
            return state[hook_list]
        return state

    def do_action(self, owner: Any, hook_list: str) -> None:
        """Invoke every callback of a hook list with ``owner``.

        ``owner`` may be the owner class or one of its instances; the
        hook list is looked up along the class's MRO. Unknown hook lists
        are silently ignored. Callback exceptions propagate.

        Args:
            owner: Owner class or instance, passed to each callback.
            hook_list: Name of the hook list to run.
        """
        hooks = self._resolve(owner, hook_list)
        if hooks is None:
            return

        for priority, bucket in self._ordered_buckets(hooks):
            for hook_id, callback in bucket:
                logger.info("hook invoked", hook_id=hook_id, hook_list=hook_list, priority=priority)
                callback(owner)

    def _resolve(self, owner: Any, hook_list: str) -> Optional[HookList]:
        if not isinstance(hook_list, str):
            return None
        owner_type = owner if isinstance(owner, type) else type(owner)
        for klass in owner_type.__mro__:
            state = self._states.get(klass)
            if state is not None and hook_list in state:
                return state[hook_list]
        return None

    def _ordered_buckets(self, hooks: HookList) -> list[tuple[int, list[tuple[str, HookCallback]]]]:
        """Snapshot buckets in dispatch order."""
        if self._settings.dispatch_order == "reverse_insertion":
            priorities = list(reversed(list(hooks)))
        else:
            priorities = sorted(hooks, reverse=True)
        return [(priority, list(hooks[priority].items())) for priority in priorities]

    def _check_target(self, owner: Any, hook_list: str) -> tuple[list[HookIssue], list[str]]:
        """Check that ``owner`` has hook state declaring ``hook_list``."""
        if not self.is_capable(owner):
            return [HookIssue.NOT_CAPABLE], ["the object is not a class"]
        state = self._states.get(owner)
        if state is None:
            return [HookIssue.NO_HOOK_STATE], ["the object has no hook lists created"]
        if not isinstance(hook_list, str) or hook_list not in state:
            return [HookIssue.NOT_DECLARED], [f'the hook list "{hook_list}" doesn\'t exist']
        return [], []

    @staticmethod
    def _is_priority(priority: Any) -> bool:
        return isinstance(priority, int) and not isinstance(priority, bool)

    @staticmethod
    def _compose(prefix: str, reasons: list[str]) -> str:
        return f"{prefix} {', '.join(reasons)}!"
