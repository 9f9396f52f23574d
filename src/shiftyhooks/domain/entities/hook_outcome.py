"""Outcome types for hook registry operations.

Contains the structures returned by the mutating registry operations:
- HookIssue: Why an operation did not (fully) apply
- HookOutcome: Result of a create/add/remove call
- HookRegistryError: Raised on request by HookOutcome.raise_for_issues()

Registry operations never raise on their own. Callers that prefer
exceptions opt in explicitly:

    registry.add(Widget, "render", "draw", draw).raise_for_issues()
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class HookIssue(str, Enum):
    """Reasons a registry operation was rejected or only partly applied."""

    NOT_CAPABLE = "not_capable"
    NO_HOOK_STATE = "no_hook_state"
    NOT_DECLARED = "not_declared"
    INVALID_HOOK_LIST = "invalid_hook_list"
    INVALID_HOOK_ID = "invalid_hook_id"
    NOT_CALLABLE = "not_callable"
    INVALID_PRIORITY = "invalid_priority"
    MISSING_PRIORITY = "missing_priority"
    MISSING_HOOK_ID = "missing_hook_id"
    DUPLICATE_HOOK_ID = "duplicate_hook_id"
    REDECLARED = "redeclared"

    @property
    def is_blocking(self) -> bool:
        """Whether this issue prevented the operation from taking effect."""
        return self not in (HookIssue.DUPLICATE_HOOK_ID, HookIssue.REDECLARED)


@dataclass(frozen=True)
class HookOutcome:
    """Result of a mutating registry operation.

    Attributes:
        operation: Operation name ("create", "add" or "remove").
        issues: Every issue detected, in the order they were checked.
        changed: Whether the registry was mutated.
        message: The warning that was logged, if any.
    """

    operation: str
    issues: tuple[HookIssue, ...] = ()
    changed: bool = False
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True unless a blocking issue was found."""
        return not any(issue.is_blocking for issue in self.issues)

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_issues(self) -> "HookOutcome":
        """Raise HookRegistryError if the outcome carries a blocking issue.

        Returns:
            The outcome itself, so calls can be chained.
        """
        if not self.ok:
            raise HookRegistryError(self)
        return self


class HookRegistryError(Exception):
    """Raised by HookOutcome.raise_for_issues() for failed operations.

    Args:
        outcome: The failed outcome.
    """

    def __init__(self, outcome: HookOutcome) -> None:
        self.outcome = outcome
        super().__init__(outcome.message or f"Hook operation '{outcome.operation}' failed")
