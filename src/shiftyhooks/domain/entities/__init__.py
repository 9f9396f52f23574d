"""Domain entities for the hook registry."""

from shiftyhooks.domain.entities.hook_outcome import (
    HookIssue,
    HookOutcome,
    HookRegistryError,
)

__all__ = [
    "HookIssue",
    "HookOutcome",
    "HookRegistryError",
]
