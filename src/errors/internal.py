"""Centralized internal error hierarchy.

Nothing on the per-message path raises: rewrite mismatches fall through to
``PASS`` and rendering is total. These exceptions cover defects in constant
data that must stop the process at import time instead.

Classes:
  InternalError        – Base for all internal errors.
  RuleDefinitionError  – A built-in rewrite rule is inconsistent with its pattern.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class RuleDefinitionError(InternalError):
    """Raised when a rewrite rule's pattern does not have exactly ``arity``
    capture groups.

    This is a programming error in the rule table, never a property of an
    inbound message.
    """

    def __init__(self, rule: str, *, arity: int, groups: int) -> None:
        super().__init__(
            f"Rewrite rule {rule!r} declares {arity} captures but its pattern has {groups}",
            data={"rule": rule, "arity": arity, "groups": groups},
        )


__all__ = [
    "InternalError",
    "RuleDefinitionError",
]
