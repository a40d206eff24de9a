"""Message hook boundary.

A hook looks at every inbound message before it is rendered and either lets it
through, drops it, or replaces it with a different message.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..irc.message import ProtocolMessage
from ..logs.logger import logger

__all__ = [
    "DROP",
    "PASS",
    "DropMessage",
    "MessageHook",
    "MessageResult",
    "PassMessage",
    "ReplaceMessage",
    "run_hooks",
]


@dataclass(frozen=True, slots=True)
class PassMessage:
    """Leave the message unchanged."""


@dataclass(frozen=True, slots=True)
class DropMessage:
    """Suppress the message entirely."""


@dataclass(frozen=True, slots=True)
class ReplaceMessage:
    """Substitute ``message`` for the original."""

    message: ProtocolMessage


MessageResult = PassMessage | DropMessage | ReplaceMessage

PASS = PassMessage()
DROP = DropMessage()


@dataclass(frozen=True, slots=True)
class MessageHook:
    """A named message transformation.

    Attributes:
        name: Name used to enable the hook and in log lines.
        is_filter_only: True when the hook only observes or drops messages
            and never replaces them.
        apply: The transformation itself.
    """

    name: str
    is_filter_only: bool
    apply: Callable[[ProtocolMessage], MessageResult]


def run_hooks(hooks: Iterable[MessageHook], msg: ProtocolMessage) -> ProtocolMessage | None:
    """Feed ``msg`` through ``hooks`` in order.

    Each hook sees the output of the previous one. Returns ``None`` as soon as
    a hook drops the message.
    """
    for hook in hooks:
        result = hook.apply(msg)
        if isinstance(result, DropMessage):
            logger.log_event("hook", "drop", level=logging.DEBUG, hook=hook.name, name=hook.name)
            return None
        if isinstance(result, ReplaceMessage):
            logger.log_event("hook", "replace", level=logging.DEBUG, hook=hook.name, name=hook.name)
            msg = result.message
    return msg
