"""Canonical IRC message model.

Every inbound event is cooked into exactly one of the variants below before it
reaches hooks, rendering or logging. The set is closed: code that dispatches on
``ProtocolMessage`` uses ``match`` with ``assert_never`` so a new variant is
caught by the type checker everywhere it needs handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .identifier import Identifier
from .user_info import UserInfo

__all__ = [
    "Action",
    "Cap",
    "CapCommand",
    "Error",
    "Join",
    "Kick",
    "Mode",
    "Nick",
    "Notice",
    "Part",
    "Ping",
    "Pong",
    "Privmsg",
    "ProtocolMessage",
    "Quit",
    "Reply",
    "Topic",
    "UnknownMsg",
]


class CapCommand(Enum):
    """Subcommands of the CAP capability negotiation command."""

    LS = "LS"
    LIST = "LIST"
    REQ = "REQ"
    ACK = "ACK"
    NAK = "NAK"
    END = "END"
    NEW = "NEW"
    DEL = "DEL"


@dataclass(frozen=True, slots=True)
class Nick:
    old: UserInfo
    new: Identifier


@dataclass(frozen=True, slots=True)
class Join:
    who: UserInfo
    channel: Identifier


@dataclass(frozen=True, slots=True)
class Part:
    who: UserInfo
    channel: Identifier
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class Quit:
    who: UserInfo
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class Kick:
    kicker: UserInfo
    channel: Identifier
    kickee: Identifier
    reason: str


@dataclass(frozen=True, slots=True)
class Topic:
    src: UserInfo
    channel: Identifier
    text: str


@dataclass(frozen=True, slots=True)
class Notice:
    src: UserInfo
    channel: Identifier
    text: str


@dataclass(frozen=True, slots=True)
class Privmsg:
    src: UserInfo
    channel: Identifier
    text: str


@dataclass(frozen=True, slots=True)
class Action:
    """CTCP ACTION (``/me``) message."""

    src: UserInfo
    channel: Identifier
    text: str


@dataclass(frozen=True, slots=True)
class Ping:
    params: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Pong:
    params: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Error:
    reason: str


@dataclass(frozen=True, slots=True)
class Reply:
    """Numeric server reply."""

    code: int
    params: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Cap:
    cmd: CapCommand
    args: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Mode:
    who: UserInfo
    channel: Identifier
    params: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class UnknownMsg:
    """Any command the cooker does not model explicitly."""

    prefix: UserInfo | None
    command: str
    params: tuple[str, ...] = ()


ProtocolMessage = (
    Nick
    | Join
    | Part
    | Quit
    | Kick
    | Topic
    | Notice
    | Privmsg
    | Action
    | Ping
    | Pong
    | Error
    | Reply
    | Cap
    | Mode
    | UnknownMsg
)
