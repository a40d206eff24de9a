"""Convert parsed IRC lines into canonical ``ProtocolMessage`` values.

Cooking is total: any line that does not fit one of the modelled commands
(wrong parameter count, missing prefix, unknown command) comes back as
``UnknownMsg`` so it can still be displayed.
"""

from __future__ import annotations

from collections.abc import Callable

from .identifier import mk_id
from .message import (
    Action,
    Cap,
    CapCommand,
    Error,
    Join,
    Kick,
    Mode,
    Nick,
    Notice,
    Part,
    Ping,
    Pong,
    Privmsg,
    ProtocolMessage,
    Quit,
    Reply,
    Topic,
    UnknownMsg,
)
from .parser import IRCMessage, parse_irc_message
from .user_info import UserInfo

__all__ = ["cook_irc_message", "cook_line", "parse_ctcp"]

_CTCP_DELIM = "\x01"

_Cooker = Callable[[UserInfo, tuple[str, ...]], ProtocolMessage | None]


def parse_ctcp(text: str) -> tuple[str, str] | None:
    """Split a CTCP payload into ``(command, argument)``.

    The closing delimiter is optional since some clients omit it.
    """
    if not text.startswith(_CTCP_DELIM):
        return None
    body = text[1:]
    if body.endswith(_CTCP_DELIM):
        body = body[:-1]
    command, _, arg = body.partition(" ")
    return command.upper(), arg


def _nick(src: UserInfo, params: tuple[str, ...]) -> ProtocolMessage | None:
    if len(params) < 1:
        return None
    return Nick(src, mk_id(params[0]))


def _join(src: UserInfo, params: tuple[str, ...]) -> ProtocolMessage | None:
    if len(params) < 1:
        return None
    return Join(src, mk_id(params[0]))


def _part(src: UserInfo, params: tuple[str, ...]) -> ProtocolMessage | None:
    if len(params) < 1:
        return None
    return Part(src, mk_id(params[0]), params[1] if len(params) > 1 else None)


def _quit(src: UserInfo, params: tuple[str, ...]) -> ProtocolMessage | None:
    return Quit(src, params[0] if params else None)


def _kick(src: UserInfo, params: tuple[str, ...]) -> ProtocolMessage | None:
    if len(params) < 2:
        return None
    reason = params[2] if len(params) > 2 else ""
    return Kick(src, mk_id(params[0]), mk_id(params[1]), reason)


def _topic(src: UserInfo, params: tuple[str, ...]) -> ProtocolMessage | None:
    if len(params) != 2:
        return None
    return Topic(src, mk_id(params[0]), params[1])


def _notice(src: UserInfo, params: tuple[str, ...]) -> ProtocolMessage | None:
    if len(params) != 2:
        return None
    return Notice(src, mk_id(params[0]), params[1])


def _privmsg(src: UserInfo, params: tuple[str, ...]) -> ProtocolMessage | None:
    if len(params) != 2:
        return None
    target, text = mk_id(params[0]), params[1]
    ctcp = parse_ctcp(text)
    if ctcp is not None and ctcp[0] == "ACTION":
        return Action(src, target, ctcp[1])
    return Privmsg(src, target, text)


def _mode(src: UserInfo, params: tuple[str, ...]) -> ProtocolMessage | None:
    if len(params) < 1:
        return None
    return Mode(src, mk_id(params[0]), params[1:])


_SOURCED: dict[str, _Cooker] = {
    "NICK": _nick,
    "JOIN": _join,
    "PART": _part,
    "QUIT": _quit,
    "KICK": _kick,
    "TOPIC": _topic,
    "NOTICE": _notice,
    "PRIVMSG": _privmsg,
    "MODE": _mode,
}


def _cap(params: tuple[str, ...]) -> ProtocolMessage | None:
    # CAP <target> <subcommand> [args...]
    if len(params) < 2:
        return None
    try:
        cmd = CapCommand(params[1].upper())
    except ValueError:
        return None
    return Cap(cmd, params[2:])


def cook_irc_message(parsed: IRCMessage) -> ProtocolMessage:
    """Cook a parsed line, falling back to ``UnknownMsg``."""
    command = parsed.command or ""
    params = parsed.params
    cooked: ProtocolMessage | None = None

    if command in _SOURCED:
        if parsed.prefix is not None:
            cooked = _SOURCED[command](parsed.prefix, params)
    elif command == "PING":
        cooked = Ping(params)
    elif command == "PONG":
        cooked = Pong(params)
    elif command == "ERROR":
        cooked = Error(params[0] if params else "")
    elif command == "CAP":
        cooked = _cap(params)
    elif len(command) == 3 and command.isdigit():
        cooked = Reply(int(command), params)

    if cooked is None:
        return UnknownMsg(parsed.prefix, command, params)
    return cooked


def cook_line(raw_line: str) -> ProtocolMessage:
    return cook_irc_message(parse_irc_message(raw_line))
