"""IRC data model package.

Contains identifiers, sender identities, the canonical message variants and
the raw-line parser/cooker that produces them.
"""

from .cook import cook_irc_message, cook_line  # noqa: F401
from .identifier import Identifier, irc_fold_case, mk_id  # noqa: F401
from .message import (  # noqa: F401
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
from .parser import IRCMessage, parse_irc_message  # noqa: F401
from .user_info import UserInfo, parse_user_info, user_info  # noqa: F401

__all__ = [
    "Action",
    "Cap",
    "CapCommand",
    "Error",
    "IRCMessage",
    "Identifier",
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
    "UserInfo",
    "cook_irc_message",
    "cook_line",
    "irc_fold_case",
    "mk_id",
    "parse_irc_message",
    "parse_user_info",
    "user_info",
]
