"""Sender identity carried by IRC messages."""

from __future__ import annotations

from dataclasses import dataclass

from .identifier import Identifier, mk_id

__all__ = ["UserInfo", "parse_user_info", "user_info"]


@dataclass(frozen=True, slots=True)
class UserInfo:
    """Message source in ``nick!user@host`` form.

    Attributes:
        nick: Nickname (or server name for server-originated messages).
        user: Username part, ``None`` when unknown.
        host: Hostname part, ``None`` when unknown.
    """

    nick: Identifier
    user: str | None = None
    host: str | None = None

    def render(self) -> str:
        out = self.nick.text
        if self.user is not None:
            out += f"!{self.user}"
        if self.host is not None:
            out += f"@{self.host}"
        return out


def parse_user_info(prefix: str) -> UserInfo:
    """Split a message prefix into its nick, user and host parts.

    Missing parts are left as ``None``; the nick part is whatever precedes the
    first ``!`` or ``@``, even when empty.
    """
    rest, at, host = prefix.partition("@")
    nick, bang, user = rest.partition("!")
    return UserInfo(
        nick=mk_id(nick),
        user=user if bang else None,
        host=host if at else None,
    )


def user_info(nick: str) -> UserInfo:
    """Placeholder identity used when only the nickname is known."""
    return UserInfo(mk_id(nick), "*", "*")
