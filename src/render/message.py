"""Renderer for message lines.

Turns a cooked ``ProtocolMessage`` (or one of the client-side bodies below)
into a single line of ``StyledText``:

    [timestamp] [(status sigils) ] body

Rendering is total; every variant has an image, and missing optional fields
(user, host, reason) are left out rather than drawn as placeholders.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import assert_never

from ..constants import RENDER_SEPARATOR
from ..irc.identifier import Identifier, mk_id
from ..irc.message import (
    Action,
    Cap,
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
from ..irc.user_info import UserInfo
from .colors import ColorProvider, HashColorProvider
from .markup import MarkupParser, MircMarkupParser, has_control_chars
from .styled import DEFAULT_ATTR, EMPTY, Attr, Color, StyledText, cat, styled

__all__ = [
    "DEFAULT_RENDER_PARAMS",
    "ErrorBody",
    "ExitBody",
    "MessageBody",
    "MessageRenderer",
    "RenderMode",
    "RenderParams",
    "detailed_msg_image",
    "ignore_image",
    "metadata_img",
    "msg_image",
    "nick_split",
    "render",
]


class RenderMode(Enum):
    NORMAL = "normal"  # only render nicknames
    DETAILED = "detailed"  # render full user info and verb labels


@dataclass(frozen=True, slots=True)
class RenderParams:
    """Per-line rendering parameters.

    Attributes:
        status_sigils: Sigils restricting who saw the message (``@#chan``).
        sender_sigils: Channel privileges of the sender (``@``, ``+``).
        highlight_nicks: Nicknames to color inside chat text.
    """

    status_sigils: str = ""
    sender_sigils: str = ""
    highlight_nicks: frozenset[Identifier] = frozenset()


DEFAULT_RENDER_PARAMS = RenderParams()


@dataclass(frozen=True, slots=True)
class ErrorBody:
    """Exception raised by a connection thread, shown in its window."""

    exception: BaseException


@dataclass(frozen=True, slots=True)
class ExitBody:
    """Marker line written when a connection thread finishes."""


MessageBody = ProtocolMessage | ErrorBody | ExitBody

QUIET_ATTR = Attr(fore=Color.BRIGHT_BLACK)
SIGIL_ATTR = Attr(fore=Color.CYAN)
ACCENT_ATTR = Attr(fore=Color.BLUE)
ALERT_ATTR = Attr(fore=Color.RED)
POSITIVE_ATTR = Attr(fore=Color.GREEN)
NOTICE_ATTR = Attr(fore=Color.YELLOW)

# Runs of characters valid in nicknames, and the runs between them.
_NICK_SPLIT_RE = re.compile(r"[A-Za-z0-9\-_\[\]\\`^{}|]+|[^A-Za-z0-9\-_\[\]\\`^{}|]+")


def nick_split(text: str) -> list[str]:
    """Split ``text`` into alternating nickname-like and separator runs.

    The split is lossless: ``"".join(nick_split(t)) == t``.
    """
    return _NICK_SPLIT_RE.findall(text)


def time_image(when: datetime) -> StyledText:
    """``23:15 ``"""
    return styled(when.strftime("%H:%M "), QUIET_ATTR)


def datetime_image(when: datetime) -> StyledText:
    """``2016-07-24 23:15:10 ``"""
    return styled(when.strftime("%Y-%m-%d %H:%M:%S "), QUIET_ATTR)


def status_msg_image(sigils: str) -> StyledText:
    if not sigils:
        return EMPTY
    return styled("(") + styled(sigils, ALERT_ATTR) + styled(") ")


def metadata_img(msg: ProtocolMessage) -> tuple[StyledText, Identifier | None] | None:
    """Image and identifier used when collapsing metadata lines.

    Only joins, parts, quits and nick changes collapse; everything else
    returns ``None``.
    """
    match msg:
        case Quit(who=who):
            return styled("x", ALERT_ATTR), who.nick
        case Part(who=who):
            return styled("-", ALERT_ATTR), who.nick
        case Join(who=who):
            return styled("+", POSITIVE_ATTR), who.nick
        case Nick(old=old, new=new):
            image = quiet_identifier(old.nick) + styled("-", NOTICE_ATTR) + quiet_identifier(new)
            return image, None
        case _:
            return None


def ignore_image() -> StyledText:
    """Image used when an ignored chat message is shown as metadata."""
    return styled("I", NOTICE_ATTR)


def quiet_identifier(ident: Identifier) -> StyledText:
    """Identifier without its hash color, for metadata."""
    return styled(ident.text, QUIET_ATTR)


class MessageRenderer:
    """Message renderer bound to a color provider and a markup parser."""

    def __init__(
        self,
        colors: ColorProvider | None = None,
        markup: MarkupParser | None = None,
    ) -> None:
        self.colors = colors if colors is not None else HashColorProvider()
        self.markup = markup if markup is not None else MircMarkupParser()

    def render(
        self,
        when: datetime,
        params: RenderParams,
        body: MessageBody,
        mode: RenderMode = RenderMode.NORMAL,
    ) -> StyledText:
        stamp = datetime_image(when) if mode is RenderMode.DETAILED else time_image(when)
        return cat(
            [
                stamp,
                status_msg_image(params.status_sigils),
                self.body_image(mode, params.sender_sigils, params.highlight_nicks, body),
            ]
        )

    def body_image(
        self,
        mode: RenderMode,
        sigils: str,
        nicks: Iterable[Identifier],
        body: MessageBody,
    ) -> StyledText:
        if isinstance(body, ErrorBody):
            return styled(f"Exception: {body.exception!r}")
        if isinstance(body, ExitBody):
            return styled("Thread finished")
        return self.irc_line_image(mode, sigils, nicks, body)

    def irc_line_image(  # noqa: C901
        self,
        mode: RenderMode,
        sigils: str,
        nicks: Iterable[Identifier],
        msg: ProtocolMessage,
    ) -> StyledText:
        def detail(label: str) -> StyledText:
            if mode is RenderMode.DETAILED:
                return styled(label, QUIET_ATTR)
            return EMPTY

        sigil_img = styled(sigils, SIGIL_ATTR)
        user_img = self.colored_user_info

        match msg:
            case Nick(old=old, new=new):
                return cat(
                    [
                        detail("nick "),
                        sigil_img,
                        user_img(mode, old),
                        styled(" became "),
                        self.colored_identifier(new),
                    ]
                )
            case Join(who=src):
                return styled("join ", QUIET_ATTR) + user_img(mode, src)
            case Part(who=src, reason=reason):
                return styled("part ", QUIET_ATTR) + user_img(mode, src) + self._reason_image(reason)
            case Quit(who=src, reason=reason):
                return styled("quit ", QUIET_ATTR) + user_img(mode, src) + self._reason_image(reason)
            case Kick(kicker=kicker, kickee=kickee, reason=reason):
                return cat(
                    [
                        detail("kick "),
                        sigil_img,
                        user_img(mode, kicker),
                        styled(" kicked "),
                        self.colored_identifier(kickee),
                        styled(": "),
                        self.parsed_text(reason),
                    ]
                )
            case Topic(src=src, text=text):
                return user_img(mode, src) + styled(" changed topic to ") + self.parsed_text(text)
            case Notice(src=src, text=text):
                return cat(
                    [
                        detail("note "),
                        sigil_img,
                        user_img(mode, src),
                        styled(": ", ALERT_ATTR),
                        self.parsed_text_with_highlight(nicks, text),
                    ]
                )
            case Privmsg(src=src, text=text):
                return cat(
                    [
                        detail("chat "),
                        sigil_img,
                        user_img(mode, src),
                        styled(": "),
                        self.parsed_text_with_highlight(nicks, text),
                    ]
                )
            case Action(src=src, text=text):
                return cat(
                    [
                        detail("chat "),
                        styled("* ", ACCENT_ATTR),
                        sigil_img,
                        user_img(mode, src),
                        styled(" "),
                        self.parsed_text_with_highlight(nicks, text),
                    ]
                )
            case Ping(params=params):
                return styled("PING") + self._separated(self.parsed_text(p) for p in params)
            case Pong(params=params):
                return styled("PONG") + self._separated(self.parsed_text(p) for p in params)
            case Error(reason=reason):
                return styled("ERROR ", ALERT_ATTR) + self.parsed_text(reason)
            case Reply(code=code, params=params):
                return styled(f"{code:03d}") + self._separated(self.parsed_text(p) for p in params)
            case UnknownMsg(prefix=prefix, command=command, params=params):
                prefix_img = EMPTY if prefix is None else user_img(mode, prefix) + styled(" ")
                return cat(
                    [
                        prefix_img,
                        styled(command),
                        self._separated(self.parsed_text(p) for p in params),
                    ]
                )
            case Cap(cmd=cmd, args=args):
                return styled(cmd.value) + self._separated(styled(a) for a in args)
            case Mode(who=src, params=params):
                return cat(
                    [
                        detail("mode "),
                        sigil_img,
                        user_img(mode, src),
                        styled(" set mode: "),
                        self._interspersed(styled(p) for p in params),
                    ]
                )
            case _:
                assert_never(msg)

    def colored_identifier(self, ident: Identifier) -> StyledText:
        """Render a nickname in its hash-based color."""
        return styled(ident.text, DEFAULT_ATTR.with_fore(self.colors.color_of(ident)))

    def colored_user_info(self, mode: RenderMode, who: UserInfo) -> StyledText:
        """Render a user; detailed mode adds the ``!user@host`` parts."""
        nick = self.colored_identifier(who.nick)
        if mode is RenderMode.NORMAL:
            return nick
        parts = [nick]
        if who.user is not None:
            parts.append(styled("!") + styled(who.user, QUIET_ATTR))
        if who.host is not None:
            parts.append(styled("@") + styled(who.host, QUIET_ATTR))
        return cat(parts)

    def parsed_text(self, text: str) -> StyledText:
        return self.markup.parse(text)

    def parsed_text_with_highlight(self, nicks: Iterable[Identifier], text: str) -> StyledText:
        """Parse formatted text, or highlight known nicknames in plain text.

        Text carrying any control character is handed to the markup parser
        untouched; only plain text gets nickname highlighting.
        """
        if has_control_chars(text):
            return self.parsed_text(text)
        return self.highlight_nicks(nicks, text)

    def highlight_nicks(self, nicks: Iterable[Identifier], text: str) -> StyledText:
        nick_set = frozenset(nicks)
        parts: list[StyledText] = []
        for part in nick_split(text):
            part_id = mk_id(part)
            if part_id in nick_set:
                parts.append(self.colored_identifier(part_id))
            else:
                parts.append(styled(part))
        return cat(parts)

    def _reason_image(self, reason: str | None) -> StyledText:
        if reason is None:
            return EMPTY
        return styled(" (", QUIET_ATTR) + self.parsed_text(reason) + styled(")", QUIET_ATTR)

    @staticmethod
    def _separated(images: Iterable[StyledText]) -> StyledText:
        sep = styled(RENDER_SEPARATOR, ACCENT_ATTR)
        return cat(sep + image for image in images)

    @staticmethod
    def _interspersed(images: Iterable[StyledText]) -> StyledText:
        sep = styled(RENDER_SEPARATOR, ACCENT_ATTR)
        parts: list[StyledText] = []
        for image in images:
            if parts:
                parts.append(sep)
            parts.append(image)
        return cat(parts)


_DEFAULT_RENDERER = MessageRenderer()


def render(
    when: datetime,
    params: RenderParams,
    body: MessageBody,
    mode: RenderMode = RenderMode.NORMAL,
    *,
    renderer: MessageRenderer | None = None,
) -> StyledText:
    """Render one message line with the default collaborators unless given."""
    return (renderer or _DEFAULT_RENDERER).render(when, params, body, mode)


def msg_image(when: datetime, params: RenderParams, body: MessageBody) -> StyledText:
    return render(when, params, body, RenderMode.NORMAL)


def detailed_msg_image(when: datetime, params: RenderParams, body: MessageBody) -> StyledText:
    return render(when, params, body, RenderMode.DETAILED)
