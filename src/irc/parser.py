"""Raw IRC line parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from .user_info import UserInfo, parse_user_info


@dataclass(frozen=True)
class IRCMessage:
    raw: str
    prefix: UserInfo | None
    command: str | None
    params: tuple[str, ...] = ()
    tags: dict[str, str] = field(default_factory=dict, compare=False)


def parse_irc_message(raw_line: str) -> IRCMessage:
    tags: dict[str, str] = {}
    prefix: UserInfo | None = None
    trailing: str | None = None
    command: str | None = None
    params: list[str] = []

    original = raw_line
    raw_line = raw_line.rstrip("\r\n")

    if raw_line.startswith("@"):
        tags_part, _, raw_line = raw_line.partition(" ")
        tags = _parse_tags(tags_part[1:])

    if raw_line.startswith(":"):
        # Malformed lines may omit the space after the prefix; the whole
        # remainder is then the prefix and there is no command.
        prefix_text, _, raw_line = raw_line[1:].partition(" ")
        prefix = parse_user_info(prefix_text)

    if raw_line.startswith(":"):
        raw_line, trailing = "", raw_line[1:]
    elif " :" in raw_line:
        raw_line, trailing = raw_line.split(" :", 1)

    parts = raw_line.split()
    if parts:
        command = parts[0].upper()
        params.extend(parts[1:])
    if trailing is not None:
        params.append(trailing)

    return IRCMessage(
        raw=original,
        prefix=prefix,
        command=command,
        params=tuple(params),
        tags=tags,
    )


def _parse_tags(raw_tags: str) -> dict[str, str]:
    tags: dict[str, str] = {}
    for tag in raw_tags.split(";"):
        if not tag:
            continue
        k, _, v = tag.partition("=")
        tags[k] = _unescape_tag_value(v)
    return tags


_TAG_ESCAPES = {":": ";", "s": " ", "\\": "\\", "r": "\r", "n": "\n"}


def _unescape_tag_value(value: str) -> str:
    out: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, "")
        out.append(_TAG_ESCAPES.get(nxt, nxt))
    return "".join(out)
