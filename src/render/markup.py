"""mIRC formatting control codes to styled text."""

from __future__ import annotations

from dataclasses import replace
from typing import Protocol

from .styled import DEFAULT_ATTR, Attr, Color, Span, StyledText

__all__ = ["MarkupParser", "MircMarkupParser", "has_control_chars", "is_control"]

BOLD = "\x02"
COLOR = "\x03"
RESET = "\x0f"
REVERSE = "\x16"
ITALIC = "\x1d"
UNDERLINE = "\x1f"

_DIGITS = "0123456789"

# mIRC palette indices 0-15; higher indices are not rendered.
MIRC_COLORS: tuple[Color, ...] = (
    Color.BRIGHT_WHITE,  # white
    Color.BLACK,  # black
    Color.BLUE,  # navy
    Color.GREEN,  # green
    Color.BRIGHT_RED,  # red
    Color.RED,  # brown
    Color.MAGENTA,  # purple
    Color.YELLOW,  # orange
    Color.BRIGHT_YELLOW,  # yellow
    Color.BRIGHT_GREEN,  # light green
    Color.CYAN,  # cyan
    Color.BRIGHT_CYAN,  # light cyan
    Color.BRIGHT_BLUE,  # light blue
    Color.BRIGHT_MAGENTA,  # pink
    Color.BRIGHT_BLACK,  # grey
    Color.WHITE,  # light grey
)


def is_control(ch: str) -> bool:
    """True for C0/C1 control characters and DEL."""
    code = ord(ch)
    return code < 0x20 or 0x7F <= code < 0xA0


def has_control_chars(text: str) -> bool:
    return any(is_control(ch) for ch in text)


class MarkupParser(Protocol):
    def parse(self, text: str) -> StyledText:
        """Interpret inline formatting codes in ``text``."""
        ...


def _mirc_color(digits: str) -> Color | None:
    index = int(digits)
    return MIRC_COLORS[index] if index < len(MIRC_COLORS) else None


def _take_digits(text: str, pos: int) -> tuple[str, int]:
    end = pos
    while end < len(text) and end - pos < 2 and text[end] in _DIGITS:
        end += 1
    return text[pos:end], end


def _caret(ch: str) -> str:
    code = ord(ch)
    if code == 0x7F:
        return "^?"
    return "^" + chr((code & 0x1F) + 0x40)


class MircMarkupParser:
    """Parse mIRC bold/italic/underline/reverse/color codes.

    Control characters that are not formatting codes are shown in caret
    notation (``^A``) in reverse video so they stay visible.
    """

    def parse(self, text: str) -> StyledText:
        spans: list[Span] = []
        attr = DEFAULT_ATTR
        buf: list[str] = []
        pos = 0

        def flush() -> None:
            if buf:
                spans.append(Span("".join(buf), attr))
                buf.clear()

        while pos < len(text):
            ch = text[pos]
            pos += 1
            if not is_control(ch):
                buf.append(ch)
                continue
            flush()
            if ch == BOLD:
                attr = replace(attr, bold=not attr.bold)
            elif ch == ITALIC:
                attr = replace(attr, italic=not attr.italic)
            elif ch == UNDERLINE:
                attr = replace(attr, underline=not attr.underline)
            elif ch == REVERSE:
                attr = replace(attr, reverse=not attr.reverse)
            elif ch == RESET:
                attr = DEFAULT_ATTR
            elif ch == COLOR:
                attr, pos = self._parse_color(text, pos, attr)
            else:
                spans.append(Span(_caret(ch), Attr(reverse=not attr.reverse)))
        flush()
        return StyledText(tuple(spans))

    @staticmethod
    def _parse_color(text: str, pos: int, attr: Attr) -> tuple[Attr, int]:
        fore_digits, pos = _take_digits(text, pos)
        if not fore_digits:
            # A bare color code clears both colors.
            return attr.with_fore(None).with_back(None), pos
        attr = attr.with_fore(_mirc_color(fore_digits))
        if pos + 1 < len(text) and text[pos] == "," and text[pos + 1] in _DIGITS:
            back_digits, pos = _take_digits(text, pos + 1)
            attr = attr.with_back(_mirc_color(back_digits))
        return attr, pos
