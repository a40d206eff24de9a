"""Styled terminal text.

``StyledText`` is an immutable run of ``Span`` values that concatenate
horizontally. Construction normalizes the spans (empty spans dropped,
neighbours with equal attributes merged) so two values compare equal exactly
when a terminal would show the same thing.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

__all__ = ["Attr", "Color", "DEFAULT_ATTR", "EMPTY", "Span", "StyledText", "cat", "styled"]


class Color(Enum):
    """The sixteen standard terminal colors, valued by ANSI foreground code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97


@dataclass(frozen=True, slots=True)
class Attr:
    """Display attributes of a span. ``None`` colors use the terminal default."""

    fore: Color | None = None
    back: Color | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    reverse: bool = False

    def with_fore(self, color: Color | None) -> Attr:
        return replace(self, fore=color)

    def with_back(self, color: Color | None) -> Attr:
        return replace(self, back=color)

    def sgr(self) -> str:
        """ANSI select-graphic-rendition sequence for these attributes."""
        codes: list[str] = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.underline:
            codes.append("4")
        if self.reverse:
            codes.append("7")
        if self.fore is not None:
            codes.append(str(self.fore.value))
        if self.back is not None:
            codes.append(str(self.back.value + 10))
        return f"\x1b[{';'.join(codes)}m" if codes else ""


DEFAULT_ATTR = Attr()

_RESET = "\x1b[0m"


@dataclass(frozen=True, slots=True)
class Span:
    text: str
    attr: Attr = DEFAULT_ATTR


def _normalize(spans: Iterable[Span]) -> tuple[Span, ...]:
    out: list[Span] = []
    for span in spans:
        if not span.text:
            continue
        if out and out[-1].attr == span.attr:
            out[-1] = Span(out[-1].text + span.text, span.attr)
        else:
            out.append(span)
    return tuple(out)


@dataclass(frozen=True, slots=True)
class StyledText:
    spans: tuple[Span, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "spans", _normalize(self.spans))

    def __add__(self, other: StyledText) -> StyledText:
        if not isinstance(other, StyledText):
            return NotImplemented
        return StyledText(self.spans + other.spans)

    def __bool__(self) -> bool:
        return bool(self.spans)

    def __len__(self) -> int:
        return sum(len(span.text) for span in self.spans)

    @property
    def plain(self) -> str:
        return "".join(span.text for span in self.spans)

    def to_ansi(self) -> str:
        """Render as a string with ANSI escape sequences."""
        parts: list[str] = []
        for span in self.spans:
            sgr = span.attr.sgr()
            parts.append(f"{sgr}{span.text}{_RESET}" if sgr else span.text)
        return "".join(parts)


EMPTY = StyledText()


def styled(text: str, attr: Attr = DEFAULT_ATTR) -> StyledText:
    return StyledText((Span(text, attr),))


def cat(parts: Iterable[StyledText]) -> StyledText:
    """Concatenate styled texts left to right."""
    spans: list[Span] = []
    for part in parts:
        spans.extend(part.spans)
    return StyledText(tuple(spans))
