"""Identifier coloring."""

from __future__ import annotations

import zlib
from collections.abc import Sequence
from typing import Protocol

from ..irc.identifier import Identifier
from .styled import Color

__all__ = ["ColorProvider", "DEFAULT_NICK_PALETTE", "HashColorProvider"]

DEFAULT_NICK_PALETTE: Sequence[Color] = (
    Color.CYAN,
    Color.MAGENTA,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.BRIGHT_CYAN,
    Color.BRIGHT_MAGENTA,
    Color.BRIGHT_GREEN,
    Color.BRIGHT_BLUE,
)


class ColorProvider(Protocol):
    """Maps an identifier to the color it is displayed in."""

    def color_of(self, identifier: Identifier) -> Color:
        """Return a color that depends only on the folded identifier."""
        ...


class HashColorProvider:
    """Pick a palette entry from a CRC32 of the folded identifier.

    CRC32 is used instead of ``hash()`` because string hashing is salted per
    process and nick colors must stay the same across restarts.
    """

    def __init__(self, palette: Sequence[Color] = DEFAULT_NICK_PALETTE) -> None:
        if not palette:
            raise ValueError("palette must not be empty")
        self.palette = tuple(palette)

    def color_of(self, identifier: Identifier) -> Color:
        digest = zlib.crc32(identifier.folded.encode("utf-8"))
        return self.palette[digest % len(self.palette)]
