"""Case-insensitive IRC identifiers (nicknames and channel names)."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Identifier", "irc_fold_case", "mk_id"]

# RFC 1459 casemapping: the four punctuation characters are the "upper case"
# forms of {}|^.
_RFC1459_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ[]\\~",
    "abcdefghijklmnopqrstuvwxyz{}|^",
)


def irc_fold_case(text: str) -> str:
    """Return the RFC 1459 case-folded form of ``text``."""
    return text.translate(_RFC1459_FOLD)


@dataclass(frozen=True, slots=True)
class Identifier:
    """A nickname or channel name.

    The original spelling is kept in ``text`` for display; equality and
    hashing only look at the folded form, so ``Identifier("Bob[m]")`` equals
    ``Identifier("bob{m}")``.
    """

    text: str = field(compare=False)
    folded: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "folded", irc_fold_case(self.text))

    def __str__(self) -> str:
        return self.text


def mk_id(text: str) -> Identifier:
    return Identifier(text)
