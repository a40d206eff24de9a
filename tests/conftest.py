from __future__ import annotations

from datetime import datetime

import pytest

from src.irc.identifier import Identifier
from src.render.message import MessageRenderer
from src.render.styled import Color, StyledText, styled


class FixedColorProvider:
    """Every identifier gets the same color, keeping expected images short."""

    def __init__(self, color: Color = Color.MAGENTA) -> None:
        self.color = color

    def color_of(self, identifier: Identifier) -> Color:
        return self.color


class RecordingMarkupParser:
    """Markup parser stand-in that records its input and returns it unstyled."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def parse(self, text: str) -> StyledText:
        self.calls.append(text)
        return styled(text)


@pytest.fixture
def when() -> datetime:
    return datetime(2016, 7, 24, 23, 15, 10)


@pytest.fixture
def markup() -> RecordingMarkupParser:
    return RecordingMarkupParser()


@pytest.fixture
def renderer(markup: RecordingMarkupParser) -> MessageRenderer:
    return MessageRenderer(colors=FixedColorProvider(), markup=markup)
