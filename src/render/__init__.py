"""Message rendering package.

Provides:
 - StyledText / Span / Attr / Color styled-text values
 - HashColorProvider identifier coloring
 - MircMarkupParser formatting-code parser
 - MessageRenderer and the render / msg_image / detailed_msg_image helpers
"""

from .colors import ColorProvider, HashColorProvider
from .markup import MarkupParser, MircMarkupParser
from .message import (
    DEFAULT_RENDER_PARAMS,
    ErrorBody,
    ExitBody,
    MessageBody,
    MessageRenderer,
    RenderMode,
    RenderParams,
    detailed_msg_image,
    ignore_image,
    metadata_img,
    msg_image,
    quiet_identifier,
    render,
)
from .styled import EMPTY, Attr, Color, Span, StyledText, cat, styled

__all__ = [
    "Attr",
    "Color",
    "ColorProvider",
    "DEFAULT_RENDER_PARAMS",
    "EMPTY",
    "ErrorBody",
    "ExitBody",
    "HashColorProvider",
    "MarkupParser",
    "MessageBody",
    "MessageRenderer",
    "MircMarkupParser",
    "RenderMode",
    "RenderParams",
    "Span",
    "StyledText",
    "cat",
    "detailed_msg_image",
    "ignore_image",
    "metadata_img",
    "msg_image",
    "quiet_identifier",
    "render",
    "styled",
]
