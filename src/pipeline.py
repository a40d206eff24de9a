"""Inbound message pipeline: hooks first, then rendering."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from .hooks.hook import MessageHook, run_hooks
from .irc.cook import cook_line
from .irc.message import ProtocolMessage
from .render.message import (
    DEFAULT_RENDER_PARAMS,
    MessageRenderer,
    RenderMode,
    RenderParams,
)
from .render.styled import StyledText

__all__ = ["MessagePipeline"]


class MessagePipeline:
    """Run inbound messages through hooks and render the survivors.

    Holds no per-message state, so one instance can serve every window.
    """

    def __init__(
        self,
        hooks: Sequence[MessageHook] = (),
        renderer: MessageRenderer | None = None,
    ) -> None:
        self.hooks = tuple(hooks)
        self.renderer = renderer or MessageRenderer()

    def rewrite(self, msg: ProtocolMessage) -> ProtocolMessage | None:
        return run_hooks(self.hooks, msg)

    def process(
        self,
        when: datetime,
        msg: ProtocolMessage,
        params: RenderParams = DEFAULT_RENDER_PARAMS,
        mode: RenderMode = RenderMode.NORMAL,
    ) -> StyledText | None:
        """Rewrite then render ``msg``; ``None`` when a hook dropped it."""
        rewritten = self.rewrite(msg)
        if rewritten is None:
            return None
        return self.renderer.render(when, params, rewritten, mode)

    def process_line(
        self,
        when: datetime,
        raw_line: str,
        params: RenderParams = DEFAULT_RENDER_PARAMS,
        mode: RenderMode = RenderMode.NORMAL,
    ) -> StyledText | None:
        return self.process(when, cook_line(raw_line), params, mode)
