r"""
Logging configuration for applications embedding the relay/render core.

Provides a configurable root logging setup using the colorlog library.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

import colorlog

from .logs.logger import logger as event_logger

LOG_FORMAT = "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s"


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, config: dict[str, Any] | None = None, stream: TextIO | None = None):
        """Initialize the configurator.

        Args:
            config: Optional overrides; ``level`` forces a log level.
            stream: Output stream, stderr by default.
        """
        self.config = config or {}
        self.stream = stream

    def resolve_level(self) -> int:
        """Level from ``config['level']``, else DEBUG when ``DEBUG`` is truthy."""
        level = self.config.get("level")
        if isinstance(level, int):
            return level
        if isinstance(level, str) and level.upper() in logging.getLevelNamesMapping():
            return logging.getLevelNamesMapping()[level.upper()]
        debug_env = os.environ.get("DEBUG", "").lower()
        return logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

    def configure(self) -> int:
        """Install a colored handler on the root logger and the event logger.

        Returns:
            The effective log level.
        """
        log_level = self.resolve_level()
        formatter = self.build_formatter()

        handler = logging.StreamHandler(self.stream or sys.stderr)
        handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)

        # The event logger keeps its own handlers; restyle them to match.
        for h in event_logger.logger.handlers:
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler):
                h.setFormatter(formatter)
        event_logger.set_level(log_level)

        event_logger.log_event(
            "app",
            "logging_configured",
            level=logging.DEBUG,
            level_name=logging.getLevelName(log_level),
        )
        return log_level
