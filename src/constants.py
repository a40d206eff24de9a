"""
Configuration constants for the relay rewrite and rendering core

This module contains the configurable constants used throughout the package.
Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_str(name: str, default: str) -> str:
    """Retrieve a non-empty string value from an environment variable.

    Blank values are treated as unset, logging a warning and falling back to
    the default so a stray ``NAME=`` in the environment cannot disable a
    required identity.

    Args:
        name: The name of the environment variable to read.
        default: The default value to return if the variable is unset or blank.

    Returns:
        The stripped environment value, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        stripped = value.strip()
        if stripped:
            return stripped
        print(f"Warning: Empty value for {name}, using default {default!r}")
    return default


# Relay bridge identity: chat lines from this nick in this channel are
# candidates for unbridging.
RELAY_BRIDGE_NICK = _get_env_str("RELAY_BRIDGE_NICK", "frerelay")
RELAY_BRIDGE_CHANNEL = _get_env_str("RELAY_BRIDGE_CHANNEL", "#dronebl")
RELAY_HOOK_NAME = "frerelay"

# Glyph drawn between message parameters (PING/PONG/numeric/CAP/MODE lines)
RENDER_SEPARATOR = _get_env_str("RENDER_SEPARATOR", "·")
