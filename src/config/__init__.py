"""Configuration package exports."""

from .model import DEFAULT_RELAY_CONFIG, RelayConfig

__all__ = [
    "DEFAULT_RELAY_CONFIG",
    "RelayConfig",
]
