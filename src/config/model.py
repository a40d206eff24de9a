from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import RELAY_BRIDGE_CHANNEL, RELAY_BRIDGE_NICK
from ..irc.identifier import Identifier, mk_id


class RelayConfig(BaseModel):
    """Identity of the relay bot whose chat lines get unbridged.

    Attributes:
        bridge_nick: Nickname of the relay bot.
        bridge_channel: Channel the relay bot speaks in.
    """

    model_config = ConfigDict(frozen=True)

    bridge_nick: str = Field(default=RELAY_BRIDGE_NICK, min_length=1)
    bridge_channel: str = Field(default=RELAY_BRIDGE_CHANNEL, min_length=1)

    @field_validator("bridge_nick", "bridge_channel", mode="before")
    @classmethod
    def strip_value(cls, v: Any) -> str:
        """Strip surrounding whitespace; values must be strings."""
        if not isinstance(v, str):
            raise ValueError("must be a string")
        return v.strip()

    @field_validator("bridge_nick")
    @classmethod
    def validate_nick(cls, v: str) -> str:
        if " " in v or v.startswith(("#", "&")):
            raise ValueError(f"invalid nickname: {v!r}")
        return v

    @field_validator("bridge_channel")
    @classmethod
    def validate_channel(cls, v: str) -> str:
        """Channel names keep their ``#`` or ``&`` prefix."""
        if " " in v or not v.startswith(("#", "&")):
            raise ValueError(f"invalid channel name: {v!r}")
        return v

    @property
    def nick_id(self) -> Identifier:
        return mk_id(self.bridge_nick)

    @property
    def channel_id(self) -> Identifier:
        return mk_id(self.bridge_channel)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RelayConfig:
        """Create RelayConfig from a dictionary, ignoring unknown keys.

        Args:
            data: Dictionary containing relay configuration data.

        Returns:
            RelayConfig instance.
        """
        known = {k: v for k, v in data.items() if k in cls.model_fields}
        return cls.model_validate(known)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


DEFAULT_RELAY_CONFIG = RelayConfig()
