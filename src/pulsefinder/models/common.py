"""Shared value types used across domain models."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

HostType = Literal["game", "social"]
HOST_TYPES: tuple[str, ...] = ("game", "social")


class Platform(str, Enum):
    """Third-party platforms a player account can be linked to."""

    DISCORD = "discord"
    STEAM = "steam"
    TWITCH = "twitch"


class DisplayName(BaseModel):
    """A display name with its disambiguating discriminator."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    display_name: str = Field(alias="displayName")
    discriminator: str | None = None

    def __str__(self) -> str:
        if self.discriminator:
            return f"{self.display_name}#{self.discriminator}"
        return self.display_name


class IdProviderAccount(BaseModel):
    """A platform account linked to a player."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id_provider_type: str = Field(alias="idProviderType")
    account_id: str = Field(alias="accountId")
    provider_display_name: DisplayName | None = Field(
        default=None, alias="providerDisplayName"
    )
