"""Player profile and identity models."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from pulsefinder.models.common import DisplayName, IdProviderAccount

# =============================================================================
# Profiles
# =============================================================================


class Banner(BaseModel):
    """Cosmetic banner equipped on a profile."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    item_instance_id: str | None = Field(default=None, alias="itemInstanceId")
    item_type: str | None = Field(default=None, alias="itemType")
    alteration_data: Any = Field(default=None, alias="alterationData")
    attachment_item_instance_id: str | None = Field(
        default=None, alias="attachmentItemInstanceId"
    )
    item_catalog_id: str | None = Field(default=None, alias="itemCatalogId")
    attachment_item_catalog_id: str | None = Field(
        default=None, alias="attachmentItemCatalogId"
    )


class ProfileData(BaseModel):
    """Public profile of a single player.

    The bulk route reports the ID as ``playerId``; older routes use ``id``.
    Both are accepted.
    """

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )

    player_id: str = Field(
        validation_alias=AliasChoices("playerId", "id"), serialization_alias="playerId"
    )
    display_name: DisplayName | None = Field(default=None, alias="displayName")
    banner: Banner | None = None
    crew_id: str | None = Field(default=None, alias="crewId")
    crew_score: str | None = Field(default=None, alias="crewScore")
    current_solo_rank: int | None = Field(default=None, alias="currentSoloRank")
    highest_team_rank: int | None = Field(default=None, alias="highestTeamRank")
    division_type: str | None = Field(default=None, alias="divisionType")


class BulkProfileRequest(BaseModel):
    """Request body for POST /v1/players/profiles/bulk."""

    model_config = ConfigDict(populate_by_name=True)

    player_ids: list[str] = Field(alias="playerIds")


# =============================================================================
# Platform search
# =============================================================================


class SearchByPlatformRequest(BaseModel):
    """Request body for POST /v1/players/search-by-platform."""

    model_config = ConfigDict(populate_by_name=True)

    platform: str
    account_id: str = Field(alias="accountId")


class PlayerIdentity(BaseModel):
    """A player identity resolved from a platform account."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    player_id: str = Field(alias="pragmaPlayerId")
    display_name: DisplayName | None = Field(default=None, alias="pragmaDisplayName")
    id_provider_accounts: list[IdProviderAccount] = Field(
        default_factory=list, alias="idProviderAccounts"
    )
    social_id: str | None = Field(default=None, alias="pragmaSocialId")

    def has_account(self, platform: str, account_id: str) -> bool:
        """Whether this identity is linked to the given platform account."""
        return any(
            account.id_provider_type.lower() == platform.lower()
            and account.account_id == account_id
            for account in self.id_provider_accounts
        )
