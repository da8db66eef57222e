"""Crew and division models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pulsefinder.models.common import IdProviderAccount

# =============================================================================
# Division
# =============================================================================


class Division(BaseModel):
    """A league division that crews compete in."""

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )

    division_id: str = Field(alias="divisionId")
    division_name: str | None = Field(default=None, alias="divisionName")
    division_type: str | None = Field(default=None, alias="divisionType")


# =============================================================================
# Crew
# =============================================================================


class StarPlayers(BaseModel):
    """Player IDs holding a crew's star slots."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    mvp: str | None = Field(default=None, alias="MVP")
    rising: str | None = Field(default=None, alias="RISING")
    legend: str | None = Field(default=None, alias="LEGEND")


class CrewData(BaseModel):
    """A crew and its season record."""

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )

    crew_id: str = Field(alias="crewId")
    crew_name: str | None = Field(default=None, alias="crewName")
    status: str | None = None
    star_players: StarPlayers | None = Field(default=None, alias="starPlayers")
    roster: list[Any] = Field(default_factory=list)
    crew_total_score: str | None = Field(default=None, alias="crewTotalScore")
    home_turf: str | None = Field(default=None, alias="homeTurf")
    spotlight_start_hour: int | None = Field(default=None, alias="spotlightStartHour")
    spotlight_duration_time_minutes: str | None = Field(
        default=None, alias="spotlightDurationTimeMinutes"
    )
    created_date: str | None = Field(default=None, alias="createdDate")
    updated_date: str | None = Field(default=None, alias="updatedDate")
    promotions_count: int | None = Field(default=None, alias="promotionsCount")
    relegations_count: int | None = Field(default=None, alias="relegationsCount")
    record_score: str | None = Field(default=None, alias="recordScore")
    first_place_count: int | None = Field(default=None, alias="firstPlaceCount")
    last_place_count: int | None = Field(default=None, alias="lastPlaceCount")
    league_champion_count: int | None = Field(
        default=None, alias="leagueChampionCount"
    )
    eligibility_key: dict[str, Any] | None = Field(
        default=None, alias="eligibilityKey"
    )


class CrewPlayer(BaseModel):
    """A member of a crew roster."""

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )

    player_id: str = Field(alias="playerId")
    player_points: str | None = Field(default=None, alias="playerPoints")
    lifetime_points: str | None = Field(default=None, alias="lifetimePoints")
    last_joined_crew_date: str | None = Field(default=None, alias="lastJoinedCrewDate")
    steam_account: IdProviderAccount | None = Field(
        default=None, alias="steamIdProviderAccount"
    )


class CrewRoster(BaseModel):
    """Roster of a crew with its league placement."""

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )

    players: list[CrewPlayer] = Field(default_factory=list)
    star_players: StarPlayers | None = Field(default=None, alias="starPlayers")
    home_turf: str | None = Field(default=None, alias="homeTurf")
    spotlight_start_hour: int | None = Field(default=None, alias="spotlightStartHour")
    spotlight_duration_time_minutes: str | None = Field(
        default=None, alias="spotlightDurationTimeMinutes"
    )
    division: Division | None = Field(default=None, alias="divisionId")
    division_rules: dict[str, Any] | None = Field(default=None, alias="divisionRules")
    next_automation_date: str | None = Field(default=None, alias="nextAutomationDate")
    league_info: dict[str, Any] | None = Field(default=None, alias="leagueInfo")
