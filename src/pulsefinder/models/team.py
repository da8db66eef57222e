"""Team models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pulsefinder import repair


class TeamMember(BaseModel):
    """A player on a team roster."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    player_id: str = Field(alias="playerId")
    player_name: str | None = Field(default=None, alias="playerName")


class Team(BaseModel):
    """A persistent team of players.

    ``team_data`` is a raw JSON string as sent by the backend; use
    ``parsed_team_data()`` to decode it.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    team_id: str = Field(alias="teamId")
    player_ids: list[str] = Field(default_factory=list, alias="playerIds")
    team_data: str | None = Field(default=None, alias="teamData")
    team_name: str | None = Field(default=None, alias="teamName")
    team_size: int | None = Field(default=None, alias="teamSize")
    casual_mmr: float | None = Field(default=None, alias="casualMmr")
    ranked_mmr: float | None = Field(default=None, alias="rankedMmr")
    team_rank_points: float | None = Field(default=None, alias="teamRankPoints")
    casual_matches_played_count: int | None = Field(
        default=None, alias="casualMatchesPlayedCount"
    )
    ranked_matches_played_count: int | None = Field(
        default=None, alias="rankedMatchesPlayedCount"
    )
    casual_matches_played_season_count: int | None = Field(
        default=None, alias="casualMatchesPlayedSeasonCount"
    )
    ranked_matches_played_season_count: int | None = Field(
        default=None, alias="rankedMatchesPlayedSeasonCount"
    )
    ranked_placement_matches: list[Any] = Field(
        default_factory=list, alias="rankedPlacementMatches"
    )
    current_team_rank: int | None = Field(default=None, alias="currentTeamRank")
    last_played: str | None = Field(default=None, alias="lastPlayed")
    created_date: str | None = Field(default=None, alias="createdDate")
    updated_date: str | None = Field(default=None, alias="updatedDate")

    def parsed_team_data(self) -> Any:
        """Decode the embedded ``teamData`` string, or None when absent.

        Raises:
            MalformedPayloadError: If the string cannot be repaired.
        """
        if not self.team_data:
            return None
        return repair.parse(self.team_data)


class TeamsForPlayersRequest(BaseModel):
    """Request body for POST /v1/teams/by-players."""

    model_config = ConfigDict(populate_by_name=True)

    player_ids: list[str] = Field(alias="playerIds")
