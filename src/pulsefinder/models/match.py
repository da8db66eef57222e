"""Match history models.

Match routes return the match body as a JSON-encoded string inside the
``matchData`` field. ``RawMatchEntry.to_record()`` runs that string through
the repair engine and validates it into a ``MatchData``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pulsefinder import repair
from pulsefinder.exceptions import MalformedPayloadError


class SelectedSponsor(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    tag_name: str | None = Field(default=None, alias="tagName")


class MatchPlayerData(BaseModel):
    """Per-player results within one team of a match."""

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )

    player_id: str = Field(alias="playerId")
    native_platform_id: str | None = Field(default=None, alias="nativePlatformId")
    saved_player_name: str | None = Field(default=None, alias="savedPlayerName")
    selected_banner_catalog_id: str | None = Field(
        default=None, alias="selectedBannerCatalogId"
    )
    saved_sponsor_name: str | None = Field(default=None, alias="savedSponsorName")
    selected_sponsor: SelectedSponsor | None = Field(
        default=None, alias="selectedSponsor"
    )
    is_anonymous_player: bool = Field(default=False, alias="isAnonymousPlayer")
    has_crew_score_earned: bool = Field(default=False, alias="hasCrewScoreEarned")
    teammate_index: int = Field(default=0, alias="teammateIndex")
    num_kills: int = Field(default=0, alias="numKills")
    num_assists: int = Field(default=0, alias="numAssists")
    num_deaths: int = Field(default=0, alias="numDeaths")
    total_damage_done: float = Field(default=0, alias="totalDamageDone")
    current_rank_id: int | None = Field(default=None, alias="currentRankId")
    previous_rank_id: int | None = Field(default=None, alias="previousRankId")
    current_ranked_rating: float | None = Field(
        default=None, alias="currentRankedRating"
    )
    previous_ranked_rating: float | None = Field(
        default=None, alias="previousRankedRating"
    )
    ranked_rating_delta: float | None = Field(default=None, alias="rankedRatingDelta")
    crew_score: float | None = Field(default=None, alias="crewScore")
    crew_id: str | None = Field(default=None, alias="crewId")
    division_id: str | None = Field(default=None, alias="divisionId")
    division_type: int | str | None = Field(default=None, alias="divisionType")
    match_placement_data: list[Any] = Field(
        default_factory=list, alias="matchPlacementData"
    )
    num_ranked_matches: int | None = Field(default=None, alias="numRankedMatches")


class MatchTeamData(BaseModel):
    """Per-team results of a match."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    team_id: str | None = Field(default=None, alias="teamId")
    rounds_played: int = Field(default=0, alias="roundsPlayed")
    rounds_won: int = Field(default=0, alias="roundsWon")
    xp_per_round: float | None = Field(default=None, alias="xpPerRound")
    xp_per_round_won: float | None = Field(default=None, alias="xpPerRoundWon")
    current_rank_id: int | None = Field(default=None, alias="currentRankId")
    previous_rank_id: int | None = Field(default=None, alias="previousRankId")
    current_ranked_rating: float | None = Field(
        default=None, alias="currentRankedRating"
    )
    previous_ranked_rating: float | None = Field(
        default=None, alias="previousRankedRating"
    )
    ranked_rating_delta: float | None = Field(default=None, alias="rankedRatingDelta")
    match_placement_data: list[Any] = Field(
        default_factory=list, alias="matchPlacementData"
    )
    num_ranked_matches: int | None = Field(default=None, alias="numRankedMatches")
    fans_per_round: float | None = Field(default=None, alias="fansPerRound")
    fans_per_round_won: float | None = Field(default=None, alias="fansPerRoundWon")
    player_data: list[MatchPlayerData] = Field(
        default_factory=list, alias="playerData"
    )
    used_team_rank: bool = Field(default=False, alias="bUsedTeamRank")
    is_full_team_in_party: bool = Field(default=False, alias="bIsFullTeamInParty")


class MatchData(BaseModel):
    """Decoded body of a single match."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    match_id: str = Field(alias="matchId")
    queue_name: str | None = Field(default=None, alias="queueName")
    queue_game_mode: str | None = Field(default=None, alias="queueGameMode")
    queue_game_map: str | None = Field(default=None, alias="queueGameMap")
    overtime_type: str | None = Field(default=None, alias="overtimeType")
    region: str | None = None
    is_ranked: bool = Field(default=False, alias="bIsRanked")
    is_abandoned_match: bool = Field(default=False, alias="bIsAbandonedMatch")
    abandoned_player_ids: list[str] = Field(
        default_factory=list, alias="abandonedPlayerIds"
    )
    surrendered_team: int | None = Field(default=None, alias="surrenderedTeam")
    team_data: list[MatchTeamData] = Field(default_factory=list, alias="teamData")

    @classmethod
    def from_raw(cls, raw: str | dict[str, Any]) -> "MatchData":
        """Build a MatchData from an embedded payload string (or decoded dict).

        Raises:
            MalformedPayloadError: If the string cannot be repaired or the
                decoded value does not describe a match.
        """
        data = repair.parse(raw) if isinstance(raw, str) else raw
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            text = raw if isinstance(raw, str) else str(raw)
            raise MalformedPayloadError(f"Invalid match payload: {e}", text) from e

    def player_ids(self) -> list[str]:
        """IDs of every player that appeared in the match."""
        return [
            player.player_id for team in self.team_data for player in team.player_data
        ]


class MatchRecord(BaseModel):
    """A match with its decoded body."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    match_id: str = Field(alias="matchId")
    match_date: str | None = Field(default=None, alias="matchDate")
    match_data: MatchData = Field(alias="matchData")


class RawMatchEntry(BaseModel):
    """A match as returned on the wire, body still encoded as a string."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    match_id: str = Field(alias="matchId")
    match_data: str | dict[str, Any] = Field(alias="matchData")
    match_date: str | None = Field(default=None, alias="matchDate")

    def to_record(self) -> MatchRecord:
        return MatchRecord(
            match_id=self.match_id,
            match_date=self.match_date,
            match_data=MatchData.from_raw(self.match_data),
        )
