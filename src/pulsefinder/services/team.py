"""Team lookups."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from httpx import USE_CLIENT_DEFAULT

from pulsefinder.auth import Auth, RequestTimeout
from pulsefinder.exceptions import NotFoundError
from pulsefinder.models import Team, TeamMember, TeamsForPlayersRequest
from pulsefinder.models.envelope import require_payload
from pulsefinder.services.parsing import (
    extract_list,
    quote_segment,
    validate_record,
    validate_records,
)


class TeamService:
    """Service for team-related API calls."""

    def __init__(self, auth: Auth):
        self._auth = auth

    async def get_team(
        self,
        team_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Team:
        """Get a team by ID.

        Raises:
            NotFoundError: If the team does not exist.
        """
        not_found = f"Team with ID {team_id} not found"
        envelope = await self._auth.get(
            f"/v1/teams/{quote_segment(team_id)}", timeout=timeout
        )
        payload = require_payload(envelope, not_found)
        if isinstance(payload, dict) and "teamId" in payload:
            return validate_record(Team, payload)

        teams = extract_list(payload, "teams")
        if not teams:
            raise NotFoundError(not_found)
        return validate_record(Team, teams[0])

    async def get_team_members(
        self,
        team_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> list[TeamMember]:
        """Get the roster of a team."""
        envelope = await self._auth.get(
            f"/v1/teams/{quote_segment(team_id)}/members", timeout=timeout
        )
        payload = require_payload(envelope, f"Team with ID {team_id} not found")
        return validate_records(TeamMember, extract_list(payload, "members", "players"))

    async def get_team_stats(
        self,
        team_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Any:
        """Get raw statistics for a team."""
        envelope = await self._auth.get(
            f"/v1/teams/{quote_segment(team_id)}/stats", timeout=timeout
        )
        return require_payload(envelope, f"Stats for team {team_id} not found")

    async def get_teams_for_players(
        self,
        player_ids: Iterable[str],
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> list[Team]:
        """Get every team any of the given players belongs to.

        An unknown player simply contributes no teams.
        """
        ids = list(dict.fromkeys(player_ids))
        if not ids:
            return []

        request = TeamsForPlayersRequest(player_ids=ids)
        envelope = await self._auth.post(
            "/v1/teams/by-players",
            request.model_dump(by_alias=True),
            timeout=timeout,
        )
        if not envelope.success or envelope.data is None:
            return []
        return validate_records(Team, extract_list(envelope.payload, "teams"))
