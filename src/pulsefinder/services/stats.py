"""Statistics and leaderboard lookups.

These routes return loosely structured payloads, so results are handed back
as decoded JSON rather than typed records.
"""

from __future__ import annotations

from typing import Any

from httpx import USE_CLIENT_DEFAULT

from pulsefinder.auth import Auth, RequestTimeout
from pulsefinder.models.envelope import require_payload
from pulsefinder.services.parsing import quote_segment

DEFAULT_START_RANK = 1
DEFAULT_LEADERBOARD_COUNT = 100


class StatsService:
    """Service for statistics and leaderboard API calls."""

    def __init__(self, auth: Auth):
        self._auth = auth

    async def get_player_stats(
        self,
        player_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Any:
        """Get statistics for a player (GET /v1/players/{id}/stats)."""
        envelope = await self._auth.get(
            f"/v1/players/{quote_segment(player_id)}/stats", timeout=timeout
        )
        return require_payload(envelope, f"Stats for player {player_id} not found")

    async def get_team_stats(
        self,
        team_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Any:
        """Get statistics for a team (GET /v1/teams/{id}/stats)."""
        envelope = await self._auth.get(
            f"/v1/teams/{quote_segment(team_id)}/stats", timeout=timeout
        )
        return require_payload(envelope, f"Stats for team {team_id} not found")

    async def get_leaderboard(
        self,
        leaderboard_id: str,
        start_rank: int = DEFAULT_START_RANK,
        count: int = DEFAULT_LEADERBOARD_COUNT,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Any:
        """Get one page of a leaderboard.

        Args:
            leaderboard_id: Leaderboard to read.
            start_rank: First rank to return (1-based).
            count: Number of entries to return.
            timeout: Per-call timeout passed through to the transport.

        Raises:
            ValueError: If start_rank or count is below 1.
        """
        if start_rank < 1:
            raise ValueError("start_rank must be at least 1")
        if count < 1:
            raise ValueError("count must be at least 1")

        envelope = await self._auth.get(
            f"/v1/leaderboards/{quote_segment(leaderboard_id)}",
            params={"startRank": start_rank, "count": count},
            timeout=timeout,
        )
        return require_payload(envelope, f"Leaderboard {leaderboard_id} not found")

    async def get_player_leaderboard_rank(
        self,
        leaderboard_id: str,
        player_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Any:
        """Get a player's position on a leaderboard."""
        envelope = await self._auth.get(
            f"/v1/leaderboards/{quote_segment(leaderboard_id)}"
            f"/player/{quote_segment(player_id)}",
            timeout=timeout,
        )
        return require_payload(
            envelope, f"Player {player_id} not ranked on leaderboard {leaderboard_id}"
        )
