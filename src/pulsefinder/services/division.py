"""Division lookups."""

from __future__ import annotations

from typing import Any

from httpx import USE_CLIENT_DEFAULT

from pulsefinder.auth import Auth, RequestTimeout
from pulsefinder.models import CrewData, Division
from pulsefinder.models.envelope import require_payload
from pulsefinder.services.parsing import (
    extract_list,
    extract_object,
    quote_segment,
    validate_record,
    validate_records,
)


class DivisionService:
    """Service for division-related API calls."""

    def __init__(self, auth: Auth):
        self._auth = auth

    async def get_division(
        self,
        division_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Division:
        """Get a division by ID."""
        return await self._get_division(
            f"/v1/divisions/{quote_segment(division_id)}",
            f"Division with ID {division_id} not found",
            timeout,
        )

    async def get_division_teams(
        self,
        division_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> list[CrewData]:
        """Get the crews competing in a division."""
        envelope = await self._auth.get(
            f"/v1/divisions/{quote_segment(division_id)}/teams", timeout=timeout
        )
        payload = require_payload(envelope, f"Division with ID {division_id} not found")
        return validate_records(CrewData, extract_list(payload, "crews", "teams"))

    async def get_division_standings(
        self,
        division_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Any:
        """Get the raw standings table of a division."""
        envelope = await self._auth.get(
            f"/v1/divisions/{quote_segment(division_id)}/standings", timeout=timeout
        )
        return require_payload(
            envelope, f"Standings for division {division_id} not found"
        )

    async def get_player_division(
        self,
        player_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Division:
        """Get the division a player competes in."""
        return await self._get_division(
            f"/v1/divisions/player/{quote_segment(player_id)}",
            f"No division found for player {player_id}",
            timeout,
        )

    async def get_crew_division(
        self,
        crew_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Division:
        """Get the division a crew competes in."""
        return await self._get_division(
            f"/v1/divisions/crew/{quote_segment(crew_id)}",
            f"No division found for crew {crew_id}",
            timeout,
        )

    async def _get_division(
        self, path: str, not_found: str, timeout: RequestTimeout
    ) -> Division:
        envelope = await self._auth.get(path, timeout=timeout)
        payload = require_payload(envelope, not_found)
        return validate_record(Division, extract_object(payload, "divisionData"))
