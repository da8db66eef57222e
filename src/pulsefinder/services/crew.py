"""Crew lookups."""

from __future__ import annotations

from typing import Any

from httpx import USE_CLIENT_DEFAULT

from pulsefinder.auth import Auth, RequestTimeout
from pulsefinder.exceptions import NotFoundError
from pulsefinder.models import CrewData, CrewRoster
from pulsefinder.models.envelope import require_payload
from pulsefinder.services.parsing import (
    extract_object,
    quote_segment,
    validate_record,
)


class CrewService:
    """Service for crew-related API calls."""

    def __init__(self, auth: Auth):
        self._auth = auth

    async def get_crew(
        self,
        crew_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> CrewData:
        """Get a crew by ID.

        Raises:
            NotFoundError: If the crew does not exist.
        """
        envelope = await self._auth.get(
            f"/v1/crews/{quote_segment(crew_id)}", timeout=timeout
        )
        payload = require_payload(envelope, f"Crew with ID {crew_id} not found")
        return validate_record(CrewData, extract_object(payload, "crewData"))

    async def get_crew_members(
        self,
        crew_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> CrewRoster:
        """Get the roster of a crew with its division placement."""
        envelope = await self._auth.get(
            f"/v1/crews/{quote_segment(crew_id)}/members", timeout=timeout
        )
        payload = require_payload(envelope, f"Crew with ID {crew_id} not found")
        if isinstance(payload, list):
            payload = {"players": payload}
        return validate_record(CrewRoster, payload)

    async def get_crew_stats(
        self,
        crew_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Any:
        """Get raw statistics for a crew."""
        envelope = await self._auth.get(
            f"/v1/crews/{quote_segment(crew_id)}/stats", timeout=timeout
        )
        return require_payload(envelope, f"Stats for crew {crew_id} not found")

    async def get_player_crew(
        self,
        player_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> CrewData:
        """Get the crew a player belongs to.

        Raises:
            NotFoundError: If the player is not in a crew.
        """
        not_found = f"Player {player_id} is not in a crew"
        envelope = await self._auth.get(
            f"/v1/players/{quote_segment(player_id)}/crew", timeout=timeout
        )
        payload = require_payload(envelope, not_found)
        if isinstance(payload, dict) and payload.get("noCrew"):
            raise NotFoundError(not_found)

        crew = extract_object(payload, "crewEntry", "crewData")
        if not isinstance(crew, dict) or "crewId" not in crew:
            raise NotFoundError(not_found)
        return validate_record(CrewData, crew)
