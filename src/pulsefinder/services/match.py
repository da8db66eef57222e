"""Match lookups and match history.

Match bodies arrive as JSON-encoded strings and are always routed through
the repair engine before being returned.
"""

from __future__ import annotations

import logging
from typing import Literal

from httpx import USE_CLIENT_DEFAULT

from pulsefinder.auth import Auth, RequestTimeout
from pulsefinder.models import MatchRecord, RawMatchEntry
from pulsefinder.models.envelope import require_payload
from pulsefinder.services.parsing import (
    extract_list,
    quote_segment,
    validate_record,
)

logger = logging.getLogger(__name__)

EntityType = Literal["player", "team"]
ENTITY_TYPES: tuple[str, ...] = ("player", "team")


class MatchService:
    """Service for match-related API calls."""

    def __init__(self, auth: Auth):
        self._auth = auth

    async def get_match(
        self,
        match_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> MatchRecord:
        """Get a single match with its decoded body.

        Raises:
            NotFoundError: If the match does not exist.
            MalformedPayloadError: If the embedded match body cannot be repaired.
        """
        envelope = await self._auth.get(
            f"/v1/matches/{quote_segment(match_id)}", timeout=timeout
        )
        payload = require_payload(envelope, f"Match with ID {match_id} not found")
        # Either {"matchData": {entry}} or the entry itself
        raw = payload
        if isinstance(payload, dict) and isinstance(payload.get("matchData"), dict):
            raw = payload["matchData"]
        return validate_record(RawMatchEntry, raw).to_record()

    async def get_player_match_history(
        self,
        player_id: str,
        start_index: int | None = None,
        count: int | None = None,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> list[MatchRecord]:
        """Get recent matches for a player, newest first as the backend orders them."""
        return await self._history("player", player_id, start_index, count, timeout)

    async def get_team_match_history(
        self,
        team_id: str,
        start_index: int | None = None,
        count: int | None = None,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> list[MatchRecord]:
        """Get recent matches for a team."""
        return await self._history("team", team_id, start_index, count, timeout)

    async def has_new_matches(
        self,
        entity_type: EntityType,
        entity_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> bool:
        """Whether a player or team has matches newer than the stored ones.

        Raises:
            ValueError: If the entity type is not "player" or "team".
        """
        _check_entity_type(entity_type)
        envelope = await self._auth.get(
            f"/v1/matches/{entity_type}/{quote_segment(entity_id)}/has-new",
            timeout=timeout,
        )
        payload = require_payload(
            envelope, f"No match state for {entity_type} {entity_id}"
        )
        if isinstance(payload, dict):
            return bool(payload.get("hasNew", payload.get("hasNewMatches", False)))
        return bool(payload)

    async def _history(
        self,
        entity_type: EntityType,
        entity_id: str,
        start_index: int | None,
        count: int | None,
        timeout: RequestTimeout,
    ) -> list[MatchRecord]:
        envelope = await self._auth.get(
            f"/v1/matches/{entity_type}/{quote_segment(entity_id)}",
            params={"startIndex": start_index, "count": count},
            timeout=timeout,
        )
        payload = require_payload(
            envelope, f"Match history for {entity_type} {entity_id} not found"
        )
        entries = extract_list(payload, "matchData", "matches")
        records = [
            validate_record(RawMatchEntry, entry).to_record() for entry in entries
        ]
        logger.debug(
            "Fetched %d matches for %s %s", len(records), entity_type, entity_id
        )
        return records


def _check_entity_type(entity_type: str) -> None:
    if entity_type not in ENTITY_TYPES:
        raise ValueError(
            f"entity_type must be one of {ENTITY_TYPES}, got {entity_type!r}"
        )
