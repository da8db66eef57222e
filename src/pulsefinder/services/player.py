"""Player lookups: bulk profiles and platform account search."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from httpx import USE_CLIENT_DEFAULT

from pulsefinder.auth import Auth, RequestTimeout
from pulsefinder.exceptions import NotFoundError
from pulsefinder.models import (
    BulkProfileRequest,
    Platform,
    PlayerIdentity,
    ProfileData,
    SearchByPlatformRequest,
)
from pulsefinder.models.envelope import require_payload
from pulsefinder.services.parsing import extract_list, validate_records

logger = logging.getLogger(__name__)


class PlayerService:
    """Service for player-related API calls."""

    def __init__(self, auth: Auth):
        self._auth = auth

    async def get_bulk_profiles(
        self,
        player_ids: Iterable[str],
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> dict[str, ProfileData | None]:
        """Fetch profiles for several players in one request.

        Args:
            player_ids: Player IDs to look up. Duplicates are collapsed.
            timeout: Per-call timeout passed through to the transport.

        Returns:
            A dict with one entry per requested ID, in request order. IDs the
            backend did not return map to None; a missing player never fails
            the whole batch. IDs are matched case-insensitively.
        """
        ids = list(dict.fromkeys(player_ids))
        if not ids:
            return {}

        request = BulkProfileRequest(player_ids=ids)
        envelope = await self._auth.post(
            "/v1/players/profiles/bulk",
            request.model_dump(by_alias=True),
            timeout=timeout,
        )

        found: dict[str, ProfileData] = {}
        if envelope.success and envelope.data is not None:
            items = extract_list(envelope.payload, "bulkProfileData", "profiles")
            for profile in validate_records(ProfileData, items):
                found[profile.player_id.lower()] = profile

        missing = [pid for pid in ids if pid.lower() not in found]
        if missing:
            logger.debug(
                "Bulk profile lookup missing %d of %d IDs", len(missing), len(ids)
            )
        return {pid: found.get(pid.lower()) for pid in ids}

    async def get_profile(
        self,
        player_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> ProfileData:
        """Fetch a single player profile.

        Raises:
            NotFoundError: If the player does not exist.
        """
        profiles = await self.get_bulk_profiles([player_id], timeout=timeout)
        profile = profiles.get(player_id)
        if profile is None:
            raise NotFoundError(f"Player with ID {player_id} not found")
        return profile

    async def search_by_platform(
        self,
        platform: Platform | str,
        account_id: str,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> PlayerIdentity:
        """Resolve a platform account to a player identity.

        Args:
            platform: Platform the account belongs to (discord, steam, twitch).
            account_id: Platform-native account ID.
            timeout: Per-call timeout passed through to the transport.

        Returns:
            The identity linked to exactly this account, or else the first
            identity the backend returned.

        Raises:
            NotFoundError: If no identity matches.
            ValueError: If the platform is not a known Platform value.
        """
        platform = Platform(platform)
        request = SearchByPlatformRequest(
            platform=platform.value, account_id=account_id
        )
        envelope = await self._auth.post(
            "/v1/players/search-by-platform",
            request.model_dump(by_alias=True),
            timeout=timeout,
        )

        not_found = f"Player with {platform.value} account ID {account_id} not found"
        payload = require_payload(envelope, not_found)
        identities = validate_records(
            PlayerIdentity, extract_list(payload, "playerIdentities")
        )
        if not identities:
            raise NotFoundError(not_found)

        for identity in identities:
            if identity.has_account(platform.value, account_id):
                return identity
        return identities[0]

