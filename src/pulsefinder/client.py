"""PulseFinder client: one authenticated transport shared by all services."""

from __future__ import annotations

import logging
from typing import Any

from httpx import USE_CLIENT_DEFAULT

from pulsefinder.auth import Auth, RequestTimeout
from pulsefinder.config import ClientConfig
from pulsefinder.models.common import HostType
from pulsefinder.models.envelope import Envelope
from pulsefinder.services import (
    CrewService,
    DivisionService,
    MatchService,
    PlayerService,
    RpcGateway,
    StatsService,
    TeamService,
)

logger = logging.getLogger(__name__)


class PulseFinder:
    """Async client for the PulseFinder API.

    Each instance builds its own transport; share an instance explicitly if
    the application wants one.

    Example:
        async with PulseFinder(api_key="key") as sdk:
            if await sdk.validate_auth():
                identity = await sdk.player.search_by_platform("steam", "7656...")
                matches = await sdk.match.get_player_match_history(identity.player_id)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        environment: str | None = None,
        timeout: float | None = None,
        config: ClientConfig | None = None,
    ):
        """Create a client.

        Args:
            api_key: API key; falls back to PULSEFINDER_API_KEY.
            base_url: API base URL; falls back to PULSEFINDER_API_URL, then
                http://localhost:3000.
            environment: Runtime mode; falls back to PULSEFINDER_ENV / NODE_ENV.
            timeout: Default request timeout in seconds.
            config: A fully resolved config. Cannot be combined with the
                individual arguments.

        Raises:
            AuthConfigError: In production mode without an API key.
            ValueError: If ``config`` is combined with individual arguments.
        """
        overrides = (api_key, base_url, environment, timeout)
        if config is not None and any(value is not None for value in overrides):
            raise ValueError("Pass either config or individual settings, not both")
        if config is None:
            config = ClientConfig.resolve(
                api_key=api_key,
                base_url=base_url,
                environment=environment,
                timeout=timeout,
            )

        self.auth = Auth(config)
        self.player = PlayerService(self.auth)
        self.match = MatchService(self.auth)
        self.stats = StatsService(self.auth)
        self.team = TeamService(self.auth)
        self.crew = CrewService(self.auth)
        self.division = DivisionService(self.auth)
        self.rpc = RpcGateway(self.auth)

    @property
    def config(self) -> ClientConfig:
        return self.auth.config

    async def __aenter__(self) -> PulseFinder:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the transport's connections."""
        await self.auth.aclose()

    async def validate_auth(self) -> bool:
        """Check whether the configured credentials are accepted."""
        return await self.auth.validate_auth()

    async def call(
        self,
        operation_type: str,
        payload: Any,
        host_type: HostType = "game",
        account_id: str | None = None,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Envelope:
        """Invoke a backend operation through the generic RPC gateway."""
        return await self.rpc.call(
            operation_type, payload, host_type, account_id, timeout=timeout
        )
