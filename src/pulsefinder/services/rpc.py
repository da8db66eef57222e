"""Generic RPC gateway.

Any backend operation can be invoked through one fixed route by naming its
operation type. New backend operations need only a typed wrapper around
``RpcGateway.call``, never new transport code.
"""

from __future__ import annotations

import logging
from typing import Any

from httpx import USE_CLIENT_DEFAULT

from pulsefinder.auth import Auth, RequestTimeout
from pulsefinder.models.common import HOST_TYPES, HostType
from pulsefinder.models.envelope import Envelope

logger = logging.getLogger(__name__)

GENERIC_RPC_ROUTE = "/v1/generic"


def build_rpc_request(
    operation_type: str,
    payload: Any,
    host_type: HostType = "game",
    account_id: str | None = None,
) -> dict[str, Any]:
    """Build the request envelope posted to the gateway route.

    ``accountId`` is left out of the dict entirely when not supplied.

    Raises:
        ValueError: If the operation type is empty or the host type unknown.
    """
    if not operation_type:
        raise ValueError("operation_type must not be empty")
    if host_type not in HOST_TYPES:
        raise ValueError(f"host_type must be one of {HOST_TYPES}, got {host_type!r}")

    request: dict[str, Any] = {
        "type": operation_type,
        "payload": payload,
        "hostType": host_type,
    }
    if account_id:
        request["accountId"] = account_id
    return request


class RpcGateway:
    """Single typed entry point for backend RPC operations."""

    def __init__(self, auth: Auth):
        self._auth = auth

    async def call(
        self,
        operation_type: str,
        payload: Any,
        host_type: HostType = "game",
        account_id: str | None = None,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Envelope:
        """Invoke a backend operation.

        Args:
            operation_type: Backend operation name (e.g. "MtnTeamServiceRpc").
            payload: Operation payload, sent as-is.
            host_type: Which backend host handles the call ("game" or "social").
            account_id: Optional account to run the operation as.
            timeout: Per-call timeout passed through to the transport.

        Returns:
            The response envelope. Use ``Envelope.payload`` for the RPC payload.
        """
        request = build_rpc_request(operation_type, payload, host_type, account_id)
        logger.debug("RPC %s on %s host", operation_type, host_type)
        return await self._auth.post(GENERIC_RPC_ROUTE, request, timeout=timeout)

    async def call_payload(
        self,
        operation_type: str,
        payload: Any,
        host_type: HostType = "game",
        account_id: str | None = None,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Any:
        """Like ``call`` but returns the unwrapped RPC payload."""
        envelope = await self.call(
            operation_type, payload, host_type, account_id, timeout=timeout
        )
        return envelope.payload
