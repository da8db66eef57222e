"""Unit tests for the generic RPC gateway."""

from unittest.mock import AsyncMock, patch

import pytest

from pulsefinder import PulseFinder
from pulsefinder.exceptions import AuthenticationError, TransportError
from pulsefinder.services.rpc import GENERIC_RPC_ROUTE, build_rpc_request


class TestBuildRpcRequest:
    """Tests for build_rpc_request()."""

    def test_minimal_request(self) -> None:
        """Test accountId is structurally absent when not supplied."""
        request = build_rpc_request("MtnTeamServiceRpc", {"playerIds": ["a"]})
        assert request == {
            "type": "MtnTeamServiceRpc",
            "payload": {"playerIds": ["a"]},
            "hostType": "game",
        }
        assert "accountId" not in request

    def test_empty_account_id_is_omitted(self) -> None:
        """Test an empty account ID is treated as not supplied."""
        assert "accountId" not in build_rpc_request("Op", {}, "game", "")

    def test_account_id_included(self) -> None:
        """Test a supplied account ID is sent."""
        request = build_rpc_request("GetFriendsV1", {}, "social", "acct-1")
        assert request["accountId"] == "acct-1"
        assert request["hostType"] == "social"

    def test_unknown_host_type_rejected(self) -> None:
        """Test host types other than game/social are rejected."""
        with pytest.raises(ValueError, match="host_type"):
            build_rpc_request("Op", {}, "party")  # type: ignore[arg-type]

    def test_empty_operation_type_rejected(self) -> None:
        """Test an empty operation type is rejected."""
        with pytest.raises(ValueError, match="operation_type"):
            build_rpc_request("", {})


class TestRpcGateway:
    """Tests for RpcGateway.call() and call_payload()."""

    @pytest.mark.asyncio
    async def test_call_posts_to_generic_route(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test the gateway posts the request envelope to the fixed route."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200,
                {
                    "success": True,
                    "data": {
                        "sequenceNumber": 3,
                        "response": {
                            "requestId": 7,
                            "type": "MtnTeamServiceRpcResponse",
                            "payload": {"teams": []},
                        },
                    },
                },
            )

            envelope = await sdk.rpc.call("MtnTeamServiceRpc", {"playerIds": ["p1"]})

            method, path = mock_request.call_args.args
            assert (method, path) == ("POST", GENERIC_RPC_ROUTE)
            body = mock_request.call_args.kwargs["json"]
            assert body == {
                "type": "MtnTeamServiceRpc",
                "payload": {"playerIds": ["p1"]},
                "hostType": "game",
            }
            assert envelope.success is True
            assert envelope.payload == {"teams": []}

    @pytest.mark.asyncio
    async def test_call_payload_unwraps(self, sdk: PulseFinder, make_response) -> None:
        """Test call_payload returns the inner RPC payload."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200,
                {"sequenceNumber": 1, "response": {"payload": {"friends": ["f1"]}}},
            )

            payload = await sdk.rpc.call_payload(
                "GetFriendsV1", {}, "social", account_id="acct-1"
            )

            assert payload == {"friends": ["f1"]}
            assert mock_request.call_args.kwargs["json"]["accountId"] == "acct-1"

    @pytest.mark.asyncio
    async def test_failure_envelope_is_returned(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test a success=false envelope is handed back, not raised."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, {"success": False, "error": "Unknown operation"}
            )

            envelope = await sdk.call("Nope", {})

            assert envelope.success is False
            assert envelope.message == "Unknown operation"

    @pytest.mark.asyncio
    async def test_errors_propagate_unchanged(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test transport errors surface from the gateway as-is."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(401, {"message": "expired"})
            with pytest.raises(AuthenticationError, match="expired"):
                await sdk.rpc.call("Op", {})

            mock_request.return_value = make_response(502, text="Bad Gateway")
            with pytest.raises(TransportError):
                await sdk.rpc.call("Op", {})

    @pytest.mark.asyncio
    async def test_timeout_is_passed_through(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test a per-call timeout reaches the transport."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, {"success": True})

            await sdk.rpc.call("Op", {}, timeout=1.5)

            assert mock_request.call_args.kwargs["timeout"] == 1.5
