"""Response envelope models and unwrapping helpers.

Backend replies arrive in one of two shapes:

    {"success": true, "data": ..., "message": "..."}
    {"sequenceNumber": 1, "response": {"requestId": 2, "type": "...", "payload": ...}}

and the ``data`` of the first shape is frequently the second shape. The
helpers here normalise both into an ``Envelope`` and dig out the payload.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from pulsefinder.exceptions import MalformedPayloadError, NotFoundError


class RpcResponse(BaseModel):
    """Inner ``response`` object of an RPC envelope."""

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )

    # Game hosts send numeric ids, social hosts send opaque strings
    request_id: str | None = Field(default=None, alias="requestId")
    type: str | None = None
    payload: Any = None


class RpcEnvelope(BaseModel):
    """Nested RPC envelope returned by the game backend."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sequence_number: int | None = Field(default=None, alias="sequenceNumber")
    response: RpcResponse


class Envelope(BaseModel):
    """Outer success envelope shared by every route."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    success: bool = True
    data: Any = None
    message: str | None = Field(
        default=None, validation_alias=AliasChoices("message", "error")
    )

    @field_validator("message", mode="before")
    @classmethod
    def _stringify_message(cls, value: Any) -> str | None:
        """Accept structured errors such as ``{"code": "NOT_FOUND"}``."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, dict) and isinstance(value.get("message"), str):
            return value["message"]
        return _dump(value)

    @classmethod
    def from_body(cls, body: Any) -> Envelope:
        """Normalise a decoded response body into an Envelope.

        Bodies without a ``success`` flag (bare RPC envelopes, plain values)
        are treated as successful with the whole body as ``data``.

        Raises:
            MalformedPayloadError: If the body has a ``success`` key but does
                not fit the envelope shape (for example ``success: null``).
        """
        if isinstance(body, dict) and "success" in body:
            try:
                return cls.model_validate(body)
            except ValidationError as e:
                raise MalformedPayloadError(
                    f"Response validation error: {e}", _dump(body)
                ) from e
        return cls(success=True, data=body)

    @property
    def payload(self) -> Any:
        """The data with any RPC envelope around it removed."""
        return unwrap_rpc(self.data)


def is_rpc_envelope(value: Any) -> bool:
    return (
        isinstance(value, dict)
        and isinstance(value.get("response"), dict)
        and "payload" in value["response"]
    )


def unwrap_rpc(value: Any) -> Any:
    """Return ``response.payload`` for an RPC envelope, else ``value`` itself.

    Raises:
        MalformedPayloadError: If the RPC envelope does not fit its shape.
    """
    if not is_rpc_envelope(value):
        return value
    try:
        return RpcEnvelope.model_validate(value).response.payload
    except ValidationError as e:
        raise MalformedPayloadError(
            f"RPC envelope validation error: {e}", _dump(value)
        ) from e


def require_payload(envelope: Envelope, not_found_message: str) -> Any:
    """Unwrap an envelope for an entity lookup.

    Raises:
        NotFoundError: If the envelope or the RPC payload reports failure,
            or there is no data at all.
    """
    if not envelope.success or envelope.data is None:
        raise NotFoundError(envelope.message or not_found_message)
    payload = envelope.payload
    if payload is None:
        raise NotFoundError(not_found_message)
    if isinstance(payload, dict) and payload.get("success") is False:
        raise NotFoundError(str(payload.get("message") or not_found_message))
    return payload


def _dump(value: Any) -> str:
    try:
        return json.dumps(value, default=str)
    except (TypeError, ValueError):
        return repr(value)
