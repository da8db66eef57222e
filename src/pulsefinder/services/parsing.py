"""Helpers for turning loosely shaped payloads into typed records."""

from __future__ import annotations

import json
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from pulsefinder.exceptions import MalformedPayloadError

T = TypeVar("T", bound=BaseModel)


def extract_list(payload: Any, *keys: str) -> list[Any]:
    """Find the list of records in a payload.

    The backend returns either a bare list or an object holding the list
    under one of several keys. Returns an empty list when neither is present.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in keys:
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []


def extract_object(payload: Any, *keys: str) -> Any:
    """Return the first present value under ``keys``, else the payload itself."""
    if isinstance(payload, dict):
        for key in keys:
            value = payload.get(key)
            if value is not None:
                return value
    return payload


def validate_record(model: type[T], data: Any) -> T:
    """Validate one record, reporting shape mismatches as MalformedPayloadError."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MalformedPayloadError(
            f"Unexpected {model.__name__} payload: {e}", _excerpt(data)
        ) from e


def validate_records(model: type[T], items: list[Any]) -> list[T]:
    return [validate_record(model, item) for item in items]


def _excerpt(data: Any) -> str:
    try:
        return json.dumps(data, default=str)
    except (TypeError, ValueError):
        return repr(data)


def quote_segment(value: str) -> str:
    """Percent-encode an id for use as one URL path segment."""
    return quote(str(value), safe="")
