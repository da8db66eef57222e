"""Shared fixtures for pulsefinder tests.

This module provides:
- Isolation from PULSEFINDER_* variables set in the developer's shell
- A factory for mocked httpx responses
- A client fixture with a test API key
- Custom markers for test categorization
"""

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest
from httpx import Response

from pulsefinder import PulseFinder

ENV_VARS = (
    "PULSEFINDER_API_KEY",
    "PULSEFINDER_API_URL",
    "PULSEFINDER_ENV",
    "PULSEFINDER_TIMEOUT",
    "NODE_ENV",
)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests requiring the API"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make config resolution independent of the caller's environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for mocked httpx responses.

    Pass ``json_data`` for a JSON body or ``text`` for a body that is not
    valid JSON (``.json()`` then raises ValueError, like httpx does).
    """

    def _make(
        status_code: int = 200,
        json_data: Any = None,
        text: str | None = None,
    ) -> MagicMock:
        response = MagicMock(spec=Response)
        response.status_code = status_code
        if text is not None:
            response.text = text
            response.json.side_effect = ValueError("Expecting value")
        else:
            response.json.return_value = json_data
            response.text = "" if json_data is None else str(json_data)
        return response

    return _make


@pytest.fixture
def sdk() -> PulseFinder:
    """Client with a test key against the default local base URL."""
    return PulseFinder(api_key="test-key")
