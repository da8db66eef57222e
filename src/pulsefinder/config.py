"""Client configuration with environment fallback.

Values resolve in this order: explicit argument, then environment variable,
then the documented default.

Environment variables:
    PULSEFINDER_API_KEY: API key sent as a bearer token (default: empty)
    PULSEFINDER_API_URL: Base URL of the API (default: http://localhost:3000)
    PULSEFINDER_ENV: Runtime mode, falls back to NODE_ENV (default: development)
    PULSEFINDER_TIMEOUT: Request timeout in seconds (default: 30)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from pulsefinder.exceptions import AuthConfigError

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_TIMEOUT = 30.0
PRODUCTION = "production"

API_KEY_ENV = "PULSEFINDER_API_KEY"
API_URL_ENV = "PULSEFINDER_API_URL"
ENVIRONMENT_ENV = "PULSEFINDER_ENV"
TIMEOUT_ENV = "PULSEFINDER_TIMEOUT"


class ClientConfig(BaseModel):
    """Resolved, immutable settings for one SDK instance."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(
        "",
        description="API key attached as a bearer credential (empty = anonymous)",
    )
    base_url: str = Field(
        DEFAULT_BASE_URL,
        min_length=1,
        description="Base URL of the PulseFinder API",
    )
    environment: str = Field(
        DEFAULT_ENVIRONMENT,
        min_length=1,
        description="Runtime mode; 'production' requires an API key",
    )
    timeout: float = Field(
        DEFAULT_TIMEOUT,
        gt=0,
        description="Default request timeout in seconds",
    )

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == PRODUCTION

    @classmethod
    def resolve(
        cls,
        api_key: str | None = None,
        base_url: str | None = None,
        environment: str | None = None,
        timeout: float | None = None,
    ) -> ClientConfig:
        """Build a config from explicit values, falling back to the environment.

        Empty strings count as "not provided", matching how the backend
        deployment treats unset variables.

        Example:
            config = ClientConfig.resolve(api_key="secret")
        """
        env = os.environ
        if timeout is None:
            timeout = _env_timeout(env.get(TIMEOUT_ENV))
        return cls(
            api_key=api_key or env.get(API_KEY_ENV) or "",
            base_url=base_url or env.get(API_URL_ENV) or DEFAULT_BASE_URL,
            environment=(
                environment
                or env.get(ENVIRONMENT_ENV)
                or env.get("NODE_ENV")
                or DEFAULT_ENVIRONMENT
            ),
            timeout=timeout,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClientConfig:
        """Resolve a config from a mapping, unknown keys are rejected."""
        known = {"api_key", "base_url", "environment", "timeout"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls.resolve(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ClientConfig:
        """Load configuration from a YAML file.

        Keys missing from the file still fall back to the environment.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            ValueError: If the file is not a mapping or has unknown keys.
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a YAML mapping")
        return cls.from_dict(data)


def _env_timeout(raw: str | None) -> float:
    """Parse PULSEFINDER_TIMEOUT, falling back to the default when unset."""
    if not raw or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise AuthConfigError(
            f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}"
        ) from None
    if value <= 0:
        raise AuthConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return value
