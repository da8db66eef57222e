"""Authenticated async transport for the PulseFinder API.

``Auth`` owns the credentials and the httpx client. Every request goes
through ``Auth.request``, which is the single place where HTTP failures are
classified into SDK exceptions:

    401            -> AuthenticationError
    other >= 400   -> TransportError (with status_code)
    network/timeout -> TransportError (chained from the httpx error)

No retries happen here. A failed call fails once.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from httpx import (
    USE_CLIENT_DEFAULT,
    AsyncClient,
    HTTPError,
    Response,
    TimeoutException,
)

from pulsefinder import repair
from pulsefinder.config import ClientConfig
from pulsefinder.exceptions import (
    AuthConfigError,
    AuthenticationError,
    TransportError,
)
from pulsefinder.models.envelope import Envelope

logger = logging.getLogger(__name__)

USER_AGENT = "pulsefinder-python/0.1.0"

# Per-call timeout: seconds, an httpx.Timeout, None for no timeout, or
# USE_CLIENT_DEFAULT to keep the configured default.
RequestTimeout = Any


class Auth:
    """Credential holder and request issuer shared by all services.

    Example:
        async with Auth(ClientConfig.resolve(api_key="key")) as auth:
            envelope = await auth.get("/v1/crews/abc")
    """

    def __init__(self, config: ClientConfig | None = None):
        """Initialize the transport.

        Args:
            config: Resolved client configuration. Defaults to
                ``ClientConfig.resolve()`` (environment, then defaults).

        Raises:
            AuthConfigError: If running in production mode without an API key.
        """
        self.config = config or ClientConfig.resolve()
        if not self.config.api_key and self.config.is_production:
            raise AuthConfigError(
                "API key is required in production. Provide it in the config "
                "or set the PULSEFINDER_API_KEY environment variable."
            )

        headers = {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"

        self.base_url = self.config.base_url.rstrip("/")
        self._client = AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.config.timeout,
        )
        logger.debug(
            "Auth initialized for %s (%s, %s)",
            self.base_url,
            self.config.environment,
            "authenticated" if self.config.api_key else "anonymous",
        )

    @property
    def has_api_key(self) -> bool:
        return bool(self.config.api_key)

    async def __aenter__(self) -> Auth:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()
        logger.debug("HTTP client closed")

    # =========================================================================
    # Requests
    # =========================================================================

    async def get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Envelope:
        """Perform a GET request and return the normalised envelope."""
        return await self.request("GET", path, params=params, timeout=timeout)

    async def post(
        self,
        path: str,
        body: Any = None,
        *,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Envelope:
        """Perform a POST request with a JSON body."""
        return await self.request("POST", path, json=body, timeout=timeout)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Envelope:
        """Issue one authenticated request.

        Args:
            method: HTTP method (GET, POST, ...).
            path: Route path relative to the base URL.
            params: Optional query parameters; None values are dropped.
            json: Optional JSON body.
            timeout: Per-call timeout passed to httpx untouched.

        Returns:
            The response body normalised into an Envelope.

        Raises:
            AuthenticationError: On HTTP 401.
            TransportError: On any other HTTP error status or network failure.
            MalformedPayloadError: If the body is not JSON and cannot be
                repaired, or does not fit the envelope shape.
        """
        response = await self._send(
            method, path, params=params, json=json, timeout=timeout
        )
        return Envelope.from_body(self._decode_body(response))

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        timeout: RequestTimeout = USE_CLIENT_DEFAULT,
    ) -> Response:
        """Send a request and classify HTTP and network failures."""
        kwargs: dict[str, Any] = {"timeout": timeout}
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}
        if json is not None:
            kwargs["json"] = json

        logger.debug("Request %s %s", method, path)
        try:
            response = await self._client.request(method, path, **kwargs)
        except TimeoutException as e:
            logger.warning("Request timeout on %s %s: %s", method, path, e)
            raise TransportError(f"Request timeout: {e}") from e
        except HTTPError as e:
            logger.warning("HTTP error on %s %s: %s", method, path, e)
            raise TransportError(f"HTTP error: {e}") from e

        self._raise_for_status(response)
        return response

    async def validate_auth(self) -> bool:
        """Check the credentials against the API root.

        Returns:
            True if the request succeeded, False if the credentials were
            rejected.

        Raises:
            TransportError: If the service could not be reached or answered
                with a non-auth error. An unreachable service is not reported
                as bad credentials.
        """
        try:
            await self._send("GET", "/")
        except AuthenticationError:
            logger.info("Authentication rejected by %s", self.base_url)
            return False
        return True

    # =========================================================================
    # Response handling
    # =========================================================================

    @staticmethod
    def _raise_for_status(response: Response) -> None:
        status = response.status_code
        if status < 400:
            return

        message = _error_message(response)
        if status == httpx.codes.UNAUTHORIZED:
            logger.warning("Authentication failed: %s", message)
            raise AuthenticationError(message or "Authentication failed")

        logger.warning("API error %d: %s", status, message)
        raise TransportError(f"API error {status}: {message}", status_code=status)

    @staticmethod
    def _decode_body(response: Response) -> Any:
        try:
            body = response.json()
        except ValueError:
            text = response.text
            if not text.strip():
                return None
            logger.warning("Response body is not strict JSON, attempting repair")
            return repair.parse(text)
        # Some routes serialise the envelope twice
        if isinstance(body, str) and body.lstrip().startswith(("{", "[")):
            logger.debug("Response body is a JSON-encoded string, decoding again")
            return repair.parse(body)
        return body


def _error_message(response: Response) -> str:
    """Best-effort extraction of the backend's error message."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return response.text
