"""PulseFinder SDK: async client for the PulseFinder game API.

Usage:
    from pulsefinder import PulseFinder, NotFoundError

    async with PulseFinder() as sdk:
        try:
            crew = await sdk.crew.get_player_crew(player_id)
        except NotFoundError:
            crew = None
"""

from pulsefinder.auth import Auth
from pulsefinder.client import PulseFinder
from pulsefinder.config import ClientConfig
from pulsefinder.exceptions import (
    AuthConfigError,
    AuthenticationError,
    MalformedPayloadError,
    NotFoundError,
    PulseFinderError,
    TransportError,
)
from pulsefinder.models import Envelope, Platform

__version__ = "0.1.0"

__all__ = [
    "PulseFinder",
    "Auth",
    "ClientConfig",
    "Envelope",
    "Platform",
    # Errors
    "PulseFinderError",
    "AuthConfigError",
    "AuthenticationError",
    "NotFoundError",
    "MalformedPayloadError",
    "TransportError",
]
