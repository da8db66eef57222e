"""Helpers for running SDK coroutines from synchronous typer commands."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import typer

from pulsefinder.cli.utils.output import print_error
from pulsefinder.client import PulseFinder
from pulsefinder.config import ClientConfig
from pulsefinder.exceptions import (
    AuthConfigError,
    AuthenticationError,
    MalformedPayloadError,
    NotFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def run_with_client(
    ctx: typer.Context,
    action: Callable[[PulseFinder], Awaitable[T]],
) -> T:
    """Build a client from the global options, run ``action`` and close it.

    SDK errors are reported on the console and turned into exit code 1.
    """
    options = ctx.obj or {}

    async def _run() -> T:
        async with _build_client(options) as sdk:
            return await action(sdk)

    try:
        return asyncio.run(_run())
    except AuthConfigError as e:
        print_error(f"Configuration error: {e}")
    except AuthenticationError as e:
        print_error(f"Authentication failed: {e}")
    except NotFoundError as e:
        print_error(f"Not found: {e}")
    except MalformedPayloadError as e:
        print_error(f"Malformed payload: {e}")
    except TransportError as e:
        print_error(f"Request failed: {e}")
    raise typer.Exit(1)


def _build_client(options: dict[str, Any]) -> PulseFinder:
    """Create the client, letting command-line flags override a config file."""
    overrides = {
        key: options.get(key)
        for key in ("api_key", "base_url", "environment", "timeout")
        if options.get(key) is not None
    }
    file_config: ClientConfig | None = options.get("config")
    if file_config is None:
        return PulseFinder(**overrides)
    logger.debug("Using config file with overrides: %s", sorted(overrides))
    return PulseFinder(config=file_config.model_copy(update=overrides))
