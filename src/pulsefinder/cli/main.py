"""Main CLI application and entry point.

This module defines the main Typer application, collects the global
connection options and aggregates all command groups (auth, player, match,
rpc, payload).
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml

from pulsefinder.cli.commands import auth as auth_commands
from pulsefinder.cli.commands import match as match_commands
from pulsefinder.cli.commands import payload as payload_commands
from pulsefinder.cli.commands import player as player_commands
from pulsefinder.cli.commands import rpc as rpc_commands
from pulsefinder.cli.utils.output import print_error
from pulsefinder.cli.utils.runner import configure_logging
from pulsefinder.config import ClientConfig
from pulsefinder.exceptions import AuthConfigError

app = typer.Typer(
    name="pulsefinder",
    help="PulseFinder API client CLI",
    no_args_is_help=True,
    pretty_exceptions_enable=True,
)

# Add command groups
app.add_typer(auth_commands.app, name="auth", help="Credential checks")
app.add_typer(player_commands.app, name="player", help="Player lookups")
app.add_typer(match_commands.app, name="match", help="Match lookups")
app.add_typer(rpc_commands.app, name="rpc", help="Raw backend operations")
app.add_typer(payload_commands.app, name="payload", help="Offline payload repair")


@app.callback()
def main_callback(
    ctx: typer.Context,
    api_key: Annotated[
        str | None,
        typer.Option("--api-key", help="API key (default: $PULSEFINDER_API_KEY)"),
    ] = None,
    base_url: Annotated[
        str | None,
        typer.Option("--base-url", help="API base URL (default: $PULSEFINDER_API_URL)"),
    ] = None,
    environment: Annotated[
        str | None,
        typer.Option("--env", help="Runtime mode (default: $PULSEFINDER_ENV)"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", min=0.1, help="Request timeout in seconds"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML file with api_key/base_url/environment/timeout",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """PulseFinder API client CLI.

    Connection settings come from the options below, then from a config
    file, then from PULSEFINDER_* environment variables.
    """
    configure_logging(verbose)

    config = None
    if config_path is not None:
        try:
            config = ClientConfig.from_yaml(config_path)
        except (ValueError, yaml.YAMLError, AuthConfigError) as e:
            print_error(f"Invalid config file {config_path}: {e}")
            raise typer.Exit(1)

    ctx.obj = {
        "api_key": api_key,
        "base_url": base_url,
        "environment": environment,
        "timeout": timeout,
        "config": config,
    }


if __name__ == "__main__":
    app()
