"""Auth subcommands."""

from __future__ import annotations

import typer

from pulsefinder.cli.utils.output import console, print_error, print_success
from pulsefinder.cli.utils.runner import run_with_client
from pulsefinder.client import PulseFinder

app = typer.Typer(no_args_is_help=True)


@app.command("check")
def check(ctx: typer.Context) -> None:
    """Check whether the configured API key is accepted.

    Exits with code 1 when the credentials are rejected or the API is
    unreachable.

    Examples:
        pulsefinder auth check
        pulsefinder --api-key KEY --base-url https://api.example.com auth check
    """

    async def _check(sdk: PulseFinder) -> bool:
        console.print(f"[dim]Checking credentials against {sdk.config.base_url}[/dim]")
        return await sdk.validate_auth()

    if run_with_client(ctx, _check):
        print_success("Credentials accepted")
    else:
        print_error("Credentials rejected")
        raise typer.Exit(1)
