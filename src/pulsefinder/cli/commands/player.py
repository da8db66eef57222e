"""Player subcommands."""

from __future__ import annotations

from typing import Annotated

import typer

from pulsefinder.cli.utils.output import (
    console,
    create_identity_table,
    create_profiles_table,
    print_data,
    print_warning,
)
from pulsefinder.cli.utils.runner import run_with_client
from pulsefinder.models import Platform

app = typer.Typer(no_args_is_help=True)


@app.command("profiles")
def profiles(
    ctx: typer.Context,
    player_ids: Annotated[
        list[str],
        typer.Argument(help="One or more player IDs"),
    ],
) -> None:
    """Show profiles for one or more players.

    Players that do not exist are listed as "not found".

    Examples:
        pulsefinder player profiles 1a2b3c 4d5e6f
    """
    results = run_with_client(
        ctx, lambda sdk: sdk.player.get_bulk_profiles(player_ids)
    )
    console.print(create_profiles_table(results))

    missing = [pid for pid, profile in results.items() if profile is None]
    if missing:
        print_warning(f"{len(missing)} of {len(results)} players not found")


@app.command("search")
def search(
    ctx: typer.Context,
    platform: Annotated[
        Platform,
        typer.Argument(help="Platform the account belongs to"),
    ],
    account_id: Annotated[
        str,
        typer.Argument(help="Platform-native account ID"),
    ],
) -> None:
    """Find the player linked to a Discord, Steam or Twitch account.

    Examples:
        pulsefinder player search steam 76561198376543210
    """
    identity = run_with_client(
        ctx, lambda sdk: sdk.player.search_by_platform(platform, account_id)
    )
    console.print(create_identity_table(identity))


@app.command("stats")
def stats(
    ctx: typer.Context,
    player_id: Annotated[str, typer.Argument(help="Player ID")],
) -> None:
    """Print raw statistics for a player."""
    print_data(run_with_client(ctx, lambda sdk: sdk.stats.get_player_stats(player_id)))


@app.command("crew")
def crew(
    ctx: typer.Context,
    player_id: Annotated[str, typer.Argument(help="Player ID")],
) -> None:
    """Print the crew a player belongs to."""
    print_data(run_with_client(ctx, lambda sdk: sdk.crew.get_player_crew(player_id)))
