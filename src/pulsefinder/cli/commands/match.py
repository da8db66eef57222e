"""Match subcommands."""

from __future__ import annotations

from typing import Annotated

import typer

from pulsefinder.cli.utils.output import console, create_match_table, print_data
from pulsefinder.cli.utils.runner import run_with_client

app = typer.Typer(no_args_is_help=True)


@app.command("get")
def get(
    ctx: typer.Context,
    match_id: Annotated[str, typer.Argument(help="Match ID")],
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Print the decoded match as JSON"),
    ] = False,
) -> None:
    """Show the scoreboard of one match.

    Examples:
        pulsefinder match get 0f9e8d
        pulsefinder match get 0f9e8d --raw
    """
    record = run_with_client(ctx, lambda sdk: sdk.match.get_match(match_id))
    if raw:
        print_data(record)
    else:
        console.print(create_match_table(record))


@app.command("history")
def history(
    ctx: typer.Context,
    player_id: Annotated[str, typer.Argument(help="Player ID")],
    count: Annotated[
        int,
        typer.Option("--count", "-n", min=1, help="Number of matches"),
    ] = 10,
    start: Annotated[
        int,
        typer.Option("--start", min=0, help="Index of the first match"),
    ] = 0,
) -> None:
    """List recent matches of a player.

    Examples:
        pulsefinder match history 1a2b3c --count 5
    """
    records = run_with_client(
        ctx,
        lambda sdk: sdk.match.get_player_match_history(
            player_id, start_index=start, count=count
        ),
    )
    if not records:
        console.print("[yellow]No matches found[/yellow]")
        return
    for record in records:
        match = record.match_data
        ranked = "ranked" if match.is_ranked else "casual"
        console.print(
            f"[cyan]{record.match_id}[/cyan]  {record.match_date or ''}  "
            f"{match.queue_game_map or '?'} ({ranked})"
        )
