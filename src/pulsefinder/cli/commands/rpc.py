"""Generic RPC subcommand."""

from __future__ import annotations

import json
from typing import Annotated

import typer

from pulsefinder.cli.utils.output import print_data, print_error, print_warning
from pulsefinder.cli.utils.runner import run_with_client
from pulsefinder.models.common import HOST_TYPES

app = typer.Typer(no_args_is_help=True)


@app.command("call")
def call(
    ctx: typer.Context,
    operation_type: Annotated[
        str,
        typer.Argument(help="Backend operation type, e.g. MtnTeamServiceRpc"),
    ],
    payload: Annotated[
        str,
        typer.Option("--payload", "-p", help="JSON payload for the operation"),
    ] = "{}",
    host_type: Annotated[
        str,
        typer.Option("--host-type", help="Backend host: game or social"),
    ] = "game",
    account_id: Annotated[
        str | None,
        typer.Option("--account-id", help="Run the operation as this account"),
    ] = None,
) -> None:
    """Invoke any backend operation through the generic RPC route.

    Examples:
        pulsefinder rpc call MtnTeamServiceRpc -p '{"playerIds": ["1a2b"]}'
        pulsefinder rpc call GetFriendsV1 --host-type social --account-id 1a2b
    """
    if host_type not in HOST_TYPES:
        print_error(f"--host-type must be one of: {', '.join(HOST_TYPES)}")
        raise typer.Exit(1)
    try:
        body = json.loads(payload)
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON payload: {e}")
        raise typer.Exit(1)

    envelope = run_with_client(
        ctx,
        lambda sdk: sdk.call(operation_type, body, host_type, account_id),
    )
    if not envelope.success:
        print_warning(envelope.message or "Backend reported failure")
    print_data(envelope.payload)
