"""Offline payload repair subcommand."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from pulsefinder import repair
from pulsefinder.cli.utils.output import console, print_error, print_success
from pulsefinder.exceptions import MalformedPayloadError

app = typer.Typer(no_args_is_help=True)


@app.command("repair")
def repair_command(
    path: Annotated[
        Path | None,
        typer.Argument(
            help="File holding the payload (reads stdin when omitted)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    match: Annotated[
        bool,
        typer.Option("--match", help="Validate the result as a match payload"),
    ] = False,
) -> None:
    """Repair a malformed JSON payload and print the result.

    Examples:
        pulsefinder payload repair broken.json
        pulsefinder payload repair --match < match.json
    """
    text = path.read_text(encoding="utf-8") if path else sys.stdin.read()

    try:
        if match:
            record = repair.parse_match_data(text)
            console.print_json(record.model_dump_json(by_alias=True))
            print_success(f"Valid match payload: {record.match_id}")
            return
        repaired = repair.repair(text)
    except MalformedPayloadError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if repaired == text:
        console.print("[dim]Payload is already valid JSON[/dim]")
    console.print_json(repaired)
