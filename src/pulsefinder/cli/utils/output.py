"""Rich console output formatting utilities."""

from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from pulsefinder.models import MatchRecord, PlayerIdentity, ProfileData
from pulsefinder.ranks import solo_rank_name, team_rank_name

console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_data(data: Any) -> None:
    """Pretty-print a model or decoded JSON value."""
    if isinstance(data, BaseModel):
        console.print_json(data.model_dump_json(by_alias=True, exclude_none=True))
    else:
        console.print_json(data=data)


def create_profiles_table(profiles: dict[str, ProfileData | None]) -> Table:
    """Create a table of bulk profile results, one row per requested ID.

    Args:
        profiles: Mapping of requested ID to profile (None if not found)

    Returns:
        Rich Table instance
    """
    table = Table(title="Player Profiles")

    table.add_column("Player ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Solo Rank", style="green")
    table.add_column("Team Rank", style="magenta")
    table.add_column("Crew Score", justify="right")

    for player_id, profile in profiles.items():
        if profile is None:
            table.add_row(player_id, "[dim]not found[/dim]", "", "", "")
            continue
        table.add_row(
            profile.player_id,
            str(profile.display_name) if profile.display_name else "",
            solo_rank_name(profile.current_solo_rank),
            team_rank_name(profile.highest_team_rank),
            profile.crew_score or "",
        )

    return table


def create_identity_table(identity: PlayerIdentity) -> Table:
    """Create a table listing the platform accounts linked to an identity."""
    name = str(identity.display_name) if identity.display_name else identity.player_id
    table = Table(title=f"{name} ({identity.player_id})")

    table.add_column("Platform", style="cyan")
    table.add_column("Account ID")
    table.add_column("Display Name")

    for account in identity.id_provider_accounts:
        display = account.provider_display_name
        table.add_row(
            account.id_provider_type,
            account.account_id,
            str(display) if display else "",
        )

    return table


def create_match_table(record: MatchRecord) -> Table:
    """Create a per-player scoreboard for one match."""
    match = record.match_data
    title = f"Match {record.match_id}"
    if match.queue_game_map:
        title += f" on {match.queue_game_map}"
    table = Table(title=title)

    table.add_column("Team", justify="right")
    table.add_column("Player", style="cyan")
    table.add_column("K", justify="right", style="green")
    table.add_column("A", justify="right")
    table.add_column("D", justify="right", style="red")
    table.add_column("Damage", justify="right")

    for index, team in enumerate(match.team_data):
        for player in team.player_data:
            table.add_row(
                str(index),
                player.saved_player_name or player.player_id,
                str(player.num_kills),
                str(player.num_assists),
                str(player.num_deaths),
                f"{player.total_damage_done:,.0f}",
            )

    return table
