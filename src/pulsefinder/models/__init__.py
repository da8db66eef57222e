"""Pydantic models for the PulseFinder API.

Every record is frozen: a call returns a fresh value that is never mutated.
Field names are snake_case; the camelCase wire names are accepted as aliases.

Usage:
    from pulsefinder.models import MatchData, ProfileData, Platform
"""

from pulsefinder.models.common import (
    HOST_TYPES,
    DisplayName,
    HostType,
    IdProviderAccount,
    Platform,
)
from pulsefinder.models.crew import (
    CrewData,
    CrewPlayer,
    CrewRoster,
    Division,
    StarPlayers,
)
from pulsefinder.models.envelope import (
    Envelope,
    RpcEnvelope,
    RpcResponse,
    require_payload,
    unwrap_rpc,
)
from pulsefinder.models.match import (
    MatchData,
    MatchPlayerData,
    MatchRecord,
    MatchTeamData,
    RawMatchEntry,
    SelectedSponsor,
)
from pulsefinder.models.player import (
    Banner,
    BulkProfileRequest,
    PlayerIdentity,
    ProfileData,
    SearchByPlatformRequest,
)
from pulsefinder.models.team import Team, TeamMember, TeamsForPlayersRequest

__all__ = [
    # Common
    "HOST_TYPES",
    "HostType",
    "Platform",
    "DisplayName",
    "IdProviderAccount",
    # Envelope
    "Envelope",
    "RpcEnvelope",
    "RpcResponse",
    "require_payload",
    "unwrap_rpc",
    # Player
    "Banner",
    "BulkProfileRequest",
    "PlayerIdentity",
    "ProfileData",
    "SearchByPlatformRequest",
    # Match
    "MatchData",
    "MatchPlayerData",
    "MatchRecord",
    "MatchTeamData",
    "RawMatchEntry",
    "SelectedSponsor",
    # Team
    "Team",
    "TeamMember",
    "TeamsForPlayersRequest",
    # Crew / Division
    "CrewData",
    "CrewPlayer",
    "CrewRoster",
    "Division",
    "StarPlayers",
]
