"""Domain services over one shared ``Auth``.

Each service receives the ``Auth`` at construction and never owns it; the
``PulseFinder`` client wires them together.

Usage:
    from pulsefinder.services import PlayerService

    players = PlayerService(auth)
    profiles = await players.get_bulk_profiles(["A", "B"])
"""

from pulsefinder.services.crew import CrewService
from pulsefinder.services.division import DivisionService
from pulsefinder.services.match import MatchService
from pulsefinder.services.player import PlayerService
from pulsefinder.services.rpc import GENERIC_RPC_ROUTE, RpcGateway, build_rpc_request
from pulsefinder.services.stats import StatsService
from pulsefinder.services.team import TeamService

__all__ = [
    "CrewService",
    "DivisionService",
    "MatchService",
    "PlayerService",
    "RpcGateway",
    "StatsService",
    "TeamService",
    "GENERIC_RPC_ROUTE",
    "build_rpc_request",
]
