"""Display names for numeric rank IDs."""

from enum import Enum

UNKNOWN_RANK = "Unknown"


class RankType(str, Enum):
    SOLO = "solo"
    TEAM = "team"


def _tiered(tiers: list[str]) -> list[str]:
    return [f"{tier} {division}" for tier in tiers for division in range(1, 5)]


# Index = rank ID
SOLO_RANKS: tuple[str, ...] = (
    "Unranked",
    *_tiered(["Bronze", "Silver", "Gold", "Platinum", "Emerald", "Ruby", "Diamond"]),
    "Champion",
)

TEAM_RANKS: tuple[str, ...] = (
    "Unranked",
    *_tiered(
        [
            "Undiscovered",
            "Prospect",
            "Talent",
            "Professional",
            "Elite",
            "International",
            "Superstar",
            "World Class",
        ]
    ),
    "Champion",
)


def _lookup(ranks: tuple[str, ...], rank_id: int | None) -> str:
    if rank_id is None or not 0 <= rank_id < len(ranks):
        return UNKNOWN_RANK
    return ranks[rank_id]


def solo_rank_name(rank_id: int | None) -> str:
    """Name of a solo rank, e.g. 9 -> "Gold 1"."""
    return _lookup(SOLO_RANKS, rank_id)


def team_rank_name(rank_id: int | None) -> str:
    """Name of a team rank, e.g. 33 -> "Champion"."""
    return _lookup(TEAM_RANKS, rank_id)


def rank_name(rank_id: int | None, rank_type: RankType | str) -> str:
    if RankType(rank_type) is RankType.SOLO:
        return solo_rank_name(rank_id)
    return team_rank_name(rank_id)
