from __future__ import annotations

import enum
from typing import Optional


class Rank(str, enum.Enum):
    """
    Pilot seniority level.

    Ranks are totally ordered through the rank-order reference table
    (Visitor < Trainee < First Officer < Captain). A rank gates which
    aircraft a pilot may fly independently of type ratings.
    """
    VISITOR = "Visitor"
    TRAINEE = "Trainee"
    FIRST_OFFICER = "First Officer"
    CAPTAIN = "Captain"


DEFAULT_RANK = Rank.VISITOR


def rank_key(rank: object) -> Optional[str]:
    """Plain string used for table lookups, or None if `rank` is not a string."""
    if isinstance(rank, Rank):
        return rank.value
    if isinstance(rank, str):
        return rank
    return None
