from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Tuple

from pilot_eligibility.domain.rank import DEFAULT_RANK


@dataclass(frozen=True)
class PilotProfile:
    """
    Snapshot of the profile fields the eligibility rules read.

    Attributes
    ----------
    pilot_id : str
        Unique identifier of the pilot.
    display_name : str
        Name shown in staff views and reports.
    rank : str
        Current rank value as stored on the profile. Kept as a plain string
        because profiles decoded from external data may carry a value that
        is not a known rank; such a rank never satisfies a requirement.
    type_ratings : FrozenSet[str]
        Aircraft families the pilot holds a type rating for.
    is_staff : bool
        Staff members run the administration workflows.
    authorized_airlines : Tuple[str, ...]
        ICAO codes of airlines the pilot may book for (informational).
    """
    pilot_id: str
    display_name: str = ""
    rank: str = DEFAULT_RANK.value
    type_ratings: FrozenSet[str] = field(default_factory=frozenset)
    is_staff: bool = False
    authorized_airlines: Tuple[str, ...] = ()

    def with_rank(self, rank: str) -> "PilotProfile":
        return replace(self, rank=rank)

    def with_type_ratings(self, type_ratings: FrozenSet[str]) -> "PilotProfile":
        return replace(self, type_ratings=frozenset(type_ratings))
