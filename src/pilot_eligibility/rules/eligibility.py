from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pilot_eligibility.domain.pilot import PilotProfile
from pilot_eligibility.domain.rank import rank_key
from pilot_eligibility.reference.tables import DEFAULT_TABLES, EligibilityTables


@dataclass(frozen=True)
class AuthorizationResult:
    """
    Outcome of checking one pilot against one aircraft type.

    `rank_ok` and `rating_ok` are reported separately so callers can tell
    "rank insufficient" apart from "type rating missing".
    """
    authorized: bool
    rank_ok: bool
    rating_ok: bool
    required_rank: Optional[str]
    required_family: Optional[str]

    def __bool__(self) -> bool:
        return self.authorized


def rung(rank: object, *, tables: EligibilityTables = DEFAULT_TABLES) -> Optional[int]:
    key = rank_key(rank)
    if key is None:
        return None
    return tables.rank_order.get(key)


def rank_satisfies(
        pilot_rank: object,
        required_rank: object,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> bool:
    """
    True if `pilot_rank` is at least as senior as `required_rank`.
    A rank missing from the rank order has no rung and never satisfies (fail closed).
    """
    pilot_rung = rung(pilot_rank, tables=tables)
    required_rung = rung(required_rank, tables=tables)
    if pilot_rung is None or required_rung is None:
        return False
    return pilot_rung >= required_rung


def minimum_rank_for(aircraft_type: str, *, tables: EligibilityTables = DEFAULT_TABLES) -> Optional[str]:
    """None means any rank may fly the type."""
    return tables.min_ranks.get(aircraft_type)


def required_family_for(aircraft_type: str, *, tables: EligibilityTables = DEFAULT_TABLES) -> Optional[str]:
    """None means no type rating is needed for the type."""
    return tables.families.get(aircraft_type)


def has_type_rating(
        pilot_ratings: Optional[Iterable[str]],
        aircraft_type: str,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> bool:
    required_family = required_family_for(aircraft_type, tables=tables)
    if required_family is None:
        return True
    if not pilot_ratings:
        return False
    if isinstance(pilot_ratings, str):
        return pilot_ratings == required_family
    return required_family in set(pilot_ratings)


def is_authorized(
        pilot_rank: object,
        pilot_ratings: Optional[Iterable[str]],
        aircraft_type: str,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> AuthorizationResult:
    """
    Combined decision:
    - rank_ok: the type has no minimum rank, or the pilot's rank satisfies it
    - rating_ok: the type needs no family, or the pilot holds it
    """
    required_rank = minimum_rank_for(aircraft_type, tables=tables)
    required_family = required_family_for(aircraft_type, tables=tables)

    rank_ok = required_rank is None or rank_satisfies(pilot_rank, required_rank, tables=tables)
    rating_ok = has_type_rating(pilot_ratings, aircraft_type, tables=tables)

    return AuthorizationResult(
        authorized=rank_ok and rating_ok,
        rank_ok=rank_ok,
        rating_ok=rating_ok,
        required_rank=required_rank,
        required_family=required_family,
    )


def authorize_pilot(
        pilot: PilotProfile,
        aircraft_type: str,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> AuthorizationResult:
    return is_authorized(pilot.rank, pilot.type_ratings, aircraft_type, tables=tables)
