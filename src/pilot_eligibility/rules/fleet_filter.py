from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from pilot_eligibility.domain.fleet import Airline
from pilot_eligibility.domain.pilot import PilotProfile
from pilot_eligibility.reference.tables import DEFAULT_TABLES, EligibilityTables
from pilot_eligibility.rules.eligibility import AuthorizationResult, authorize_pilot


def selectable_aircraft_types(
        pilot: PilotProfile,
        aircraft_types: Iterable[str],
        *,
        require_rating: bool = True,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> List[str]:
    """
    Aircraft types the pilot may pick, in input order, without duplicates.

    With require_rating=False only the rank requirement is applied.
    """
    selectable: List[str] = []
    seen = set()

    for t in aircraft_types:
        if t in seen:
            continue
        seen.add(t)

        result = authorize_pilot(pilot, t, tables=tables)
        ok = result.authorized if require_rating else result.rank_ok
        if ok:
            selectable.append(t)

    return selectable


def airline_selectable_types(
        pilot: PilotProfile,
        airline: Airline,
        *,
        require_rating: bool = True,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> List[str]:
    return selectable_aircraft_types(
        pilot,
        airline.aircraft_types,
        require_rating=require_rating,
        tables=tables,
    )


def registrations_for_type(airline: Airline, type_code: str) -> List[str]:
    for ac in airline.fleet:
        if ac.type_code == type_code:
            return list(ac.registrations)
    return []


def find_airline(airlines: Sequence[Airline], name_or_icao: str) -> Optional[Airline]:
    """Match by display name first, then by ICAO code (case-insensitive)."""
    for a in airlines:
        if a.name == name_or_icao:
            return a
    code = name_or_icao.upper()
    for a in airlines:
        if a.icao_code.upper() == code:
            return a
    return None


def compute_eligibility(
        pilots: Sequence[PilotProfile],
        aircraft_types: Sequence[str],
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> Dict[Tuple[str, str], AuthorizationResult]:
    """
    Returns dict[(pilot_id, aircraft_type)] = AuthorizationResult.
    A pilot is eligible for a type if:
    - Their rank meets the type's minimum rank (if any)
    - They hold the type's rating family (if any)
    """
    eligible: Dict[Tuple[str, str], AuthorizationResult] = {}

    for p in pilots:
        for t in aircraft_types:
            eligible[(p.pilot_id, t)] = authorize_pilot(p, t, tables=tables)

    return eligible
