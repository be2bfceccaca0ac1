from __future__ import annotations

from typing import Sequence

from pilot_eligibility.domain.fleet import Airline
from pilot_eligibility.domain.pilot import PilotProfile
from pilot_eligibility.reference.tables import DEFAULT_TABLES, EligibilityTables


def validate_tables(tables: EligibilityTables = DEFAULT_TABLES) -> None:
    rungs = list(tables.rank_order.values())
    if len(set(rungs)) != len(rungs):
        raise ValueError("Rank order assigns the same rung to several ranks")

    for aircraft_type, rank in tables.min_ranks.items():
        if rank not in tables.rank_order:
            raise ValueError(f"Minimum rank for {aircraft_type} is not a known rank: {rank!r}")

    for aircraft_type, family in tables.families.items():
        if family not in tables.family_names:
            raise ValueError(f"Family {family!r} of {aircraft_type} has no display name")


def validate_pilots(pilots: Sequence[PilotProfile], tables: EligibilityTables = DEFAULT_TABLES) -> None:
    ids = [p.pilot_id for p in pilots]
    if len(set(ids)) != len(ids):
        raise ValueError("Duplicate pilot_id found in pilots.json")

    for p in pilots:
        if p.rank not in tables.rank_order:
            raise ValueError(f"Invalid rank for pilot {p.pilot_id}: {p.rank!r}")
        for family in p.type_ratings:
            if family not in tables.family_names:
                raise ValueError(f"Unknown type rating for pilot {p.pilot_id}: {family}")


def validate_airlines(airlines: Sequence[Airline]) -> None:
    codes = [a.icao_code for a in airlines]
    if len(set(codes)) != len(codes):
        raise ValueError("Duplicate icao_code found in airlines.json")

    for a in airlines:
        if not a.fleet:
            raise ValueError(f"Airline {a.icao_code} has an empty fleet")

        types = a.aircraft_types
        if len(set(types)) != len(types):
            raise ValueError(f"Airline {a.icao_code} lists an aircraft type twice")

        regs = [r for ac in a.fleet for r in ac.registrations]
        if len(set(regs)) != len(regs):
            raise ValueError(f"Airline {a.icao_code} has duplicate registrations")
