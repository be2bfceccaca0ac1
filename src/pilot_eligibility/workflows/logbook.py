from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pilot_eligibility.domain.pilot import PilotProfile
from pilot_eligibility.reference.tables import DEFAULT_TABLES, EligibilityTables
from pilot_eligibility.rules.eligibility import AuthorizationResult, authorize_pilot

logger = logging.getLogger(__name__)


class FlightNotAuthorizedError(ValueError):
    """Raised when a pilot tries to log a flight on a type they may not fly."""

    def __init__(self, message: str, result: AuthorizationResult):
        super().__init__(message)
        self.result = result


@dataclass(frozen=True)
class FlightLogEntry:
    pilot_id: str
    airline: str
    flight_number: str
    aircraft_type: str
    departure_icao: str
    arrival_icao: str
    flight_time_minutes: int
    aircraft_registration: str = ""
    remarks: str = ""


def rejection_message(
        pilot: PilotProfile,
        aircraft_type: str,
        result: AuthorizationResult,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> Optional[str]:
    """
    User-facing reason a flight cannot be logged, or None if it can.
    A rank shortfall is reported before a missing type rating.
    """
    if result.authorized:
        return None
    if not result.rank_ok:
        return (
            f"Your current rank ({pilot.rank}) is not sufficient for the {aircraft_type}. "
            f"Required: {result.required_rank}."
        )
    family_name = tables.family_display_name(result.required_family)
    return (
        f"You do not have the required type rating for the {aircraft_type} "
        f"({family_name} family)."
    )


def _validate_entry(entry: FlightLogEntry) -> None:
    required = {
        "airline": entry.airline,
        "flight_number": entry.flight_number,
        "aircraft_type": entry.aircraft_type,
        "departure_icao": entry.departure_icao,
        "arrival_icao": entry.arrival_icao,
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise ValueError(f"Flight entry is missing required fields: {', '.join(missing)}")
    if entry.flight_time_minutes <= 0:
        raise ValueError(f"flight_time_minutes must be > 0 (got {entry.flight_time_minutes})")


def check_flight_entry(
        pilot: PilotProfile,
        entry: FlightLogEntry,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> AuthorizationResult:
    """
    Validate a flight before it is persisted. The aircraft type is re-checked
    here even if the form already filtered the selectable types.
    """
    _validate_entry(entry)
    if entry.pilot_id != pilot.pilot_id:
        raise ValueError(f"Entry belongs to {entry.pilot_id}, not {pilot.pilot_id}")

    result = authorize_pilot(pilot, entry.aircraft_type, tables=tables)
    message = rejection_message(pilot, entry.aircraft_type, result, tables=tables)
    if message is not None:
        logger.warning("Rejected flight %s for pilot %s: %s", entry.flight_number, pilot.pilot_id, message)
        raise FlightNotAuthorizedError(message, result)
    return result


class Logbook:
    """In-memory flight log. Entries are only appended after passing check_flight_entry."""

    def __init__(self, tables: EligibilityTables = DEFAULT_TABLES):
        self.tables = tables
        self._entries: Dict[str, List[FlightLogEntry]] = {}

    def log(self, pilot: PilotProfile, entry: FlightLogEntry) -> FlightLogEntry:
        check_flight_entry(pilot, entry, tables=self.tables)
        self._entries.setdefault(pilot.pilot_id, []).append(entry)
        logger.info("Logged flight %s for pilot %s", entry.flight_number, pilot.pilot_id)
        return entry

    def entries_for(self, pilot_id: str) -> List[FlightLogEntry]:
        return list(self._entries.get(pilot_id, []))

    def total_minutes(self, pilot_id: str) -> int:
        return sum(e.flight_time_minutes for e in self._entries.get(pilot_id, []))
