from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from pilot_eligibility.domain.fleet import Airline
from pilot_eligibility.domain.pilot import PilotProfile
from pilot_eligibility.reference.tables import DEFAULT_TABLES, EligibilityTables
from pilot_eligibility.rules.fleet_filter import airline_selectable_types, registrations_for_type


class BookingNotAllowedError(ValueError):
    pass


@dataclass(frozen=True)
class FlightBooking:
    pilot_id: str
    airline: str
    flight_number: str
    departure_icao: str
    arrival_icao: str
    aircraft_type: str
    aircraft_registration: str = ""


def default_aircraft_choice(
        pilot: PilotProfile,
        airline: Airline,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> Tuple[Optional[str], Optional[str]]:
    """First selectable type for the airline and its first registration."""
    types = airline_selectable_types(pilot, airline, tables=tables)
    if not types:
        return None, None
    regs = registrations_for_type(airline, types[0])
    return types[0], (regs[0] if regs else None)


def plan_booking(
        pilot: PilotProfile,
        airline: Airline,
        flight_number: str,
        departure_icao: str,
        arrival_icao: str,
        aircraft_type: str,
        aircraft_registration: Optional[str] = None,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> FlightBooking:
    if not flight_number or not departure_icao or not arrival_icao:
        raise ValueError("Flight number, departure and arrival are required")

    selectable = airline_selectable_types(pilot, airline, tables=tables)
    if aircraft_type not in selectable:
        raise BookingNotAllowedError(
            f"{aircraft_type} is not available to {pilot.pilot_id} at {airline.name} "
            f"(selectable: {', '.join(selectable) or 'none'})"
        )

    regs = registrations_for_type(airline, aircraft_type)
    if aircraft_registration is None:
        aircraft_registration = regs[0] if regs else ""
    elif regs and aircraft_registration not in regs:
        raise ValueError(f"Registration {aircraft_registration} is not a {aircraft_type} of {airline.name}")

    return FlightBooking(
        pilot_id=pilot.pilot_id,
        airline=airline.name,
        flight_number=flight_number,
        departure_icao=departure_icao.upper(),
        arrival_icao=arrival_icao.upper(),
        aircraft_type=aircraft_type,
        aircraft_registration=aircraft_registration,
    )
