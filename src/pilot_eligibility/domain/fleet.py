from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class FleetAircraft:
    """One aircraft type operated by an airline, with known registrations."""
    type_code: str
    registrations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Airline:
    """
    An airline pilots can book and log flights for.

    Attributes
    ----------
    name : str
        Display name (e.g. "Icarion Virtual").
    icao_code : str
        Three-letter ICAO airline designator.
    bases : Tuple[str, ...]
        ICAO codes of base airports. May be empty.
    fleet : Tuple[FleetAircraft, ...]
        Aircraft types operated, in presentation order.
    """
    name: str
    icao_code: str
    bases: Tuple[str, ...]
    fleet: Tuple[FleetAircraft, ...]

    @property
    def aircraft_types(self) -> List[str]:
        return [ac.type_code for ac in self.fleet]
