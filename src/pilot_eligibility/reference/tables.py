from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class EligibilityTables:
    """
    Static reference data the eligibility rules read.

    Attributes
    ----------
    rank_order : Mapping[str, int]
        Rank value -> rung. Higher rung = more senior.
    min_ranks : Mapping[str, str]
        Aircraft type code -> minimum rank value. Absent types are unrestricted.
    families : Mapping[str, str]
        Aircraft type code -> type-rating family. Absent types need no rating.
    family_names : Mapping[str, str]
        Family -> display name used in messages and reports.
    """
    rank_order: Mapping[str, int]
    min_ranks: Mapping[str, str]
    families: Mapping[str, str]
    family_names: Mapping[str, str]

    def family_display_name(self, family: Optional[str]) -> str:
        if family is None:
            return "N/A"
        return self.family_names.get(family, family)


def freeze_tables(
        rank_order: Mapping[str, int],
        min_ranks: Mapping[str, str],
        families: Mapping[str, str],
        family_names: Mapping[str, str],
) -> EligibilityTables:
    """Copy the given mappings into read-only views."""
    return EligibilityTables(
        rank_order=MappingProxyType(dict(rank_order)),
        min_ranks=MappingProxyType(dict(min_ranks)),
        families=MappingProxyType(dict(families)),
        family_names=MappingProxyType(dict(family_names)),
    )


RANK_ORDER = {
    "Visitor": 0,
    "Trainee": 1,
    "First Officer": 2,
    "Captain": 3,
}

AIRCRAFT_MIN_RANKS = {
    # General aviation
    "C172": "Visitor", "DA40": "Visitor",

    # Regional and narrow-body entry types
    "DH8D": "Trainee", "E190": "Trainee", "ATR42": "Trainee", "ATR72": "Trainee",
    "CRJ100": "Trainee", "CRJ200": "Trainee",
    "ERJ135": "Trainee", "ERJ140": "Trainee", "ERJ145": "Trainee",
    "Saab340": "Trainee", "Saab2000": "Trainee", "Fokker50": "Trainee", "EMB120": "Trainee",
    "A220": "Trainee", "A220-100": "Trainee", "A220-300": "Trainee",
    "A318": "Trainee", "A319": "Trainee",
    "B717": "Trainee", "B737": "Trainee", "B737MAX": "Trainee",
    "E170": "Trainee", "E175": "Trainee", "E195": "Trainee",
    "SSJ100": "Trainee",

    # Medium
    "A20N": "First Officer", "A21N": "First Officer", "A320": "First Officer", "A321": "First Officer",
    "B38M": "First Officer", "B738": "First Officer", "B757": "First Officer", "B752": "First Officer",
    "CRJ700": "First Officer", "CRJ900": "First Officer", "CRJ1000": "First Officer",
    "M90": "First Officer",

    # Heavy / long haul
    "A300": "Captain", "A310": "Captain", "A330": "Captain", "A340": "Captain",
    "A350": "Captain", "A380": "Captain",
    "B707": "Captain", "B727": "Captain", "B747": "Captain", "B767": "Captain",
    "B777": "Captain", "B787": "Captain",
    "DC-10": "Captain", "MD-11": "Captain", "L-1011": "Captain",
    "C919": "Captain", "MC-21": "Captain",
    "A321neo": "Captain",
    "F100": "Captain",

    # Cargo
    "B737-300F": "Captain", "B737-800BCF": "Captain",
    "B747-400F": "Captain", "B747-8F": "Captain",
    "B767-300F": "Captain", "B777F": "Captain",
    "A300F": "Captain", "A310F": "Captain", "A330F": "Captain",
    "DC-10F": "Captain", "MD-11F": "Captain",
    "An-124": "Captain", "An-225": "Captain", "C-5": "Captain", "Il-76": "Captain",
}

# C172 and DA40 are deliberately absent: no type rating needed.
AIRCRAFT_FAMILIES = {
    "DH8D": "DASH8_FAMILY",
    "E170": "EJET_FAMILY", "E175": "EJET_FAMILY", "E190": "EJET_FAMILY", "E195": "EJET_FAMILY",
    "ATR42": "ATR_FAMILY", "ATR72": "ATR_FAMILY",
    "CRJ100": "CRJ_FAMILY", "CRJ200": "CRJ_FAMILY", "CRJ700": "CRJ_FAMILY",
    "CRJ900": "CRJ_FAMILY", "CRJ1000": "CRJ_FAMILY",
    "ERJ135": "ERJ_FAMILY", "ERJ140": "ERJ_FAMILY", "ERJ145": "ERJ_FAMILY",
    "Saab340": "SAAB_FAMILY", "Saab2000": "SAAB_FAMILY",
    "Fokker50": "FOKKER_FAMILY", "F100": "FOKKER_FAMILY",
    "EMB120": "EMB120_FAMILY",
    "A220": "A220_FAMILY", "A220-100": "A220_FAMILY", "A220-300": "A220_FAMILY",
    "A318": "A320_FAMILY", "A319": "A320_FAMILY", "A320": "A320_FAMILY", "A321": "A320_FAMILY",
    "A20N": "A320NEO_FAMILY", "A21N": "A320NEO_FAMILY", "A321neo": "A320NEO_FAMILY",
    "B717": "B717_FAMILY",
    "B737": "B737_FAMILY", "B738": "B737_FAMILY",
    "B737-300F": "B737_FAMILY", "B737-800BCF": "B737_FAMILY",
    "B737MAX": "B737MAX_FAMILY", "B38M": "B737MAX_FAMILY",
    "SSJ100": "SSJ100_FAMILY",
    "B757": "B757_FAMILY", "B752": "B757_FAMILY",
    "M90": "MD90_FAMILY",
    "A300": "A300_FAMILY", "A310": "A300_FAMILY", "A300F": "A300_FAMILY", "A310F": "A300_FAMILY",
    "A330": "A330_FAMILY", "A330F": "A330_FAMILY",
    "A340": "A340_FAMILY",
    "A350": "A350_FAMILY",
    "A380": "A380_FAMILY",
    "B707": "B707_FAMILY",
    "B727": "B727_FAMILY",
    "B747": "B747_FAMILY", "B747-400F": "B747_FAMILY", "B747-8F": "B747_FAMILY",
    "B767": "B767_FAMILY", "B767-300F": "B767_FAMILY",
    "B777": "B777_FAMILY", "B777F": "B777_FAMILY",
    "B787": "B787_FAMILY",
    "DC-10": "DC10_FAMILY", "MD-11": "DC10_FAMILY", "DC-10F": "DC10_FAMILY", "MD-11F": "DC10_FAMILY",
    "L-1011": "L1011_FAMILY",
    "C919": "C919_FAMILY",
    "MC-21": "MC21_FAMILY",
    "An-124": "AN124_FAMILY",
    "An-225": "AN225_FAMILY",
    "C-5": "C5_FAMILY",
    "Il-76": "IL76_FAMILY",
}

FAMILY_NAMES = {
    "DASH8_FAMILY": "De Havilland Canada Dash 8 Series",
    "EJET_FAMILY": "Embraer E-Jet Family",
    "ATR_FAMILY": "ATR 42/72 Series",
    "CRJ_FAMILY": "Bombardier CRJ Series",
    "ERJ_FAMILY": "Embraer ERJ Family",
    "SAAB_FAMILY": "Saab 340/2000 Series",
    "FOKKER_FAMILY": "Fokker 50/70/100 Series",
    "EMB120_FAMILY": "Embraer EMB 120 Brasilia",
    "A220_FAMILY": "Airbus A220 Family",
    "A320_FAMILY": "Airbus A320 Family",
    "A320NEO_FAMILY": "Airbus A320neo Family",
    "B717_FAMILY": "Boeing 717",
    "B737_FAMILY": "Boeing 737 Series",
    "B737MAX_FAMILY": "Boeing 737 MAX Series",
    "SSJ100_FAMILY": "Sukhoi Superjet 100",
    "B757_FAMILY": "Boeing 757 Series",
    "MD90_FAMILY": "McDonnell Douglas MD-90",
    "A300_FAMILY": "Airbus A300/A310 Series",
    "A330_FAMILY": "Airbus A330 Family",
    "A340_FAMILY": "Airbus A340 Family",
    "A350_FAMILY": "Airbus A350 Family",
    "A380_FAMILY": "Airbus A380",
    "B707_FAMILY": "Boeing 707",
    "B727_FAMILY": "Boeing 727",
    "B747_FAMILY": "Boeing 747 Series",
    "B767_FAMILY": "Boeing 767 Series",
    "B777_FAMILY": "Boeing 777 Series",
    "B787_FAMILY": "Boeing 787 Dreamliner",
    "DC10_FAMILY": "McDonnell Douglas DC-10/MD-11 Series",
    "L1011_FAMILY": "Lockheed L-1011 TriStar",
    "C919_FAMILY": "COMAC C919",
    "MC21_FAMILY": "Irkut MC-21",
    "AN124_FAMILY": "Antonov An-124 Ruslan",
    "AN225_FAMILY": "Antonov An-225 Mriya",
    "C5_FAMILY": "Lockheed C-5 Galaxy",
    "IL76_FAMILY": "Ilyushin Il-76",
}

DEFAULT_TABLES = freeze_tables(RANK_ORDER, AIRCRAFT_MIN_RANKS, AIRCRAFT_FAMILIES, FAMILY_NAMES)
