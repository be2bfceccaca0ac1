import matplotlib

matplotlib.use("Agg")

import pytest

from pilot_eligibility.domain.fleet import Airline, FleetAircraft
from pilot_eligibility.domain.pilot import PilotProfile


@pytest.fixture
def icarion():
    return Airline(
        name="Icarion Virtual",
        icao_code="ICN",
        bases=("LGIR", "LGAV"),
        fleet=(
            FleetAircraft("A320", ("G-ICAR", "G-IONA")),
            FleetAircraft("B737", ("G-ICB1", "G-ICB2")),
            FleetAircraft("A330", ("G-ICN1", "G-ICN2")),
            FleetAircraft("B787", ("G-ICD1", "G-ICD2")),
            FleetAircraft("C172", ("G-CESS",)),
        ),
    )


@pytest.fixture
def aegean():
    return Airline(
        name="Aegean Airlines",
        icao_code="AEE",
        bases=("LGAV", "LGTS"),
        fleet=(FleetAircraft("A320"), FleetAircraft("A321"), FleetAircraft("ATR72")),
    )


@pytest.fixture
def captain():
    return PilotProfile(
        pilot_id="ICN001",
        display_name="Eleni Markou",
        rank="Captain",
        type_ratings=frozenset({"A320_FAMILY", "A330_FAMILY", "B787_FAMILY"}),
        is_staff=True,
    )


@pytest.fixture
def first_officer():
    return PilotProfile(
        pilot_id="ICN002",
        display_name="Jonas Weber",
        rank="First Officer",
        type_ratings=frozenset({"A320_FAMILY", "B737_FAMILY"}),
    )


@pytest.fixture
def trainee():
    return PilotProfile(
        pilot_id="ICN003",
        display_name="Marta Vella",
        rank="Trainee",
        type_ratings=frozenset({"A320_FAMILY", "ATR_FAMILY"}),
    )


@pytest.fixture
def visitor():
    return PilotProfile(pilot_id="ICN004", display_name="Luca Bianchi")
