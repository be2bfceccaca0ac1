import pytest

from pilot_eligibility.rules.eligibility import authorize_pilot
from pilot_eligibility.workflows.logbook import (
    FlightLogEntry,
    FlightNotAuthorizedError,
    Logbook,
    check_flight_entry,
    rejection_message,
)


def make_entry(pilot_id="ICN002", aircraft_type="A320", **overrides):
    fields = dict(
        pilot_id=pilot_id,
        airline="Icarion Virtual",
        flight_number="ICN123",
        aircraft_type=aircraft_type,
        departure_icao="LGAV",
        arrival_icao="LGIR",
        flight_time_minutes=55,
        aircraft_registration="G-ICAR",
    )
    fields.update(overrides)
    return FlightLogEntry(**fields)


class TestRejectionMessage:

    def test_authorized_has_no_message(self, first_officer):
        result = authorize_pilot(first_officer, "A320")
        assert rejection_message(first_officer, "A320", result) is None

    def test_rank_message(self, first_officer):
        result = authorize_pilot(first_officer, "B777")
        assert rejection_message(first_officer, "B777", result) == (
            "Your current rank (First Officer) is not sufficient for the B777. Required: Captain."
        )

    def test_rating_message(self, captain):
        result = authorize_pilot(captain, "B777")
        assert rejection_message(captain, "B777", result) == (
            "You do not have the required type rating for the B777 (Boeing 777 Series family)."
        )

    def test_rank_reported_before_rating(self, visitor):
        result = authorize_pilot(visitor, "A320")
        assert not result.rank_ok and not result.rating_ok
        assert rejection_message(visitor, "A320", result).startswith("Your current rank (Visitor)")


class TestCheckFlightEntry:

    def test_accepts_authorized_flight(self, first_officer):
        result = check_flight_entry(first_officer, make_entry())
        assert result.authorized is True

    def test_rejects_unauthorized_type(self, trainee):
        with pytest.raises(FlightNotAuthorizedError) as exc:
            check_flight_entry(trainee, make_entry(pilot_id="ICN003", aircraft_type="A320"))
        assert exc.value.result.rank_ok is False
        assert exc.value.result.rating_ok is True
        assert "Required: First Officer" in str(exc.value)

    def test_missing_fields(self, first_officer):
        with pytest.raises(ValueError, match="missing required fields: flight_number, arrival_icao"):
            check_flight_entry(first_officer, make_entry(flight_number="", arrival_icao=""))

    def test_non_positive_flight_time(self, first_officer):
        with pytest.raises(ValueError, match="flight_time_minutes"):
            check_flight_entry(first_officer, make_entry(flight_time_minutes=0))

    def test_entry_for_other_pilot(self, first_officer):
        with pytest.raises(ValueError, match="not ICN002"):
            check_flight_entry(first_officer, make_entry(pilot_id="ICN999"))


class TestLogbook:

    def setup_method(self):
        self.logbook = Logbook()

    def test_log_and_totals(self, first_officer):
        self.logbook.log(first_officer, make_entry())
        self.logbook.log(first_officer, make_entry(aircraft_type="B737", flight_time_minutes=65))

        assert len(self.logbook.entries_for("ICN002")) == 2
        assert self.logbook.total_minutes("ICN002") == 120
        assert self.logbook.entries_for("ICN001") == []

    def test_rejected_flight_is_not_stored(self, visitor):
        with pytest.raises(FlightNotAuthorizedError):
            self.logbook.log(visitor, make_entry(pilot_id="ICN004", aircraft_type="A330"))
        assert self.logbook.entries_for("ICN004") == []
        assert self.logbook.total_minutes("ICN004") == 0
