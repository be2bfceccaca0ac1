import pytest

from pilot_eligibility.workflows.booking import (
    BookingNotAllowedError,
    default_aircraft_choice,
    plan_booking,
)


class TestDefaultAircraftChoice:

    def test_first_selectable_with_registration(self, first_officer, icarion):
        assert default_aircraft_choice(first_officer, icarion) == ("A320", "G-ICAR")

    def test_visitor_gets_cessna(self, visitor, icarion):
        assert default_aircraft_choice(visitor, icarion) == ("C172", "G-CESS")

    def test_no_registrations_known(self, first_officer, aegean):
        assert default_aircraft_choice(first_officer, aegean) == ("A320", None)

    def test_nothing_selectable(self, visitor, aegean):
        assert default_aircraft_choice(visitor, aegean) == (None, None)


class TestPlanBooking:

    def test_books_with_default_registration(self, captain, icarion):
        b = plan_booking(captain, icarion, "ICN400", "lgav", "eddh", "A330")
        assert b.aircraft_registration == "G-ICN1"
        assert b.departure_icao == "LGAV"
        assert b.arrival_icao == "EDDH"
        assert b.airline == "Icarion Virtual"

    def test_explicit_registration(self, captain, icarion):
        b = plan_booking(captain, icarion, "ICN401", "LGAV", "EDDH", "A330", "G-ICN2")
        assert b.aircraft_registration == "G-ICN2"

    def test_wrong_registration(self, captain, icarion):
        with pytest.raises(ValueError, match="G-ICAR is not a A330"):
            plan_booking(captain, icarion, "ICN402", "LGAV", "EDDH", "A330", "G-ICAR")

    def test_type_not_selectable(self, first_officer, icarion):
        with pytest.raises(BookingNotAllowedError, match="B787 is not available"):
            plan_booking(first_officer, icarion, "ICN403", "LGAV", "LGIR", "B787")

    def test_type_outside_fleet(self, captain, icarion):
        with pytest.raises(BookingNotAllowedError):
            plan_booking(captain, icarion, "ICN404", "LGAV", "LGIR", "A350")

    def test_required_fields(self, captain, icarion):
        with pytest.raises(ValueError, match="required"):
            plan_booking(captain, icarion, "", "LGAV", "LGIR", "A320")
