import pytest

from pilot_eligibility.domain.training import TrainingRequest
from pilot_eligibility.reference.tables import (
    AIRCRAFT_FAMILIES,
    AIRCRAFT_MIN_RANKS,
    FAMILY_NAMES,
    RANK_ORDER,
    freeze_tables,
)
from pilot_eligibility.workflows.staff import (
    apply_changes,
    approve_training_request,
    available_training_ranks,
    available_type_rating_families,
    grant_type_rating,
    revoke_type_rating,
    set_rank,
)


@pytest.fixture
def senior_tables():
    """Default tables plus a rank above Captain."""
    return freeze_tables({**RANK_ORDER, "Senior Captain": 4}, AIRCRAFT_MIN_RANKS, AIRCRAFT_FAMILIES, FAMILY_NAMES)


class TestProfileEdits:
    """Staff edits of rank and type ratings."""

    def test_set_rank(self, visitor):
        updated = set_rank(visitor, "Trainee")
        assert updated.rank == "Trainee"
        assert visitor.rank == "Visitor"

    def test_set_unknown_rank(self, visitor):
        with pytest.raises(ValueError, match="Unknown rank"):
            set_rank(visitor, "Commodore")

    def test_set_rank_from_active_tables(self, visitor, senior_tables):
        assert set_rank(visitor, "Senior Captain", tables=senior_tables).rank == "Senior Captain"
        with pytest.raises(ValueError, match="Unknown rank"):
            set_rank(visitor, "Senior Captain")

    def test_grant_and_revoke(self, visitor):
        granted = grant_type_rating(visitor, "ATR_FAMILY")
        assert granted.type_ratings == frozenset({"ATR_FAMILY"})

        revoked = revoke_type_rating(granted, "ATR_FAMILY")
        assert revoked.type_ratings == frozenset()

    def test_grant_is_idempotent(self, first_officer):
        assert grant_type_rating(first_officer, "A320_FAMILY") is first_officer

    def test_revoke_missing_is_noop(self, visitor):
        assert revoke_type_rating(visitor, "A320_FAMILY") is visitor

    def test_unknown_family(self, visitor):
        with pytest.raises(ValueError, match="Unknown aircraft family"):
            grant_type_rating(visitor, "A320")
        with pytest.raises(ValueError):
            revoke_type_rating(visitor, "CESSNA_FAMILY")


class TestApplyChanges:

    def test_batch(self, first_officer, visitor):
        changes = [
            {"type": "set_rank", "pilot_id": "ICN004", "rank": "Trainee"},
            {"type": "grant_type_rating", "pilot_id": "ICN004", "family": "ATR_FAMILY"},
            {"type": "revoke_type_rating", "pilot_id": "ICN002", "family": "B737_FAMILY"},
            {"type": "set_staff", "pilot_id": "ICN002", "is_staff": True},
        ]
        fo, v = apply_changes([first_officer, visitor], changes)

        assert fo.type_ratings == frozenset({"A320_FAMILY"})
        assert fo.is_staff is True
        assert v.rank == "Trainee"
        assert v.type_ratings == frozenset({"ATR_FAMILY"})

    def test_unknown_change_type(self, visitor):
        with pytest.raises(ValueError, match="Unknown change type"):
            apply_changes([visitor], [{"type": "delete", "pilot_id": "ICN004"}])

    def test_unknown_pilot(self, visitor):
        with pytest.raises(ValueError, match="Unknown pilot_id"):
            apply_changes([visitor], [{"type": "set_rank", "pilot_id": "X", "rank": "Captain"}])

    def test_rank_added_by_table_overrides(self, visitor, senior_tables):
        changes = [{"type": "set_rank", "pilot_id": "ICN004", "rank": "Senior Captain"}]

        (updated,) = apply_changes([visitor], changes, tables=senior_tables)

        assert updated.rank == "Senior Captain"
        with pytest.raises(ValueError, match="Unknown rank"):
            apply_changes([visitor], changes)


class TestTrainingApproval:

    def test_rank_upgrade(self, trainee):
        req = TrainingRequest("TR-1", "ICN003", "Rank Upgrade", desired_rank="First Officer")
        updated, approved = approve_training_request(trainee, req)
        assert updated.rank == "First Officer"
        assert approved.status == "Approved"
        assert req.status == "Pending"

    def test_rank_upgrade_to_rank_from_active_tables(self, trainee, senior_tables):
        req = TrainingRequest("TR-1", "ICN003", "Rank Upgrade", desired_rank="Senior Captain")
        updated, _ = approve_training_request(trainee, req, tables=senior_tables)
        assert updated.rank == "Senior Captain"

    def test_type_rating_grants_family_of_type(self, visitor):
        req = TrainingRequest("TR-2", "ICN004", "Aircraft Type Rating", aircraft_type="ATR72")
        updated, approved = approve_training_request(visitor, req)
        assert updated.type_ratings == frozenset({"ATR_FAMILY"})
        assert approved.status == "Approved"

    def test_second_approval_is_rejected(self, visitor):
        req = TrainingRequest("TR-2", "ICN004", "Aircraft Type Rating", aircraft_type="ATR72")
        updated, approved = approve_training_request(visitor, req)

        with pytest.raises(ValueError, match="TR-2 is Approved, only Pending"):
            approve_training_request(updated, approved)

    def test_type_rating_for_unrated_type(self, visitor):
        req = TrainingRequest("TR-3", "ICN004", "Aircraft Type Rating", aircraft_type="C172")
        with pytest.raises(ValueError, match="does not need a type rating"):
            approve_training_request(visitor, req)

    def test_general_training_changes_nothing(self, visitor):
        req = TrainingRequest("TR-4", "ICN004", "General Training")
        updated, approved = approve_training_request(visitor, req)
        assert updated is visitor
        assert approved.status == "Approved"

    def test_only_pending_requests(self, trainee):
        req = TrainingRequest("TR-5", "ICN003", "Rank Upgrade", desired_rank="Captain", status="Rejected")
        with pytest.raises(ValueError, match="only Pending"):
            approve_training_request(trainee, req)

    def test_wrong_pilot(self, trainee):
        req = TrainingRequest("TR-6", "ICN999", "Rank Upgrade", desired_rank="Captain")
        with pytest.raises(ValueError, match="belongs to ICN999"):
            approve_training_request(trainee, req)

    def test_unknown_category(self, trainee):
        req = TrainingRequest("TR-7", "ICN003", "Checkride")
        with pytest.raises(ValueError, match="Unknown training category"):
            approve_training_request(trainee, req)


class TestTrainingOptions:

    def test_ranks_above_visitor(self):
        assert available_training_ranks() == ["Trainee", "First Officer", "Captain"]

    def test_families_unique(self):
        families = available_type_rating_families()
        assert len(families) == len(set(families))
        assert set(families) == set(FAMILY_NAMES)
        assert families[0] == "DASH8_FAMILY"
