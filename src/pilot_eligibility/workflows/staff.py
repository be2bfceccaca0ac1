from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Sequence, Tuple

from pilot_eligibility.domain.pilot import PilotProfile
from pilot_eligibility.domain.rank import Rank, rank_key
from pilot_eligibility.domain.training import (
    APPROVED,
    GENERAL_TRAINING,
    PENDING,
    RANK_UPGRADE,
    TYPE_RATING,
    TrainingRequest,
)
from pilot_eligibility.reference.tables import DEFAULT_TABLES, EligibilityTables
from pilot_eligibility.rules.eligibility import required_family_for

logger = logging.getLogger(__name__)


def set_rank(
        pilot: PilotProfile,
        rank: str,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> PilotProfile:
    new_rank = rank_key(rank)
    if new_rank not in tables.rank_order:
        raise ValueError(f"Unknown rank: {rank!r}")
    logger.info("Pilot %s rank %s -> %s", pilot.pilot_id, pilot.rank or "<none>", new_rank)
    return pilot.with_rank(new_rank)


def _check_family(family: str, tables: EligibilityTables) -> None:
    if family not in tables.family_names:
        raise ValueError(f"Unknown aircraft family: {family}")


def grant_type_rating(
        pilot: PilotProfile,
        family: str,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> PilotProfile:
    _check_family(family, tables)
    if family in pilot.type_ratings:
        return pilot
    logger.info("Granted %s to pilot %s", family, pilot.pilot_id)
    return pilot.with_type_ratings(pilot.type_ratings | {family})


def revoke_type_rating(
        pilot: PilotProfile,
        family: str,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> PilotProfile:
    _check_family(family, tables)
    if family not in pilot.type_ratings:
        return pilot
    logger.info("Revoked %s from pilot %s", family, pilot.pilot_id)
    return pilot.with_type_ratings(pilot.type_ratings - {family})


def _apply_training(
        pilot: PilotProfile,
        request: TrainingRequest,
        tables: EligibilityTables,
) -> PilotProfile:
    if request.category == RANK_UPGRADE:
        if not request.desired_rank:
            raise ValueError(f"Request {request.request_id} has no desired rank")
        return set_rank(pilot, request.desired_rank, tables=tables)

    if request.category == TYPE_RATING:
        family = required_family_for(request.aircraft_type or "", tables=tables)
        if family is None:
            raise ValueError(
                f"Request {request.request_id}: {request.aircraft_type!r} does not need a type rating"
            )
        return grant_type_rating(pilot, family, tables=tables)

    if request.category == GENERAL_TRAINING:
        return pilot

    raise ValueError(f"Unknown training category: {request.category}")


def approve_training_request(
        pilot: PilotProfile,
        request: TrainingRequest,
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> Tuple[PilotProfile, TrainingRequest]:
    """
    Approve a pending training request.

    Rank upgrades set the desired rank; type-rating requests grant the family
    of the requested aircraft type. General training changes nothing.

    Returns the updated profile and the request marked Approved. The returned
    request can no longer be approved.
    """
    if request.pilot_id != pilot.pilot_id:
        raise ValueError(f"Request {request.request_id} belongs to {request.pilot_id}, not {pilot.pilot_id}")
    if request.status != PENDING:
        raise ValueError(f"Request {request.request_id} is {request.status}, only Pending requests can be approved")

    updated = _apply_training(pilot, request, tables)
    logger.info("Approved training request %s (%s) for pilot %s", request.request_id, request.category, pilot.pilot_id)
    return updated, replace(request, status=APPROVED)


def apply_changes(
        pilots: Sequence[PilotProfile],
        changes: List[Dict[str, Any]],
        *,
        tables: EligibilityTables = DEFAULT_TABLES,
) -> List[PilotProfile]:
    """Apply a batch of staff edits, returning the updated roster in input order."""
    by_id = {p.pilot_id: p for p in pilots}

    for ch in changes:
        ch_type = ch["type"]
        p_id = ch["pilot_id"]
        if p_id not in by_id:
            raise ValueError(f"Unknown pilot_id in change: {p_id}")
        p = by_id[p_id]

        if ch_type == "set_rank":
            by_id[p_id] = set_rank(p, ch["rank"], tables=tables)

        elif ch_type == "grant_type_rating":
            by_id[p_id] = grant_type_rating(p, ch["family"], tables=tables)

        elif ch_type == "revoke_type_rating":
            by_id[p_id] = revoke_type_rating(p, ch["family"], tables=tables)

        elif ch_type == "set_staff":
            by_id[p_id] = replace(p, is_staff=bool(ch["is_staff"]))

        else:
            raise ValueError(f"Unknown change type: {ch_type}")

    return [by_id[p.pilot_id] for p in pilots]


def available_training_ranks(tables: EligibilityTables = DEFAULT_TABLES) -> List[str]:
    """Ranks a pilot can request training for: everything above Visitor."""
    floor = tables.rank_order[Rank.VISITOR.value]
    ranked = sorted(tables.rank_order.items(), key=lambda kv: kv[1])
    return [name for name, r in ranked if r > floor]


def available_type_rating_families(tables: EligibilityTables = DEFAULT_TABLES) -> List[str]:
    """Unique families in reference-table order."""
    return list(dict.fromkeys(tables.families.values()))
