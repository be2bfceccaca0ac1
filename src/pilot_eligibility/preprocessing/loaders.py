from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from pilot_eligibility.domain.fleet import Airline, FleetAircraft
from pilot_eligibility.domain.pilot import PilotProfile
from pilot_eligibility.domain.rank import DEFAULT_RANK
from pilot_eligibility.domain.training import PENDING, TrainingRequest
from pilot_eligibility.reference.tables import DEFAULT_TABLES, EligibilityTables, freeze_tables

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _pilot_from_dict(p: Dict[str, Any]) -> PilotProfile:
    rank = p.get("rank", DEFAULT_RANK.value)
    if rank is None:
        rank = ""  # stored profile without a rank: never satisfies a requirement
    return PilotProfile(
        pilot_id=str(p["pilot_id"]),
        display_name=p.get("display_name") or "",
        rank=str(rank),
        type_ratings=frozenset(p.get("type_ratings") or []),
        is_staff=bool(p.get("is_staff", False)),
        authorized_airlines=tuple(p.get("authorized_airlines") or []),
    )


def load_pilots(path: Path) -> List[PilotProfile]:
    obj = _read_json(path)
    pilots = [_pilot_from_dict(p) for p in obj.get("pilots", [])]
    logger.info("Loaded %d pilots from %s", len(pilots), path)
    return pilots


def _fleet_entry(entry: Any) -> FleetAircraft:
    # Fleets may list bare type codes when no registrations are known.
    if isinstance(entry, str):
        return FleetAircraft(type_code=entry)
    return FleetAircraft(
        type_code=entry["type"],
        registrations=tuple(entry.get("registrations", [])),
    )


def load_airlines(path: Path) -> List[Airline]:
    obj = _read_json(path)
    airlines = [
        Airline(
            name=a["name"],
            icao_code=a["icao_code"],
            bases=tuple(a.get("bases", [])),
            fleet=tuple(_fleet_entry(e) for e in a.get("fleet", [])),
        )
        for a in obj.get("airlines", [])
    ]
    logger.info("Loaded %d airlines from %s", len(airlines), path)
    return airlines


def load_training_requests(path: Path) -> List[TrainingRequest]:
    if not path.exists():
        return []  # training requests are optional

    obj = _read_json(path)
    return [
        TrainingRequest(
            request_id=str(r["request_id"]),
            pilot_id=str(r["pilot_id"]),
            category=r["category"],
            desired_rank=r.get("desired_rank"),
            aircraft_type=r.get("aircraft_type"),
            status=r.get("status", PENDING),
        )
        for r in obj.get("training_requests", [])
    ]


def load_tables(path: Path, base: EligibilityTables = DEFAULT_TABLES) -> EligibilityTables:
    """
    Reference tables with the overrides in `path` merged on top of `base`.
    A missing file means no overrides.
    """
    if not path.exists():
        return base

    obj = _read_json(path)
    tables = freeze_tables(
        rank_order={**base.rank_order, **{k: int(v) for k, v in obj.get("rank_order", {}).items()}},
        min_ranks={**base.min_ranks, **obj.get("min_ranks", {})},
        families={**base.families, **obj.get("families", {})},
        family_names={**base.family_names, **obj.get("family_names", {})},
    )
    logger.info("Loaded reference table overrides from %s", path)
    return tables


def load_changes(path: Path) -> List[Dict[str, Any]]:
    obj = _read_json(path)
    return list(obj.get("changes", []))
