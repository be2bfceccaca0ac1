from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from pilot_eligibility.domain.training import PENDING
from pilot_eligibility.preprocessing.loaders import load_changes, load_pilots, load_tables, load_training_requests
from pilot_eligibility.workflows.staff import apply_changes, approve_training_request

"""
Default run:
    python scripts/apply_staff_changes.py

Approve pending training requests as well:
    python scripts/apply_staff_changes.py --approve-training
"""

DEFAULT_DATA_DIR = Path("data/sample")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--data-dir", type=Path, default=DEFAULT_DATA_DIR)
    parser.add_argument("--changes", type=Path, default=None, help="Defaults to <data-dir>/changes.json")
    parser.add_argument("--approve-training", action="store_true")
    parser.add_argument("--out", type=Path, default=Path("outputs/pilots.json"))
    parser.add_argument("--requests-out", type=Path, default=Path("outputs/training_requests.json"))
    args = parser.parse_args()

    data = args.data_dir
    tables = load_tables(data / "tables.json")
    pilots = load_pilots(data / "pilots.json")
    changes = load_changes(args.changes or data / "changes.json")

    updated = apply_changes(pilots, changes, tables=tables)
    print(f"Applied {len(changes)} staff changes")

    if args.approve_training:
        by_id = {p.pilot_id: p for p in updated}
        requests = []
        for req in load_training_requests(data / "training_requests.json"):
            if req.status == PENDING and req.pilot_id in by_id:
                by_id[req.pilot_id], req = approve_training_request(by_id[req.pilot_id], req, tables=tables)
                print(f"Approved {req.request_id} ({req.category}) for {req.pilot_id}")
            requests.append(req)
        updated = [by_id[p.pilot_id] for p in updated]

        req_payload = {
            "training_requests": [
                {
                    "request_id": r.request_id,
                    "pilot_id": r.pilot_id,
                    "category": r.category,
                    "desired_rank": r.desired_rank,
                    "aircraft_type": r.aircraft_type,
                    "status": r.status,
                }
                for r in requests
            ]
        }
        args.requests_out.parent.mkdir(parents=True, exist_ok=True)
        args.requests_out.write_text(json.dumps(req_payload, indent=2), encoding="utf-8")
        print(f"Saved: {args.requests_out}")

    payload = {
        "pilots": [
            {
                "pilot_id": p.pilot_id,
                "display_name": p.display_name,
                "rank": p.rank,
                "type_ratings": sorted(p.type_ratings),
                "is_staff": p.is_staff,
                "authorized_airlines": list(p.authorized_airlines),
            }
            for p in updated
        ]
    }
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    print(f"Saved: {args.out}")


if __name__ == "__main__":
    main()
