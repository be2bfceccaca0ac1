from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from pilot_eligibility.domain.pilot import PilotProfile
from pilot_eligibility.preprocessing.loaders import load_tables
from pilot_eligibility.rules.eligibility import is_authorized
from pilot_eligibility.workflows.logbook import rejection_message

"""
Example:
    python scripts/check_eligibility.py --rank "First Officer" --rating A320_FAMILY --aircraft A320 B777 C172
"""


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--rank", required=True, help='Pilot rank, e.g. "First Officer"')
    parser.add_argument("--rating", action="append", default=[], help="Held family (repeatable)")
    parser.add_argument("--aircraft", nargs="+", required=True, help="Aircraft type codes to check")
    parser.add_argument("--tables", type=Path, default=Path("data/sample/tables.json"))
    args = parser.parse_args()

    tables = load_tables(args.tables)
    pilot = PilotProfile(pilot_id="cli", rank=args.rank, type_ratings=frozenset(args.rating))

    for t in args.aircraft:
        r = is_authorized(pilot.rank, pilot.type_ratings, t, tables=tables)
        status = "OK " if r.authorized else "NO "
        print(
            f"{status} {t:10} rank_ok={r.rank_ok!s:5} rating_ok={r.rating_ok!s:5} "
            f"required_rank={r.required_rank} required_family={r.required_family}"
        )
        msg = rejection_message(pilot, t, r, tables=tables)
        if msg:
            print(f"     {msg}")


if __name__ == "__main__":
    main()
