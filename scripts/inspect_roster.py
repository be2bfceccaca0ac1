from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from pilot_eligibility.preprocessing.loaders import load_airlines, load_pilots, load_tables
from pilot_eligibility.preprocessing.validate_roster import validate_airlines, validate_pilots, validate_tables


DEFAULT_DATA_DIR = Path("data/sample")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help="Folder with pilots.json and airlines.json (default: data/sample)",
    )
    args = parser.parse_args()

    data = args.data_dir

    tables = load_tables(data / "tables.json")
    pilots = load_pilots(data / "pilots.json")
    airlines = load_airlines(data / "airlines.json")

    validate_tables(tables)
    validate_pilots(pilots, tables)
    validate_airlines(airlines)

    print(f"Pilot count: {len(pilots)}")
    print("Pilots by rank:", dict(Counter(p.rank for p in pilots)))
    print("Type ratings held:", dict(Counter(f for p in pilots for f in p.type_ratings)))
    print(f"Airline count: {len(airlines)}")

    types = sorted({t for a in airlines for t in a.aircraft_types})
    unrestricted = [t for t in types if t not in tables.min_ranks]
    print(f"Aircraft types in fleets: {len(types)}")
    if unrestricted:
        print("Types with no minimum rank (open to every rank):", unrestricted)


if __name__ == "__main__":
    main()
