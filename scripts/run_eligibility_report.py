from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from pilot_eligibility.preprocessing.loaders import load_airlines, load_pilots, load_tables
from pilot_eligibility.preprocessing.validate_roster import validate_pilots, validate_tables
from pilot_eligibility.rules.fleet_filter import airline_selectable_types, find_airline
from pilot_eligibility.visualization.report import build_report_frames, save_plots, save_tables


DEFAULT_DATA_DIR = Path("data/sample")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--data-dir", type=Path, default=DEFAULT_DATA_DIR)
    parser.add_argument("--airline", default=None, help="Name or ICAO code; all fleets if omitted")
    parser.add_argument("--out-dir", type=Path, default=Path("outputs/report"))
    parser.add_argument("--no-plots", action="store_true")
    args = parser.parse_args()

    data = args.data_dir
    tables = load_tables(data / "tables.json")
    pilots = load_pilots(data / "pilots.json")
    airlines = load_airlines(data / "airlines.json")

    validate_tables(tables)
    validate_pilots(pilots, tables)

    if args.airline:
        airline = find_airline(airlines, args.airline)
        if airline is None:
            raise SystemExit(f"Unknown airline: {args.airline}")
        types = airline.aircraft_types
        print(f"Airline: {airline.name} ({airline.icao_code})")
        for p in pilots:
            print(f"  {p.pilot_id} [{p.rank}]: {', '.join(airline_selectable_types(p, airline, tables=tables)) or '-'}")
    else:
        types = list(dict.fromkeys(t for a in airlines for t in a.aircraft_types))

    frames = build_report_frames(pilots, types, tables)
    save_tables(frames, args.out_dir)
    if not args.no_plots:
        save_plots(frames, args.out_dir)

    print("\nCoverage per aircraft type:")
    print(frames.type_coverage.to_string(index=False))
    print(f"\nSaved report to: {args.out_dir}")


if __name__ == "__main__":
    main()
