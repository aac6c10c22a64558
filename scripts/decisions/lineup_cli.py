#!/usr/bin/env python
"""Game Lineup: CLI wrapper for the lineup decision function.

Reads a JSON generation request (camelCase keys, as sent by the app),
generates the lineup and prints the inning grid, diagnostics and fair play
issues. The grid is also written to CSV.

CONTRACT: This script MUST call build_lineup_from_request() from
benchcoach.decisions. No alternate execution paths allowed.

Usage:
    PYTHONPATH=src python scripts/decisions/lineup_cli.py --request request.json
    PYTHONPATH=src python scripts/decisions/lineup_cli.py --request request.json --roster roster.csv
    PYTHONPATH=src python scripts/decisions/lineup_cli.py --request request.json --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from benchcoach.analysis import LineupFormatter, lineup_grid, playing_time_summary
from benchcoach.config import LOG_LEVEL, REPORTS_DIR
from benchcoach.data import RequestReader
from benchcoach.decisions import build_lineup_from_request


def main():
    parser = argparse.ArgumentParser(description="Generate a fair play game lineup")
    parser.add_argument("--request", required=True, help="Path to a JSON lineup request")
    parser.add_argument("--roster", default=None, help="Optional roster CSV replacing the request's players")
    parser.add_argument("--output-dir", default=None, help=f"CSV output directory (default: {REPORTS_DIR})")
    parser.add_argument("--json", action="store_true", help="Print the lineup as JSON instead of a grid")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: BENCHCOACH_LOG_LEVEL or INFO)")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        request = RequestReader(args.request, roster_csv=args.roster).read_request()
        lineup = build_lineup_from_request(request)
    except (ValueError, FileNotFoundError, RuntimeError) as e:
        print(f"ERROR: {e}")
        return 1

    players = [p.to_domain() for p in request.active_players]

    if args.json:
        print(json.dumps(lineup.to_dict(), indent=2))
    else:
        LineupFormatter(lineup, players).print()
        print("\nPlaying time:")
        print(playing_time_summary(lineup, players).to_string(index=False))

    output_dir = Path(args.output_dir) if args.output_dir else REPORTS_DIR
    # gameId comes from the request; keep the file inside output_dir
    output_path = output_dir / f"{Path(lineup.game_id).name}_lineup.csv"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    lineup_grid(lineup, players).to_csv(output_path, index=False)
    print(f"Saved to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
