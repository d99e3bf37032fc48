#!/usr/bin/env python3
"""
Print the survey tables behind the charts.

Usage:
    python report.py                        # Configured dataset (SURVEY_DATA_PATH)
    python report.py data/voters.csv        # Specific dataset
    python report.py --floor not            # Only difficulty above "not"
    python report.py --complete             # Include zero-count levels
    python report.py --debug                # Verbose logging
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.errors import DataLoadError, UnknownLevelError
from app.models.survey import DIFFICULTY, PARTY, REASON, DifficultyLevel
from app.repositories.survey import SurveyRepository
from app.services.survey import SurveyAggregator
from settings.logging import setup_logging

COLUMNS = (PARTY, DIFFICULTY, REASON)


def run_report(source: str | None, floor_level: str | None = None, complete: bool = False) -> bool:
    """Print tabulations and the party-normalized difficulty table."""
    if floor_level is not None:
        DifficultyLevel.parse(floor_level)

    aggregator = SurveyAggregator(SurveyRepository(source))
    respondents = aggregator.load_and_clean()

    print("\n" + "=" * 60)
    print(f"SURVEY REPORT: {aggregator.source}")
    print("=" * 60)
    print(f"\nRespondents: {respondents.height:,}")

    for column in COLUMNS:
        print(f"\n{column}")
        for row in aggregator.tabulate(column):
            print(f"  {row.level or 'NA':<30} {row.count:>7,}")

    print(f"\nDifficulty by party (above {floor_level or 'nothing'})")
    rows = aggregator.difficulty_by_party(floor_level=floor_level, complete=complete)
    if not rows:
        print("  no rows")
    for row in rows:
        print(f"  {row.party:<12} {row.difficulty_level:<10} {row.count:>7,} {row.freq:>8.1%}")

    print("\n" + "=" * 60 + "\n")
    return bool(rows)


def main():
    args = sys.argv[1:]

    debug = "--debug" in args
    complete = "--complete" in args
    floor_level = None
    if "--floor" in args:
        i = args.index("--floor")
        if i + 1 >= len(args):
            print(__doc__)
            sys.exit(1)
        floor_level = args[i + 1]
        del args[i : i + 2]

    args = [a for a in args if a not in ("--debug", "--complete")]
    if len(args) > 1 or any(a.startswith("--") for a in args):
        print(__doc__)
        sys.exit(1)

    logger = setup_logging(level="DEBUG" if debug else "INFO", to_file=False)
    source = args[0] if args else None

    try:
        run_report(source, floor_level=floor_level, complete=complete)
    except (DataLoadError, UnknownLevelError) as e:
        logger.error(e.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
