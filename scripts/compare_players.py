#!/usr/bin/env python3
# scripts/compare_players.py
"""Print a head-to-head player comparison as JSON."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from hoopcompare.config import get_config
from hoopcompare.processing.comparison import CompareMode, SelectionIncomplete, compare_players
from hoopcompare.storage.csv_store import CsvStore, StoreError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare two players")
    parser.add_argument("player1", help="First player id")
    parser.add_argument("player2", help="Second player id")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in CompareMode],
        default=CompareMode.CAREER.value,
    )
    parser.add_argument("--season1", help="Season label for player1, e.g. 2019-20")
    parser.add_argument("--season2", help="Season label for player2")
    parser.add_argument("--data-dir", type=Path, help="Override HOOPCOMPARE_DATA_DIR")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = get_config()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    data_dir = args.data_dir or config.data_dir
    store = CsvStore(data_dir / config.career_file, data_dir / config.season_dir)

    try:
        result = compare_players(
            store,
            args.player1,
            args.player2,
            args.mode,
            season_a=args.season1,
            season_b=args.season2,
        )
    except StoreError as e:
        logger.error(f"Comparison failed: {e}")
        return 1

    if isinstance(result, SelectionIncomplete):
        logger.error(f"{result.message}: unknown player on side(s) {', '.join(result.missing)}")
        return 2

    print(json.dumps(asdict(result), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
