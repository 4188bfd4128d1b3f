#!/usr/bin/env python3
"""Print the persisted high score table.

Reads the JSON table from --scores (or SNAKE_SCORES_PATH) and prints it in
the same "1: name [Points: p  Size: s]" layout the game shows. With --json
the raw entries are printed instead.
"""

import argparse
import json
import logging
import os
import sys

# Add backend directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import configure_logging, get_scores_path  # noqa: E402
from data_access.high_score_repository import HighScoreRepository  # noqa: E402


logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Show the snake high score table.")
    parser.add_argument("--scores", type=str, default=None,
                        help="High score file (defaults to SNAKE_SCORES_PATH)")
    parser.add_argument("--json", action="store_true",
                        help="Print the raw entries as JSON")
    args = parser.parse_args()

    configure_logging()

    path = args.scores or get_scores_path()
    logger.info("Reading high scores from %s", path)
    table = HighScoreRepository(path).load()

    if args.json:
        print(json.dumps(table.to_list(), indent=2))
        return

    for line in table.format_lines():
        print(line)


if __name__ == "__main__":
    main()
