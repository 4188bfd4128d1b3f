"""
File-backed storage for the high score table.

The table is written as one JSON document (a list of entries, best first).
A missing or unreadable file is the normal cold start: the caller gets a
table of placeholder entries.
"""

import json
import logging
import os
import tempfile
from typing import Optional

from domain.constants import HIGH_SCORE_CAPACITY
from domain.high_scores import HighScoreTable

logger = logging.getLogger(__name__)


class HighScoreRepository:
    """
    Loads and saves a HighScoreTable at a fixed path.
    """

    def __init__(self, path: str, capacity: int = HIGH_SCORE_CAPACITY):
        self.path = path
        self.capacity = capacity

    def load(self) -> HighScoreTable:
        """
        Read the table from disk.

        Returns:
            The stored table, or `capacity` zero-score placeholders if the file
            is missing or corrupt.
        """
        if not os.path.exists(self.path):
            logger.info("No high score file at %s, starting with an empty table", self.path)
            return HighScoreTable.default(self.capacity)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return HighScoreTable.from_list(data, capacity=self.capacity)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Could not read high scores from %s: %s", self.path, e)
            return HighScoreTable.default(self.capacity)

    def save(self, table: HighScoreTable) -> bool:
        """
        Write the table atomically (temp file in the same directory, then rename).

        Returns:
            True on success, False if the write failed. Failures are logged,
            never raised.
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path: Optional[str] = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".high_scores.", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(table.to_list(), f, indent=2)
            os.replace(tmp_path, self.path)
            tmp_path = None
            logger.info("Saved %s high scores to %s", len(table), self.path)
            return True
        except OSError as e:
            logger.error("Failed to save high scores to %s: %s", self.path, e)
            return False
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
