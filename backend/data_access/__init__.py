"""
Data access layer for the snake engine.

Currently this is only the high score table, stored as a JSON file.
"""

from .high_score_repository import HighScoreRepository

__all__ = [
    'HighScoreRepository',
]
