"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (score files, configuration, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    EMPTY, WALL, SNAKE, SNAKE_HEAD,
    FOOD, SPEED_UP, SLOW_DOWN, POINTS, GROWTH, PENALTY, BOOST, LETHAL,
    PICKUP_KINDS,
    NOT_STARTED, RUNNING, PAUSED, DEAD,
)
from .snake import Snake
from .board import Board
from .options import GameOptions
from .game_state import GameState
from .high_scores import HighScoreEntry, HighScoreTable, clean_player_name

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'EMPTY', 'WALL', 'SNAKE', 'SNAKE_HEAD',
    'FOOD', 'SPEED_UP', 'SLOW_DOWN', 'POINTS', 'GROWTH', 'PENALTY', 'BOOST', 'LETHAL',
    'PICKUP_KINDS',
    'NOT_STARTED', 'RUNNING', 'PAUSED', 'DEAD',
    'Snake',
    'Board',
    'GameOptions',
    'GameState',
    'HighScoreEntry',
    'HighScoreTable',
    'clean_player_name',
]
