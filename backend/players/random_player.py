"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import (
    DIRECTION_OFFSETS,
    LETHAL,
    OPPOSITE_DIRECTIONS,
    SNAKE,
    SNAKE_HEAD,
    VALID_MOVES,
    WALL,
)
from domain.game_state import GameState
from .base import Player

UNSAFE_CELLS = {WALL, SNAKE, SNAKE_HEAD, LETHAL}


class RandomPlayer(Player):
    """
    An autopilot that picks a direction avoiding walls, its own body and
    lethal pickups. Keeps its heading when that is safe, unless
    `turn_chance` says to wander.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None, turn_chance: float = 0.2):
        self.rng = rng or random.Random()
        self.turn_chance = turn_chance

    def get_move(self, game_state: GameState) -> str:
        head_col, head_row = game_state.snake_positions[0]
        size = len(game_state.cells)

        # Filter out moves that:
        # 1. Reverse into the neck
        # 2. Hit walls, the body or a lethal pickup
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == OPPOSITE_DIRECTIONS[game_state.direction]:
                continue
            dcol, drow = DIRECTION_OFFSETS[move]
            new_col, new_row = head_col + dcol, head_row + drow
            if not (0 <= new_col < size and 0 <= new_row < size):
                continue
            if game_state.cell_at(new_col, new_row) in UNSAFE_CELLS:
                continue
            valid_moves.append(move)

        # If no valid moves, just keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        if game_state.direction in valid_moves and self.rng.random() >= self.turn_chance:
            return game_state.direction

        return self.rng.choice(valid_moves)
