"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for whatever steers the snake.

    The headless driver asks the player for a direction before every tick;
    returning None keeps the current heading.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None to keep going straight
        """
        raise NotImplementedError
