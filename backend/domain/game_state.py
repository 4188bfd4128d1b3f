"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Dict, Optional

from .constants import SPEED_STAT_BASE


class GameState:
    """
    A snapshot of the game at a specific point in time, handed to the
    presentation layer for redraw and status text.

    Attributes:
        tick: number of ticks simulated since the last reset
        phase: NOT_STARTED, RUNNING, PAUSED or DEAD
        snake_positions: list of (col, row), head first
        direction: heading of the snake
        score: current score (may be negative)
        speed: tick interval in milliseconds
        size: snake size, including segments still waiting to unfold
        chaos_mode: whether chaos mode is on
        worm_mode: cosmetic flag for the renderer
        pickups_on_board: counter maintained by the spawner
        cells: row-major grid of cell kinds, cells[row][col]
        board_text: printable rendering of the board
        name_needed: a new high score is waiting for a player name
    """

    def __init__(
        self,
        tick: int,
        phase: str,
        snake_positions: List[Tuple[int, int]],
        direction: str,
        score: int,
        speed: int,
        size: int,
        chaos_mode: bool,
        worm_mode: bool,
        pickups_on_board: int,
        cells: List[List[str]],
        board_text: str,
        name_needed: bool = False,
        death_reason: Optional[str] = None,
    ):
        self.tick = tick
        self.phase = phase
        self.snake_positions = snake_positions
        self.direction = direction
        self.score = score
        self.speed = speed
        self.size = size
        self.chaos_mode = chaos_mode
        self.worm_mode = worm_mode
        self.pickups_on_board = pickups_on_board
        self.cells = cells
        self.board_text = board_text
        self.name_needed = name_needed
        self.death_reason = death_reason

    @property
    def speed_stat(self) -> int:
        """Human-facing movement speed (higher is faster)."""
        return SPEED_STAT_BASE - self.speed

    def cell_at(self, col: int, row: int) -> str:
        return self.cells[row][col]

    def to_dict(self) -> Dict:
        return {
            "tick": self.tick,
            "phase": self.phase,
            "snake_positions": [list(p) for p in self.snake_positions],
            "direction": self.direction,
            "score": self.score,
            "speed": self.speed,
            "speed_stat": self.speed_stat,
            "size": self.size,
            "chaos_mode": self.chaos_mode,
            "pickups_on_board": self.pickups_on_board,
            "name_needed": self.name_needed,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, phase={self.phase}, "
            f"score={self.score}, speed={self.speed}, size={self.size}>"
        )
