"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional

from .constants import (
    DIRECTION_OFFSETS,
    OPPOSITE_DIRECTIONS,
    START_DIRECTION,
    START_POSITIONS,
    VALID_MOVES,
)


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (col, row) from head at index 0 to tail at the end.
            Right after growth the trailing slots repeat the tail; they turn into
            real cells one per move.
        direction: current heading, one of UP/DOWN/LEFT/RIGHT
        alive: whether this snake is still alive
        death_reason: e.g., 'wall', 'self', 'lethal'
        death_round: The tick number when the snake died
    """

    def __init__(
        self,
        positions: Optional[List[Tuple[int, int]]] = None,
        direction: str = START_DIRECTION,
    ):
        if positions is None:
            positions = START_POSITIONS
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction '{direction}'.")

        self.positions = deque(positions)
        self._direction = direction
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        return self.positions[-1]

    @property
    def size(self) -> int:
        return len(self.positions)

    @property
    def direction(self) -> str:
        return self._direction

    def move(self) -> Tuple[int, int]:
        """
        Advance one cell in the current heading and return the new head.

        Every segment takes the place of the one in front of it and the tail
        slot is dropped. No bounds checking happens here; walls are detected
        by the board.
        """
        col, row = self.positions[0]
        dcol, drow = DIRECTION_OFFSETS[self._direction]
        new_head = (col + dcol, row + drow)

        self.positions.appendleft(new_head)
        self.positions.pop()
        return new_head

    def extend(self, amount: int) -> None:
        """
        Grow by `amount` segments.

        The size changes immediately, but the new segments sit on top of the
        tail until the following moves pull the body forward.
        """
        if amount < 0:
            raise ValueError(f"Cannot extend a snake by {amount}.")
        tail = self.positions[-1]
        self.positions.extend([tail] * amount)

    def change_direction(self, direction: str) -> bool:
        """
        Set the heading. A 180 degree turn is ignored.

        Returns:
            True if the heading changed.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction '{direction}'.")
        if direction == OPPOSITE_DIRECTIONS[self._direction]:
            return False
        changed = direction != self._direction
        self._direction = direction
        return changed

    def distinct_cells(self) -> int:
        """Number of distinct cells the body covers right now."""
        return len(set(self.positions))

    def __repr__(self):
        return f"<Snake head={self.head}, size={self.size}, direction={self._direction}>"
