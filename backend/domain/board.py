"""
Board model - the logical contents of every grid cell.
"""

from typing import Dict, Iterator, List, Tuple

from .constants import (
    BOARD_SIZE,
    BOOST,
    EMPTY,
    FOOD,
    GROWTH,
    LETHAL,
    PENALTY,
    PICKUP_KINDS,
    POINTS,
    SLOW_DOWN,
    SNAKE,
    SNAKE_HEAD,
    SPEED_UP,
    WALL,
)
from .snake import Snake

Coord = Tuple[int, int]

# Single characters used by print_board()
CELL_SYMBOLS: Dict[str, str] = {
    EMPTY: ".",
    WALL: "#",
    SNAKE: "o",
    SNAKE_HEAD: "@",
    FOOD: "F",
    SPEED_UP: ">",
    SLOW_DOWN: "<",
    POINTS: "$",
    GROWTH: "+",
    PENALTY: "-",
    BOOST: "*",
    LETHAL: "X",
}


class Board:
    """
    A square grid of cell kinds addressed by (col, row).

    The outer ring is always WALL. Pickups stay where they were placed
    until the snake runs over them or the spawner clears them.
    """

    def __init__(self, size: int = BOARD_SIZE):
        if size < 3:
            raise ValueError(f"Board size must be at least 3, got {size}.")
        self.size = size
        self._cells: List[List[str]] = [[EMPTY] * size for _ in range(size)]
        self.reset()

    def is_border(self, coord: Coord) -> bool:
        col, row = coord
        last = self.size - 1
        return col == 0 or row == 0 or col == last or row == last

    def in_bounds(self, coord: Coord) -> bool:
        col, row = coord
        return 0 <= col < self.size and 0 <= row < self.size

    def reset(self) -> None:
        """Walls around the edge, nothing inside. Discards every pickup."""
        for row in range(self.size):
            for col in range(self.size):
                self._cells[row][col] = WALL if self.is_border((col, row)) else EMPTY

    def refresh(self, snake: Snake) -> None:
        """
        Re-stamp the snake onto the board after it has moved.

        Snake cells from the previous tick are cleared, pickups are kept.
        A pickup under the snake is overwritten and does not come back
        when the snake leaves.
        """
        for row in range(self.size):
            for col in range(self.size):
                if self.is_border((col, row)):
                    self._cells[row][col] = WALL
                elif self._cells[row][col] not in PICKUP_KINDS:
                    self._cells[row][col] = EMPTY

        for col, row in snake.positions:
            if self.in_bounds((col, row)) and not self.is_border((col, row)):
                self._cells[row][col] = SNAKE

        head_col, head_row = snake.head
        if self.in_bounds(snake.head) and not self.is_border(snake.head):
            self._cells[head_row][head_col] = SNAKE_HEAD

    def cell_at(self, coord: Coord) -> str:
        """Return the kind at coord. Anything off the grid reads as WALL."""
        if not self.in_bounds(coord):
            return WALL
        col, row = coord
        return self._cells[row][col]

    def set_cell(self, coord: Coord, kind: str) -> None:
        if not self.in_bounds(coord) or self.is_border(coord):
            raise ValueError(f"Cell {coord} is not an interior cell.")
        col, row = coord
        self._cells[row][col] = kind

    def cells(self) -> Iterator[Tuple[Coord, str]]:
        """Yield ((col, row), kind) for every cell, row by row."""
        for row in range(self.size):
            for col in range(self.size):
                yield (col, row), self._cells[row][col]

    def pickup_cells(self) -> List[Coord]:
        return [coord for coord, kind in self.cells() if kind in PICKUP_KINDS]

    def count(self, kind: str) -> int:
        return sum(1 for _, cell in self.cells() if cell == kind)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = wall
        . = empty space
        @ = snake head
        o = snake body
        F > < $ + - * X = pickups (see CELL_SYMBOLS)
        Row 0 is printed first, with column labels (mod 10) at the bottom.
        """
        result = []
        for row in range(self.size):
            line = " ".join(CELL_SYMBOLS[self._cells[row][col]] for col in range(self.size))
            result.append(f"{row:2d} {line}")

        result.append("   " + " ".join(str(col % 10) for col in range(self.size)))
        return "\n".join(result)

    def __repr__(self):
        return f"<Board size={self.size}, pickups={len(self.pickup_cells())}>"
