"""
Pickup placement and chaos-mode decay.

Pickups go on uniformly random EMPTY cells; the kind comes from a weighted
draw against the spawn tables in domain.constants. Disabled kinds fall
back to FOOD.
"""

import logging
import random
from typing import Callable, Collection, Optional, Tuple

from domain.board import Board
from domain.constants import (
    AMBIENT_DRAW_RANGE,
    CHAOS_SPAWN_TABLE,
    EMPTY,
    FOOD,
    MAX_PLACEMENT_ATTEMPTS,
    MIN_PICKUPS_FOR_REMOVAL,
    NORMAL_SPAWN_TABLE,
    PICKUP_KINDS,
    REMOVAL_ODDS,
    SPAWN_DRAW_RANGE,
)
from domain.options import GameOptions

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class PlacementError(RuntimeError):
    """Random cell search gave up; the board has no cell of the wanted kind."""


class PickupSpawner:
    """
    Places and removes pickups on a Board.

    Attributes:
        board: the board to mutate
        options: shared GameOptions (chaos mode, enabled kinds)
        rng: random.Random instance; pass a seeded one for reproducible games
        pickups_on_board: running count of pickups this spawner is tracking
    """

    def __init__(
        self,
        board: Board,
        options: GameOptions,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    ):
        self.board = board
        self.options = options
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.pickups_on_board = 0

    def _random_cell(self, accept: Callable[[Coord, str], bool], what: str) -> Coord:
        """
        Return a random (col, row) for which `accept(coord, kind)` holds.
        We'll keep drawing until one fits, up to max_attempts.
        """
        size = self.board.size
        for _ in range(self.max_attempts):
            coord = (self.rng.randrange(size), self.rng.randrange(size))
            if accept(coord, self.board.cell_at(coord)):
                return coord
        raise PlacementError(
            f"No {what} cell found after {self.max_attempts} attempts "
            f"({self.pickups_on_board} pickups on board)."
        )

    def choose_kind(self, draw: int) -> Optional[str]:
        """
        Map a draw to a pickup kind using the table for the current mode.

        Returns None only for a chaos-mode draw above the table (nothing spawns).
        """
        table = CHAOS_SPAWN_TABLE if self.options.chaos_mode else NORMAL_SPAWN_TABLE
        for kind, low, high in table:
            if low <= draw <= high:
                return kind if self.options.is_enabled(kind) else FOOD
        if self.options.chaos_mode and draw > SPAWN_DRAW_RANGE:
            return None
        return FOOD

    def try_spawn(self, may_fail: bool = False, occupied: Collection[Coord] = ()) -> Optional[str]:
        """
        Put one pickup on a random empty cell.

        Args:
            may_fail: draw from the wide ambient range so that, in chaos mode,
                most attempts place nothing
            occupied: cells the snake holds; the board may not show them yet
                when the snake has moved but not been re-stamped

        Returns:
            The kind placed, or None if nothing was placed.
        """
        coord = self._random_cell(
            lambda cell, kind: kind == EMPTY and cell not in occupied, "empty"
        )
        draw_range = AMBIENT_DRAW_RANGE if may_fail else SPAWN_DRAW_RANGE
        draw = self.rng.randint(1, draw_range)

        kind = self.choose_kind(draw)
        if kind is None:
            return None

        self.board.set_cell(coord, kind)
        self.pickups_on_board += 1
        logger.debug("Spawned %s at %s (draw=%s, on board=%s)", kind, coord, draw, self.pickups_on_board)
        return kind

    def try_remove(self) -> Optional[Coord]:
        """
        Chaos-mode decay: with a 1 in REMOVAL_ODDS chance clear one random pickup.

        Nothing happens while fewer than MIN_PICKUPS_FOR_REMOVAL pickups are out.
        """
        if self.pickups_on_board < MIN_PICKUPS_FOR_REMOVAL:
            return None
        if self.rng.randrange(REMOVAL_ODDS) != 0:
            return None

        coord = self._random_cell(lambda cell, kind: kind in PICKUP_KINDS, "pickup")
        self.board.set_cell(coord, EMPTY)
        self.pickups_on_board -= 1
        logger.debug("Removed pickup at %s (on board=%s)", coord, self.pickups_on_board)
        return coord
