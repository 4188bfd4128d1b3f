import argparse
import json
import logging
import random
import time
from typing import Callable, Dict, Optional, Any

from config import configure_logging, get_scores_path, load_options
from data_access.high_score_repository import HighScoreRepository
from domain.board import Board
from domain.constants import (
    BOARD_SIZE,
    DEAD,
    DEADLY_CELLS,
    DEFAULT_NAME,
    FIRST_PICKUP_CELL,
    FOOD,
    LETHAL,
    MAX_PICKUPS,
    MAX_SPEED,
    MIN_SPEED,
    NOT_STARTED,
    PAUSED,
    PENDING_NAME,
    PICKUP_EFFECTS,
    PICKUP_KINDS,
    RUNNING,
    SPEED_STAT_BASE,
    START_SPEED,
    WALL,
)
from domain.game_state import GameState
from domain.high_scores import HighScoreEntry, HighScoreTable, clean_player_name
from domain.options import GameOptions
from domain.snake import Snake
from players import Player, RandomPlayer
from services.pickup_spawner import PickupSpawner

logger = logging.getLogger(__name__)

# Smallest board that fits the starting snake and the first pickup inside the walls
MIN_BOARD_SIZE = 7


class SnakeGame:
    """
    Manages:
      - Board and snake
      - Pickups (through the PickupSpawner)
      - Score and speed
      - Lifecycle: NOT_STARTED -> RUNNING <-> PAUSED -> DEAD -> reset
      - The high score table

    The presentation layer drives it with commands (start, pause, resume,
    reset, change_direction, submit_name) and either calls `update()` from a
    timer or feeds elapsed time through `advance()`. Every tick runs in the
    same order: move, collision check, pickup effect, spawn/decay, refresh.
    """

    def __init__(
        self,
        board_size: int = BOARD_SIZE,
        options: Optional[GameOptions] = None,
        high_scores: Optional[HighScoreTable] = None,
        score_repo: Optional[HighScoreRepository] = None,
        rng: Optional[random.Random] = None,
        on_render: Optional[Callable[[GameState], None]] = None,
        max_pickups: int = MAX_PICKUPS,
    ):
        if board_size < MIN_BOARD_SIZE:
            raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {board_size}.")

        self.options = options or GameOptions()
        self.board = Board(board_size)
        self.spawner = PickupSpawner(self.board, self.options, rng=rng)
        self.max_pickups = max_pickups
        self.on_render = on_render

        self.score_repo = score_repo
        if high_scores is not None:
            self.high_scores = high_scores
        elif score_repo is not None:
            self.high_scores = score_repo.load()
        else:
            self.high_scores = HighScoreTable.default()

        self.pending_entry: Optional[HighScoreEntry] = None
        self.last_rank: Optional[int] = None
        self.reset()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def pickups_on_board(self) -> int:
        return self.spawner.pickups_on_board

    @property
    def speed_stat(self) -> int:
        return SPEED_STAT_BASE - self.speed

    @property
    def name_needed(self) -> bool:
        """A ranked entry is waiting for submit_name()."""
        return self.pending_entry is not None

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        cells = [[self.board.cell_at((col, row)) for col in range(self.board.size)]
                 for row in range(self.board.size)]
        return GameState(
            tick=self.tick_number,
            phase=self.phase,
            snake_positions=list(self.snake.positions),
            direction=self.snake.direction,
            score=self.score,
            speed=self.speed,
            size=self.snake.size,
            chaos_mode=self.options.chaos_mode,
            worm_mode=self.options.worm_mode,
            pickups_on_board=self.pickups_on_board,
            cells=cells,
            board_text=self.board.print_board(),
            name_needed=self.name_needed,
            death_reason=self.snake.death_reason,
        )

    def status_line(self) -> str:
        if self.phase == NOT_STARTED:
            return "Press start to begin."
        if self.phase == PAUSED:
            return "Game is paused. Press 'resume' to resume."
        if self.phase == DEAD:
            return f"You died! Press 'reset'.        Score: {self.score}  Size: {self.snake.size}"

        top = self.high_scores.top
        top_name = top.player_name if top.player_name is not None else "----------"
        line = (
            f"Movement speed: {self.speed_stat}        {self.score} points"
            f"         Size: {self.snake.size}\n"
            f"High score: {top_name} [{top.score} points]"
        )
        if self.options.chaos_mode:
            line += "  |  Chaos Mode"
        return line

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.board.print_board() + "\n")

    # ------------------------------------------------------------------
    # Lifecycle commands
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Put everything back to the start: fresh snake, empty board with the
        first FOOD at its fixed cell, score 0, starting speed.
        """
        if self.pending_entry is not None:
            self.submit_name(DEFAULT_NAME)

        self.snake = Snake()
        self.board.reset()
        self.score = 0
        self.speed = START_SPEED
        self.tick_number = 0
        self.last_rank = None
        self._elapsed_ms = 0.0
        self._last_poll: Optional[float] = None

        self.board.set_cell(FIRST_PICKUP_CELL, FOOD)
        self.spawner.pickups_on_board = 1

        self.board.refresh(self.snake)
        self.phase = NOT_STARTED
        self._render()

    def start(self) -> bool:
        if self.phase != NOT_STARTED:
            return False
        self.phase = RUNNING
        self._restart_clock()
        logger.info("Game started (chaos mode: %s)", self.options.chaos_mode)
        return True

    def pause(self) -> bool:
        if self.phase != RUNNING:
            return False
        self.phase = PAUSED
        self._render()
        return True

    def resume(self) -> bool:
        if self.phase != PAUSED:
            return False
        self.phase = RUNNING
        # Time spent paused never counts towards the next tick
        self._restart_clock()
        return True

    def toggle_pause(self) -> bool:
        """Pause if running, resume if paused. Returns True if the phase changed."""
        if self.phase == RUNNING:
            return self.pause()
        return self.resume()

    def change_direction(self, direction: str) -> bool:
        """
        Steer the snake. Reversing onto the neck is ignored, as is any
        command after death.

        Reversal is judged against the current heading only, so two quick
        turns before the next tick (RIGHT, UP, LEFT) do fold the snake back
        onto its neck.
        """
        if self.phase == DEAD:
            return False
        return self.snake.change_direction(direction)

    def submit_name(self, name: Optional[str]) -> bool:
        """
        Finish the pending high score entry with the player's name.

        Returns False if no entry was waiting for a name.
        """
        if self.pending_entry is None:
            return False
        self.pending_entry.player_name = clean_player_name(name)
        logger.info("High score recorded for %s (%s points)", self.pending_entry.player_name, self.pending_entry.score)
        self.pending_entry = None
        return True

    def shutdown(self) -> bool:
        """
        Persist the high score table. Safe to call more than once.

        Returns:
            True if the table was saved.
        """
        if self.pending_entry is not None:
            self.submit_name(DEFAULT_NAME)
        if self.score_repo is None:
            return False
        return self.score_repo.save(self.high_scores)

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def _restart_clock(self) -> None:
        self._elapsed_ms = 0.0
        self._last_poll = None

    def advance(self, elapsed_ms: float) -> bool:
        """
        Feed elapsed wall-clock time into the tick accumulator.

        A tick runs once at least `speed` milliseconds have built up; the
        accumulator then starts again from zero.

        Returns:
            True if a tick ran.
        """
        if self.phase != RUNNING:
            return False
        self._elapsed_ms += elapsed_ms
        if self._elapsed_ms < self.speed:
            return False
        self._elapsed_ms = 0.0
        self.tick()
        return True

    def update(self, now_ms: Optional[float] = None) -> bool:
        """
        Poll the clock and tick if enough time has passed since the last poll.

        Args:
            now_ms: current time in milliseconds; defaults to a monotonic clock
        """
        if now_ms is None:
            now_ms = time.monotonic() * 1000.0
        if self.phase != RUNNING:
            self._last_poll = None
            return False
        if self._last_poll is None:
            self._last_poll = now_ms
            return False
        elapsed = now_ms - self._last_poll
        self._last_poll = now_ms
        return self.advance(elapsed)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def tick(self) -> Optional[str]:
        """
        Execute one tick:
          1) Move the snake
          2) Look at what the new head landed on (before the board is refreshed)
          3) Die on a wall, the body or a LETHAL pickup
          4) Apply a pickup's effect and replace it
          5) In chaos mode, maybe spawn or decay a pickup on an empty step
          6) Refresh the board

        Returns:
            The kind of cell the head moved into, or None if the game is not running.
        """
        if self.phase != RUNNING:
            return None

        self.tick_number += 1
        self.snake.move()
        item_at_head = self.board.cell_at(self.snake.head)

        if item_at_head in DEADLY_CELLS:
            self._die(item_at_head)
            return item_at_head

        if item_at_head in PICKUP_KINDS:
            self._consume(item_at_head)
        elif self.options.chaos_mode and self.pickups_on_board < self.max_pickups:
            # Pickups show up and decay on their own in chaos mode
            self.spawner.try_spawn(may_fail=True, occupied=set(self.snake.positions))
            self.spawner.try_remove()

        self.board.refresh(self.snake)
        logger.debug("Tick %s: head=%s item=%s score=%s speed=%s",
                     self.tick_number, self.snake.head, item_at_head, self.score, self.speed)
        self._render()
        return item_at_head

    def _consume(self, kind: str) -> None:
        self.spawner.pickups_on_board -= 1

        score_delta, speed_delta, growth = PICKUP_EFFECTS[kind]
        self.score += score_delta
        self.speed = max(MIN_SPEED, min(MAX_SPEED, self.speed + speed_delta))
        self.snake.extend(growth)

        if not (self.options.chaos_mode and self.pickups_on_board >= self.max_pickups):
            self.spawner.try_spawn(may_fail=False, occupied=set(self.snake.positions))

    def _die(self, item_at_head: str) -> None:
        if item_at_head == WALL:
            reason = "wall"
        elif item_at_head == LETHAL:
            reason = "lethal"
        else:
            reason = "self"

        self.snake.alive = False
        self.snake.death_reason = reason
        self.snake.death_round = self.tick_number
        self.phase = DEAD

        candidate = HighScoreEntry(
            score=self.score,
            speed=self.speed_stat,
            size=self.snake.size,
            chaos=self.options.chaos_mode,
            player_name=PENDING_NAME,
        )
        self.last_rank = self.high_scores.record(candidate)
        if self.last_rank is not None:
            self.pending_entry = candidate

        logger.info(
            "Snake died (%s) at tick %s: score=%s size=%s rank=%s",
            reason, self.tick_number, self.score, self.snake.size,
            "unranked" if self.last_rank is None else self.last_rank + 1,
        )
        # The board keeps the last living frame, so the wall ring stays intact
        self._render()

    def _render(self) -> None:
        if self.on_render is not None:
            self.on_render(self.get_current_state())


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    player: Player,
    options: Optional[GameOptions] = None,
    board_size: int = BOARD_SIZE,
    max_ticks: int = 1000,
    seed: Optional[int] = None,
    player_name: str = DEFAULT_NAME,
    score_repo: Optional[HighScoreRepository] = None,
    realtime: bool = False,
) -> Dict[str, Any]:
    """
    Runs a single headless game with `player` steering.

    Args:
        player: source of direction commands, asked once per tick
        options: chaos mode / enabled pickups
        board_size: side length of the board
        max_ticks: stop after this many ticks even if the snake is alive
        seed: seed for pickup placement
        player_name: name stored if the result makes the high score table
        score_repo: where to load and save the high score table
        realtime: pace ticks by the game's speed instead of running flat out

    Returns:
        A dictionary summarizing the game.
    """
    rng = random.Random(seed)
    game = SnakeGame(board_size=board_size, options=options, score_repo=score_repo, rng=rng)
    game.start()

    while game.phase == RUNNING and game.tick_number < max_ticks:
        move = player.get_move(game.get_current_state())
        if move:
            game.change_direction(move)
        if realtime:
            while not game.update():
                time.sleep(0.005)
        else:
            game.tick()

    rank = game.last_rank
    if game.name_needed:
        game.submit_name(player_name)
    saved = game.shutdown()

    return {
        "ticks": game.tick_number,
        "phase": game.phase,
        "death_reason": game.snake.death_reason,
        "score": game.score,
        "speed": game.speed_stat,
        "size": game.snake.size,
        "chaos_mode": game.options.chaos_mode,
        "rank": None if rank is None else rank + 1,
        "high_scores_saved": saved,
        "board": game.board.print_board(),
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless snake game with an autopilot player."
    )
    parser.add_argument("--ticks", type=int, default=1000,
                        help="Maximum number of ticks to simulate")
    parser.add_argument("--size", type=int, default=BOARD_SIZE,
                        help="Side length of the board, walls included")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for pickups and the autopilot")
    parser.add_argument("--chaos", action="store_true",
                        help="Turn on chaos mode")
    parser.add_argument("--disable", nargs="*", default=[], metavar="KIND",
                        help="Pickup kinds to disable (e.g. LETHAL PENALTY)")
    parser.add_argument("--options", type=str, default=None,
                        help="YAML options file (defaults to SNAKE_OPTIONS_PATH)")
    parser.add_argument("--name", type=str, default=DEFAULT_NAME,
                        help="Name to record if the score ranks")
    parser.add_argument("--scores", type=str, default=None,
                        help="High score file (defaults to SNAKE_SCORES_PATH)")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace ticks by the game speed")

    args = parser.parse_args()
    configure_logging()

    options = load_options(args.options)
    if args.chaos:
        options.set_chaos_mode(True)
    for kind in args.disable:
        options.set_pickup_enabled(kind.upper(), False)

    repo = HighScoreRepository(args.scores or get_scores_path())
    player_rng = random.Random(args.seed)

    result = run_simulation(
        RandomPlayer(rng=player_rng),
        options=options,
        board_size=args.size,
        max_ticks=args.ticks,
        seed=args.seed,
        player_name=args.name,
        score_repo=repo,
        realtime=args.realtime,
    )

    print("\n" + result.pop("board") + "\n")
    print("Simulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
