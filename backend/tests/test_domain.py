"""
Tests for the domain entities: Snake, Board, GameOptions, GameState.
"""

import pytest
import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    UP, DOWN, LEFT, RIGHT,
    EMPTY, WALL, SNAKE, SNAKE_HEAD,
    FOOD, LETHAL, BOOST, PENALTY,
    Board,
    GameOptions,
    GameState,
    Snake,
)


class TestSnake:
    """Tests for the Snake class."""

    def test_default_snake(self):
        """Snake starts at (4,4),(3,4),(2,4) heading RIGHT."""
        snake = Snake()
        assert list(snake.positions) == [(4, 4), (3, 4), (2, 4)]
        assert snake.direction == RIGHT
        assert snake.size == 3
        assert snake.alive is True
        assert snake.death_reason is None
        assert snake.death_round is None

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_snake_head_and_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)

    def test_empty_snake_is_rejected(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_move_shifts_body(self):
        """One move from the start shifts every segment forward."""
        snake = Snake()
        assert snake.move() == (5, 4)
        assert list(snake.positions) == [(5, 4), (4, 4), (3, 4)]

    @pytest.mark.parametrize("direction,expected", [
        (UP, (4, 3)),
        (DOWN, (4, 5)),
        (RIGHT, (5, 4)),
    ])
    def test_move_in_each_direction(self, direction, expected):
        snake = Snake()
        snake.change_direction(direction)
        snake.move()
        assert snake.head == expected

    def test_move_left(self):
        snake = Snake([(4, 4), (5, 4)], direction=LEFT)
        snake.move()
        assert snake.head == (3, 4)

    def test_move_does_not_check_bounds(self):
        snake = Snake([(0, 0)], direction=UP)
        snake.move()
        assert snake.head == (0, -1)

    def test_extend_is_lazy(self):
        """extend(3) adds three copies of the tail that unfold over three moves."""
        snake = Snake()
        snake.extend(3)

        assert snake.size == 6
        assert list(snake.positions)[-4:] == [(2, 4)] * 4
        assert snake.distinct_cells() == 3

        for _ in range(3):
            snake.move()

        assert snake.size == 6
        assert snake.distinct_cells() == 6
        assert list(snake.positions) == [(7, 4), (6, 4), (5, 4), (4, 4), (3, 4), (2, 4)]

    def test_extend_rejects_negative(self):
        with pytest.raises(ValueError):
            Snake().extend(-1)

    @pytest.mark.parametrize("heading,reverse", [
        (RIGHT, LEFT), (LEFT, RIGHT), (UP, DOWN), (DOWN, UP),
    ])
    def test_reverse_is_ignored(self, heading, reverse):
        snake = Snake([(5, 5)], direction=heading)
        assert snake.change_direction(reverse) is False
        assert snake.direction == heading

    def test_change_direction_reports_change(self):
        snake = Snake()
        assert snake.change_direction(UP) is True
        assert snake.change_direction(UP) is False
        assert snake.direction == UP

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            Snake().change_direction("NORTH")


class TestBoard:
    """Tests for the Board class."""

    def test_reset_builds_wall_ring(self):
        board = Board(10)
        assert board.cell_at((0, 0)) == WALL
        assert board.cell_at((9, 5)) == WALL
        assert board.cell_at((5, 9)) == WALL
        assert board.cell_at((5, 5)) == EMPTY
        assert board.count(WALL) == 36
        assert board.count(EMPTY) == 64

    def test_out_of_range_reads_as_wall(self):
        board = Board(10)
        assert board.cell_at((-1, 3)) == WALL
        assert board.cell_at((3, 10)) == WALL

    def test_reset_discards_pickups(self):
        board = Board(10)
        board.set_cell((3, 3), FOOD)
        board.reset()
        assert board.cell_at((3, 3)) == EMPTY

    def test_set_cell_refuses_border(self):
        board = Board(10)
        with pytest.raises(ValueError):
            board.set_cell((0, 3), FOOD)
        with pytest.raises(ValueError):
            board.set_cell((10, 3), FOOD)

    def test_refresh_stamps_snake(self):
        board = Board(10)
        snake = Snake()
        board.refresh(snake)

        assert board.cell_at((4, 4)) == SNAKE_HEAD
        assert board.cell_at((3, 4)) == SNAKE
        assert board.cell_at((2, 4)) == SNAKE
        assert board.count(SNAKE_HEAD) == 1
        assert board.count(SNAKE) == 2

    def test_refresh_clears_old_snake_cells(self):
        board = Board(10)
        snake = Snake()
        board.refresh(snake)
        snake.move()
        board.refresh(snake)

        assert board.cell_at((2, 4)) == EMPTY
        assert board.cell_at((5, 4)) == SNAKE_HEAD

    def test_refresh_keeps_pickups(self):
        board = Board(10)
        board.set_cell((7, 7), BOOST)
        board.refresh(Snake())
        assert board.cell_at((7, 7)) == BOOST

    def test_pickup_under_snake_is_destroyed(self):
        board = Board(10)
        board.set_cell((5, 4), PENALTY)
        snake = Snake()
        snake.move()
        board.refresh(snake)
        snake.move()
        snake.move()
        snake.move()
        board.refresh(snake)

        assert board.cell_at((5, 4)) == EMPTY
        assert board.pickup_cells() == []

    def test_pickup_cells(self):
        board = Board(10)
        board.set_cell((2, 2), FOOD)
        board.set_cell((3, 7), LETHAL)
        assert sorted(board.pickup_cells()) == [(2, 2), (3, 7)]

    def test_print_board(self):
        board = Board(8)
        board.set_cell((5, 5), FOOD)
        board.refresh(Snake())
        text = board.print_board()

        lines = text.split("\n")
        assert len(lines) == 9
        assert lines[0].split()[1:] == ["#"] * 8
        assert lines[4].split()[1:] == ["#", ".", "o", "o", "@", ".", ".", "#"]
        assert "F" in lines[5]

    def test_tiny_board_rejected(self):
        with pytest.raises(ValueError):
            Board(2)


class TestGameOptions:
    """Tests for the GameOptions configuration struct."""

    def test_defaults(self):
        options = GameOptions()
        assert options.chaos_mode is False
        assert options.worm_mode is False
        assert options.is_enabled(LETHAL)
        assert options.is_enabled(FOOD)

    def test_toggles(self):
        options = GameOptions()
        assert options.toggle_chaos_mode() is True
        assert options.chaos_mode is True
        options.set_worm_mode(True)
        assert options.worm_mode is True
        options.set_pickup_enabled(BOOST, False)
        assert options.is_enabled(BOOST) is False

    def test_food_cannot_be_disabled(self):
        options = GameOptions()
        with pytest.raises(ValueError):
            options.set_pickup_enabled(FOOD, False)
        options.set_pickup_enabled(FOOD, True)
        assert options.is_enabled(FOOD)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            GameOptions().set_pickup_enabled("CAKE", True)

    def test_from_dict(self):
        options = GameOptions.from_dict({
            "chaos_mode": True,
            "pickups": {"lethal": False, "PENALTY": False},
        })
        assert options.chaos_mode is True
        assert options.is_enabled(LETHAL) is False
        assert options.is_enabled(PENALTY) is False
        assert options.is_enabled(BOOST) is True

    def test_from_dict_rejects_bad_pickups(self):
        with pytest.raises(ValueError):
            GameOptions.from_dict({"pickups": ["LETHAL"]})

    @pytest.mark.parametrize("data", [
        {"pickups": {"LETHAL": "no"}},
        {"pickups": {"BOOST": "false"}},
        {"pickups": {"FOOD": 1}},
        {"chaos_mode": "true"},
        {"worm_mode": 0},
    ])
    def test_from_dict_rejects_non_bool_flags(self, data):
        with pytest.raises(ValueError):
            GameOptions.from_dict(data)

    def test_setters_reject_non_bool(self):
        options = GameOptions()
        with pytest.raises(ValueError):
            options.set_pickup_enabled(LETHAL, "no")
        with pytest.raises(ValueError):
            options.set_chaos_mode("yes")
        assert options.is_enabled(LETHAL) is True
        assert options.chaos_mode is False

    def test_instances_do_not_share_flags(self):
        a = GameOptions()
        b = GameOptions()
        a.set_pickup_enabled(BOOST, False)
        assert b.is_enabled(BOOST) is True


class TestGameState:
    """Tests for the GameState snapshot."""

    def make_state(self, **overrides):
        values = dict(
            tick=3,
            phase="RUNNING",
            snake_positions=[(4, 4), (3, 4)],
            direction=RIGHT,
            score=12,
            speed=150,
            size=2,
            chaos_mode=False,
            worm_mode=False,
            pickups_on_board=1,
            cells=[[WALL, WALL], [WALL, EMPTY]],
            board_text="",
        )
        values.update(overrides)
        return GameState(**values)

    def test_speed_stat(self):
        assert self.make_state().speed_stat == 350

    def test_cell_at_is_col_row(self):
        state = self.make_state()
        assert state.cell_at(1, 1) == EMPTY
        assert state.cell_at(0, 1) == WALL

    def test_to_dict(self):
        data = self.make_state().to_dict()
        assert data["score"] == 12
        assert data["snake_positions"] == [[4, 4], [3, 4]]
        assert data["name_needed"] is False

    def test_repr(self):
        repr_str = repr(self.make_state())
        assert "tick=3" in repr_str
        assert "score=12" in repr_str
