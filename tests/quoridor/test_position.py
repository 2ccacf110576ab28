"""Unit tests for /src/quoridor/position.py"""

from string import ascii_lowercase

import pytest

from src.core.exceptions import InvalidNotationError
from src.quoridor.position import BOARD_SIZE, WALL_SLOTS, Position


@pytest.mark.parametrize(
    "row, col, notation",
    [
        (row, col, f"{ascii_lowercase[col]}{BOARD_SIZE - row}")
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
    ],
)
def test_creating_from_algebraic(row: int, col: int, notation: str) -> None:
    """Files run left to right, rank 1 is player one's home row (the bottom row, index 8)"""
    position = Position.from_algebraic(notation)
    assert position == Position(row, col)
    assert position.to_algebraic() == notation


def test_starting_squares() -> None:
    assert Position.from_algebraic("e1") == Position(8, 4)
    assert Position.from_algebraic("e9") == Position(0, 4)


@pytest.mark.parametrize("notation", ["j1", "a0", "e10", "", "11", "ee"])
def test_invalid_square_notation(notation: str) -> None:
    with pytest.raises(InvalidNotationError):
        _ = Position.from_algebraic(notation)


def test_position_is_a_value() -> None:
    """Equality and hashing by value: positions are used as set members for the walls"""
    assert Position(3, 4) == Position(3, 4)
    assert len({Position(3, 4), Position(3, 4), Position(4, 3)}) == 2


def test_within_bounds() -> None:
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            assert Position(row, col).is_within_bounds()

    assert not Position(BOARD_SIZE, 0).is_within_bounds()
    assert not Position(0, -1).is_within_bounds()


def test_wall_slots_are_one_smaller_than_the_board() -> None:
    assert Position(WALL_SLOTS - 1, WALL_SLOTS - 1).is_wall_slot()
    assert not Position(WALL_SLOTS, 0).is_wall_slot()
    assert not Position(0, WALL_SLOTS).is_wall_slot()
    assert not Position(-1, 0).is_wall_slot()


def test_neighbours_in_the_middle() -> None:
    """Order: up, down, left, right"""
    assert Position(4, 4).neighbours() == [
        Position(3, 4),
        Position(5, 4),
        Position(4, 3),
        Position(4, 5),
    ]


def test_neighbours_in_the_corner() -> None:
    assert Position(0, 0).neighbours() == [Position(1, 0), Position(0, 1)]
    assert Position(8, 8).neighbours() == [Position(7, 8), Position(8, 7)]
