"""
A cell on the board, or the anchor of a wall slot

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.exceptions import InvalidNotationError

# Quoridor is played on 9x9 cells. Walls anchor in the 8x8 grid of gaps between them.
BOARD_SIZE = 9
WALL_SLOTS = BOARD_SIZE - 1

Vector = tuple[int, int]

# (d_row, d_col): up, down, left, right. Row 0 is the top of the board.
DIRECTIONS: tuple[Vector, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Position:
        """Algebraic notation: 'a1' - 'i9'. Files run left to right, ranks count up from player one's home row.

        ex) Player one starts on 'e1' == Position(8, 4), player two on 'e9' == Position(0, 4)
        """
        if len(sq) != 2 or sq[0] not in ascii_lowercase[:BOARD_SIZE] or not sq[1].isdigit():
            raise InvalidNotationError(f"Cannot interpret {sq!r} as a square.")
        position = cls(row=BOARD_SIZE - int(sq[1]), col=ascii_lowercase.index(sq[0]))
        if not position.is_within_bounds():
            raise InvalidNotationError(f"Square {sq!r} is not on the board.")
        return position

    def to_algebraic(self) -> str:
        return f"{ascii_lowercase[self.col]}{BOARD_SIZE - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def is_wall_slot(self) -> bool:
        """Walls anchor between cells, so the last row / column cannot hold an anchor"""
        return (0 <= self.row < WALL_SLOTS) and (0 <= self.col < WALL_SLOTS)

    def shifted(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)

    def neighbours(self) -> list[Position]:
        """Orthogonally adjacent cells that are still on the board"""
        candidates = [self.shifted(d_row, d_col) for d_row, d_col in DIRECTIONS]
        return [cell for cell in candidates if cell.is_within_bounds()]
