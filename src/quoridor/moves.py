"""
Geometry / base movement rules for pawns and walls

Key idea: a move is a value. A pawn move only knows its target cell, a wall move only knows its slot + orientation.
Which of them are legal is decided by the Board, using the rule functions below.
"""

from dataclasses import dataclass
from string import ascii_lowercase
from typing import Protocol, Self

from src.core.exceptions import InvalidNotationError
from src.core.shared_types import MoveKind, Orientation
from src.quoridor.position import DIRECTIONS, WALL_SLOTS, Position, Vector


class Board(Protocol):
    """Just the parts the movement rules need"""

    @property
    def horizontal_walls(self) -> frozenset[Position]: ...
    @property
    def vertical_walls(self) -> frozenset[Position]: ...
    def is_edge_blocked(self, a: Position, b: Position) -> bool: ...


@dataclass(frozen=True)
class PawnMove:
    """Move the pawn of the player to move onto the target cell"""

    row: int
    col: int

    @property
    def kind(self) -> MoveKind:
        return MoveKind.PAWN

    @property
    def target(self) -> Position:
        return Position(self.row, self.col)

    @classmethod
    def to_position(cls, target: Position) -> Self:
        return cls(target.row, target.col)

    def to_notation(self) -> str:
        return self.target.to_algebraic()


@dataclass(frozen=True)
class WallMove:
    """Place a wall anchored at the slot (row, col). The wall covers two cell edges."""

    row: int
    col: int
    orientation: Orientation

    @property
    def kind(self) -> MoveKind:
        return MoveKind.WALL

    @property
    def slot(self) -> Position:
        return Position(self.row, self.col)

    def to_notation(self) -> str:
        """Slot file 'a'-'h', slot rank 1-8 (counted from player one's side) and the orientation letter. ex) 'e3h'"""
        return f"{ascii_lowercase[self.col]}{WALL_SLOTS - self.row}{self.orientation.value}"


Move = PawnMove | WallMove


def move_from_notation(notation: str) -> Move:
    """
    Parse a move written in notation
    ----

    examples:
    * "e2": the pawn moves onto e2
    * "e3h": a horizontal wall anchored at the e3 slot
    * "a8v": a vertical wall anchored at the a8 slot
    """
    text = notation.strip().lower()
    if len(text) == 2:
        return PawnMove.to_position(Position.from_algebraic(text))

    if len(text) != 3 or text[2] not in {o.value for o in Orientation}:
        raise InvalidNotationError(f"Cannot interpret {notation!r} as a move.")

    file_char, rank_char = text[0], text[1]
    if file_char not in ascii_lowercase[:WALL_SLOTS] or not rank_char.isdigit():
        raise InvalidNotationError(f"Cannot interpret {notation!r} as a wall slot.")
    rank = int(rank_char)
    if not 1 <= rank <= WALL_SLOTS:
        raise InvalidNotationError(f"Wall slot rank out of range in {notation!r}.")
    return WallMove(
        row=WALL_SLOTS - rank,
        col=ascii_lowercase.index(file_char),
        orientation=Orientation(text[2]),
    )


# --- EDGE RULES ---
def edge_blocked_by_walls(
    a: Position,
    b: Position,
    horizontal_walls: frozenset[Position],
    vertical_walls: frozenset[Position],
) -> bool:
    """
    Is the edge between two adjacent cells covered by a wall?
    ----

    A wall is two cells long, so every wall covers two edges:
    * a horizontal wall at (r, c) blocks the steps between rows r and r+1 in columns c and c+1
    * a vertical wall at (r, c) blocks the steps between columns c and c+1 in rows r and r+1

    Hence, to check a step, look at the slot on the step itself and at the slot one to the left (or one up).
    """
    if a.col == b.col:
        row = min(a.row, b.row)
        return (
            Position(row, a.col) in horizontal_walls
            or Position(row, a.col - 1) in horizontal_walls
        )
    col = min(a.col, b.col)
    return (
        Position(a.row, col) in vertical_walls
        or Position(a.row - 1, col) in vertical_walls
    )


# --- PAWN MOVEMENT RULES ---
def sidesteps(direction: Vector) -> tuple[Vector, Vector]:
    """The two directions perpendicular to the given one"""
    d_row, _ = direction
    if d_row != 0:
        return (0, -1), (0, 1)
    return (-1, 0), (1, 0)


def pawn_targets(mover: Position, opponent: Position, board: Board) -> list[Position]:
    """
    Cells the pawn standing on `mover` can reach this turn
    ----

    * Step onto any adjacent cell that is not walled off.
    * If the opponent stands on that cell, jump straight over them when the cell behind is on the board and not walled off.
    * Otherwise (edge of the board or a wall behind the opponent), step diagonally: to either side of the opponent,
      as long as that side is on the board and not walled off from the opponent.
    """
    targets: list[Position] = []
    for d_row, d_col in DIRECTIONS:
        neighbour = mover.shifted(d_row, d_col)
        if not neighbour.is_within_bounds() or board.is_edge_blocked(mover, neighbour):
            continue

        if neighbour != opponent:
            targets.append(neighbour)
            continue

        jump = neighbour.shifted(d_row, d_col)
        if jump.is_within_bounds() and not board.is_edge_blocked(neighbour, jump):
            targets.append(jump)
            continue

        for side_row, side_col in sidesteps((d_row, d_col)):
            side = neighbour.shifted(side_row, side_col)
            if side.is_within_bounds() and not board.is_edge_blocked(neighbour, side):
                targets.append(side)
    return targets


# --- WALL PLACEMENT RULES ---
# Same-orientation slots that would overlap the new wall along its length
COLLINEAR_NEIGHBOURS: dict[Orientation, tuple[Vector, Vector]] = {
    Orientation.HORIZONTAL: ((0, -1), (0, 1)),
    Orientation.VERTICAL: ((-1, 0), (1, 0)),
}


def wall_conflicts(wall: WallMove, board: Board) -> bool:
    """
    Structural check only (no path finding)
    ----

    A wall conflicts when
    1. any wall (either orientation) is anchored at the same slot: overlapping or crossing it
    2. a wall of the same orientation is anchored at the adjacent slot along its length: the two would overlap by one edge
    """
    slot = wall.slot
    if not slot.is_wall_slot():
        return True
    if slot in board.horizontal_walls or slot in board.vertical_walls:
        return True

    same_orientation = (
        board.horizontal_walls
        if wall.orientation == Orientation.HORIZONTAL
        else board.vertical_walls
    )
    return any(
        slot.shifted(d_row, d_col) in same_orientation
        for d_row, d_col in COLLINEAR_NEIGHBOURS[wall.orientation]
    )
