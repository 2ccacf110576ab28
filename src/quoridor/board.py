"""The Game board implements all rules that affect the `position` (in Quoridor: the two pawns and the walls placed between cells)"""

import math
from collections import deque
from dataclasses import dataclass, replace
from typing import Optional

from src.core.exceptions import IllegalMoveError
from src.core.shared_types import Orientation, Player
from src.quoridor.moves import (
    Move,
    PawnMove,
    WallMove,
    edge_blocked_by_walls,
    pawn_targets,
    wall_conflicts,
)
from src.quoridor.position import WALL_SLOTS, Position

MAX_WALLS = 10
STARTING_POSITIONS: dict[Player, Position] = {
    Player.ONE: Position(8, 4),
    Player.TWO: Position(0, 4),
}

# shortest_path_length() when the goal row cannot be reached at all
UNREACHABLE = math.inf


@dataclass(frozen=True)
class Board:
    """
    Immutable snapshot of a game of Quoridor
    ----

    Every move produces a new Board, so a board can be shared freely between search frames (and kept around by a UI for undo).
    Wall sets are frozensets of anchor slots, one per orientation. `Board()` is the starting position.
    """

    p1_pos: Position = STARTING_POSITIONS[Player.ONE]
    p2_pos: Position = STARTING_POSITIONS[Player.TWO]
    p1_walls_used: int = 0
    p2_walls_used: int = 0
    horizontal_walls: frozenset[Position] = frozenset()
    vertical_walls: frozenset[Position] = frozenset()
    to_move: Player = Player.ONE

    # --- GAME END ---
    def is_terminal(self) -> bool:
        return self.p1_pos.row == Player.ONE.goal_row or self.p2_pos.row == Player.TWO.goal_row

    def get_winner(self) -> Optional[Player]:
        if self.p1_pos.row == Player.ONE.goal_row:
            return Player.ONE
        if self.p2_pos.row == Player.TWO.goal_row:
            return Player.TWO
        return None

    def get_to_move(self) -> Player:
        return Player(self.to_move)

    # --- PLAYER LOOKUPS ---
    def position_of(self, player: int) -> Position:
        return self.p1_pos if player == Player.ONE else self.p2_pos

    def walls_used(self, player: int) -> int:
        return self.p1_walls_used if player == Player.ONE else self.p2_walls_used

    def walls_remaining(self, player: int) -> int:
        return MAX_WALLS - self.walls_used(player)

    # --- LEGAL MOVES ---
    def get_legal_moves(self, player: int) -> list[Move]:
        """
        Every move the player may make on this board
        ----

        1. pawn moves: steps, straight jumps and diagonal sidesteps (see `pawn_targets()`)
        2. wall moves: only while the player has walls left. Every slot and orientation that neither overlaps/crosses
           an existing wall nor cuts either player off from their goal row.

        Empty once the game is over.
        """
        if self.is_terminal():
            return []

        moves: list[Move] = list(self.pawn_moves(player))
        if self.walls_used(player) >= MAX_WALLS:
            return moves

        for row in range(WALL_SLOTS):
            for col in range(WALL_SLOTS):
                for orientation in (Orientation.HORIZONTAL, Orientation.VERTICAL):
                    wall = WallMove(row, col, orientation)
                    if self.is_wall_placement_valid(player, wall):
                        moves.append(wall)
        return moves

    def pawn_moves(self, player: int) -> list[PawnMove]:
        """Only the pawn moves (no wall generation, which needs path finding for every slot)"""
        mover = self.position_of(player)
        opponent = self.position_of(Player(player).opponent)
        return [PawnMove.to_position(target) for target in pawn_targets(mover, opponent, self)]

    def is_wall_placement_valid(self, player: int, wall: WallMove) -> bool:
        """Budget left, no overlap / crossing, and both players can still reach their goal row afterwards"""
        if self.walls_used(player) >= MAX_WALLS:
            return False
        if wall_conflicts(wall, self):
            return False

        hypothetical = self._with_wall(wall)
        return (
            hypothetical.shortest_path_length(Player.ONE) != UNREACHABLE
            and hypothetical.shortest_path_length(Player.TWO) != UNREACHABLE
        )

    # --- STATE TRANSITION ---
    def apply_move(self, move: Move) -> "Board":
        """
        Return the board after the player to move makes `move`
        ----

        Pawn moves are expected to come from `get_legal_moves()`; only the target being on the board is checked.
        Wall moves are validated again, since an illegal wall could strand a player.
        """
        mover = Player(self.to_move)
        if isinstance(move, PawnMove):
            if not move.target.is_within_bounds():
                raise IllegalMoveError(f"Pawn target off the board: {move}")
            moved = (
                replace(self, p1_pos=move.target)
                if mover == Player.ONE
                else replace(self, p2_pos=move.target)
            )
            return replace(moved, to_move=mover.opponent)

        if not self.is_wall_placement_valid(mover, move):
            raise IllegalMoveError(f"Illegal wall move detected: {move}")
        placed = self._with_wall(move)
        if mover == Player.ONE:
            placed = replace(placed, p1_walls_used=self.p1_walls_used + 1)
        else:
            placed = replace(placed, p2_walls_used=self.p2_walls_used + 1)
        return replace(placed, to_move=mover.opponent)

    def _with_wall(self, wall: WallMove) -> "Board":
        if wall.orientation == Orientation.HORIZONTAL:
            return replace(self, horizontal_walls=self.horizontal_walls | {wall.slot})
        return replace(self, vertical_walls=self.vertical_walls | {wall.slot})

    # --- PATH FINDING ---
    def is_edge_blocked(self, a: Position, b: Position) -> bool:
        return edge_blocked_by_walls(a, b, self.horizontal_walls, self.vertical_walls)

    def shortest_path_length(self, player: int) -> int | float:
        """
        Breadth first search from the player's pawn to any cell of their goal row
        ----

        The opponent's pawn is ignored (it moves, walls don't). Returns UNREACHABLE if walls cut the player off.
        """
        start = self.position_of(player)
        goal_row = Player(player).goal_row
        distances: dict[Position, int] = {start: 0}
        queue: deque[Position] = deque([start])
        while queue:
            current = queue.popleft()
            if current.row == goal_row:
                return distances[current]
            for neighbour in current.neighbours():
                if neighbour in distances or self.is_edge_blocked(current, neighbour):
                    continue
                distances[neighbour] = distances[current] + 1
                queue.append(neighbour)
        return UNREACHABLE
