"""
Heuristic evaluation of a board from one player's perspective.

Key idea: Quoridor is a race. The difference in shortest path lengths says who is ahead,
the remaining terms sharpen that near the finish line and break ties.
"""

from dataclasses import replace
from typing import Protocol

from src.core.shared_types import Player
from src.quoridor.board import UNREACHABLE, Board

WIN_SCORE = 1_000_000.0
STRANDED_SCORE = 100_000.0
DISTANCE_WEIGHT = 10.0
NEAR_GOAL_BONUS = 5000.0  # one step (or less) from the goal row
CLOSE_TO_GOAL_BONUS = 500.0  # two or three steps from the goal row
MOBILITY_WEIGHT = 2.0
WALL_USAGE_PENALTY = 0.1


class EvaluationFunction(Protocol):
    def evaluate(self, board: Board, player_id: int, opponent_id: int) -> float: ...


class PathLengthEvaluation:
    """Score = race lead + finish-line urgency + path redundancy - walls spent"""

    def evaluate(self, board: Board, player_id: int, opponent_id: int) -> float:
        if board.is_terminal():
            winner = board.get_winner()
            if winner is None:
                # both pawns can't arrive on the same ply, so this is never reached in play
                return 0.0
            return WIN_SCORE if winner == player_id else -WIN_SCORE

        my_dist = board.shortest_path_length(player_id)
        opp_dist = board.shortest_path_length(opponent_id)
        if my_dist == UNREACHABLE:
            return -STRANDED_SCORE
        if opp_dist == UNREACHABLE:
            return STRANDED_SCORE

        score = (opp_dist - my_dist) * DISTANCE_WEIGHT
        score += proximity_bonus(my_dist)
        score -= proximity_bonus(opp_dist)

        # A path is only safe if it can't be blocked easily: reward having several moves that make progress
        score += count_good_moves(board, player_id, my_dist) * MOBILITY_WEIGHT
        score -= count_good_moves(board, opponent_id, opp_dist) * MOBILITY_WEIGHT

        # all else being equal, keep your walls
        score -= board.walls_used(player_id) * WALL_USAGE_PENALTY
        return float(score)


def proximity_bonus(distance: int | float) -> float:
    if distance <= 1:
        return NEAR_GOAL_BONUS
    if distance <= 3:
        return CLOSE_TO_GOAL_BONUS
    return 0.0


def count_good_moves(board: Board, player_id: int, current_distance: int | float) -> int:
    """How many of the player's pawn moves bring them strictly closer to their goal row

    NOTE: the moves are applied as if it were `player_id`'s turn, so the opponent's pawn moves move the opponent's pawn.
    """
    as_mover = replace(board, to_move=Player(player_id))
    return sum(
        1
        for move in as_mover.pawn_moves(player_id)
        if as_mover.apply_move(move).shortest_path_length(player_id) < current_distance
    )
