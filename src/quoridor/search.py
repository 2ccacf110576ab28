"""
Depth bounded minimax search with alpha-beta pruning.

The branching factor is large (pawn moves + up to 128 wall placements, each of which needs two path searches to validate),
so useful depths are small: 1 to 3 plies.
"""

import logging
import math
from random import Random
from typing import Optional, Protocol

from src.core.shared_types import Player
from src.quoridor.board import Board
from src.quoridor.evaluation import EvaluationFunction
from src.quoridor.moves import Move

logger = logging.getLogger(__name__)

# root moves scoring within this distance of the best are considered equally good
TIE_TOLERANCE = 1e-9


class SearchStrategy(Protocol):
    def choose_move(
        self, board: Board, player_id: int, depth: int, evaluation: EvaluationFunction
    ) -> Optional[Move]: ...


class MinimaxSearch:
    """Minimax with alpha-beta pruning. Ties between the best root moves are broken by the injected random source."""

    def __init__(self, rng: Optional[Random] = None) -> None:
        self.rng = rng if rng is not None else Random()

    def choose_move(
        self, board: Board, player_id: int, depth: int, evaluation: EvaluationFunction
    ) -> Optional[Move]:
        """
        Pick the move with the highest minimax value for `player_id`
        ----

        The root is a single maximizing layer: alpha is carried over from one root move to the next (lowered by the tie
        tolerance, so moves that only tie the best are still searched exactly), beta stays open.
        Returns None when the player has no legal moves (i.e. the game is over).
        """
        legal_moves = board.get_legal_moves(player_id)
        if not legal_moves:
            return None

        opponent_id = Player(player_id).opponent
        best_score = -math.inf
        best_moves: list[Move] = []
        alpha = -math.inf
        for move in legal_moves:
            score = self.minimax(
                board.apply_move(move),
                depth - 1,
                False,
                player_id,
                opponent_id,
                evaluation,
                # a child cut off at this bound scores at least TIE_TOLERANCE below the best
                alpha - TIE_TOLERANCE,
                math.inf,
            )
            if score > best_score + TIE_TOLERANCE:
                best_score = score
                best_moves = [move]
            elif abs(score - best_score) < TIE_TOLERANCE:
                best_moves.append(move)
            alpha = max(alpha, best_score)

        chosen = self.rng.choice(best_moves)
        logger.debug(
            "player %s chose %s (score %.1f, %d tied of %d legal moves, depth %d)",
            player_id,
            chosen.to_notation(),
            best_score,
            len(best_moves),
            len(legal_moves),
            depth,
        )
        return chosen

    def minimax(
        self,
        state: Board,
        depth: int,
        maximizing: bool,
        player_id: int,
        opponent_id: int,
        evaluation: EvaluationFunction,
        alpha: float,
        beta: float,
    ) -> float:
        """Value of `state` for `player_id`. Maximizing layers move `player_id`, minimizing layers move the opponent."""
        if depth <= 0 or state.is_terminal():
            return evaluation.evaluate(state, player_id, opponent_id)

        current = player_id if maximizing else opponent_id
        moves = state.get_legal_moves(current)
        if not moves:
            return evaluation.evaluate(state, player_id, opponent_id)

        best = -math.inf if maximizing else math.inf
        for move in moves:
            value = self.minimax(
                state.apply_move(move),
                depth - 1,
                not maximizing,
                player_id,
                opponent_id,
                evaluation,
                alpha,
                beta,
            )
            if maximizing:
                best = max(best, value)
                alpha = max(alpha, best)
            else:
                best = min(best, value)
                beta = min(beta, best)
            if beta <= alpha:
                break
        return best
