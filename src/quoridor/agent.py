"""Computer opponent: maps a difficulty label onto a search depth (and, on easy, a bit of deliberate randomness)"""

import logging
from random import Random
from typing import Optional

from src.core.shared_types import (
    DEFAULT_DIFFICULTY,
    Difficulty,
    Player,
    difficulty_from_label,
)
from src.quoridor.board import Board
from src.quoridor.evaluation import EvaluationFunction, PathLengthEvaluation
from src.quoridor.moves import Move
from src.quoridor.search import MinimaxSearch, SearchStrategy

logger = logging.getLogger(__name__)

DIFFICULTY_DEPTH: dict[Difficulty, int] = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 3,
}

# chance per turn that an easy opponent skips the search and plays any legal move
EASY_NOISE = 0.3


class Agent:
    def __init__(
        self,
        player_id: int,
        difficulty: str = DEFAULT_DIFFICULTY,
        rng: Optional[Random] = None,
        search: Optional[SearchStrategy] = None,
        evaluation: Optional[EvaluationFunction] = None,
    ) -> None:
        self.player_id = Player(player_id)
        self.difficulty = difficulty_from_label(difficulty)
        self.depth = DIFFICULTY_DEPTH[self.difficulty]
        self.rng = rng if rng is not None else Random()
        # search shares the agent's random source
        self.search = search if search is not None else MinimaxSearch(self.rng)
        self.evaluation = evaluation if evaluation is not None else PathLengthEvaluation()

    def choose_move(self, board: Board) -> Optional[Move]:
        """The agent's move on this board, or None if it has no legal move (game over)"""
        legal_moves = board.get_legal_moves(self.player_id)
        if not legal_moves:
            return None

        if self.difficulty == Difficulty.EASY and self.rng.random() < EASY_NOISE:
            move = self.rng.choice(legal_moves)
            logger.debug("easy agent %s plays random move %s", self.player_id, move.to_notation())
            return move

        return self.search.choose_move(board, self.player_id, self.depth, self.evaluation)
