"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from random import Random
from typing import Callable, Iterable

import pytest

from src.core.shared_types import Player
from src.db.memory_repository import InMemoryGameRepository
from src.quoridor.board import Board
from src.quoridor.position import Position
from src.services.quoridor_service import QuoridorService

BoardFactory = Callable[..., Board]


@pytest.fixture
def make_board() -> BoardFactory:
    """Call the inner function with squares in notation ('e1') and wall slots as (row, col) pairs.

    NOTE: bypasses the placement rules on purpose, so tests can set up positions that cannot be reached by legal play.
    """

    def _create_board(
        p1: str = "e1",
        p2: str = "e9",
        horizontal: Iterable[tuple[int, int]] = (),
        vertical: Iterable[tuple[int, int]] = (),
        p1_walls_used: int = 0,
        p2_walls_used: int = 0,
        to_move: Player = Player.ONE,
    ) -> Board:
        return Board(
            p1_pos=Position.from_algebraic(p1),
            p2_pos=Position.from_algebraic(p2),
            p1_walls_used=p1_walls_used,
            p2_walls_used=p2_walls_used,
            horizontal_walls=frozenset(Position(r, c) for r, c in horizontal),
            vertical_walls=frozenset(Position(r, c) for r, c in vertical),
            to_move=to_move,
        )

    return _create_board


@pytest.fixture
def repository() -> InMemoryGameRepository:
    return InMemoryGameRepository()


@pytest.fixture
def service(repository: InMemoryGameRepository) -> QuoridorService:
    """Service with a seeded random source, so computer moves are reproducible"""
    return QuoridorService(repository, rng=Random(2024))
