"""Unit tests for /src/quoridor/game.py"""

from typing import Callable

import pytest

from src.core.exceptions import (
    GameError,
    GameStateError,
    IllegalMoveError,
    InvalidNotationError,
    NotYourTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import Difficulty, Orientation, Player, Status
from src.quoridor.board import Board
from src.quoridor.game import Game
from src.quoridor.moves import PawnMove, WallMove
from src.quoridor.position import Position

BoardFactory = Callable[..., Board]


@pytest.fixture
def game() -> Game:
    return Game.new_game("alice", "bob")


@pytest.fixture
def almost_won_game(make_board: BoardFactory) -> Game:
    """Alice (player one) stands on a8, one step away from winning"""
    return Game(
        board=make_board(p1="a8", p2="i9"),
        moves=[],
        players={Player.ONE: "alice", Player.TWO: "bob"},
        status=Status.IN_PROGRESS,
    )


# -- CREATION LOGIC --
def test_creating_new_game(game: Game) -> None:
    assert game.board == Board()
    assert game.moves == []
    assert game.players == {Player.ONE: "alice", Player.TWO: "bob"}
    assert game.status == Status.IN_PROGRESS
    assert game.turn_player == "alice"
    assert game.winner is None
    assert game.computer_player is None


def test_players_need_different_names() -> None:
    with pytest.raises(GameStateError):
        _ = Game.new_game("alice", "alice")


def test_game_creation_from_model_roundtrip(game: Game) -> None:
    """Play some moves, convert to a GameModel and back"""
    game.make_move("e2", "alice")
    game.make_move("e8", "bob")
    game.make_move("a3h", "alice")

    model = game.to_model()
    assert model == GameModel(
        moves=["e2", "e8", "a3h"],
        registered_players={"1": "alice", "2": "bob"},
        status="in progress",
    )

    restored = Game.from_model(model)
    assert restored.board == game.board
    assert restored.moves == game.moves
    assert restored.to_model() == model


def test_model_with_computer_opponent() -> None:
    game = Game.new_game(
        "alice", "computer", computer_player=Player.TWO, difficulty=Difficulty.HARD
    )
    model = game.to_model()
    assert model.computer_player == "2"
    assert model.difficulty == "hard"

    restored = Game.from_model(model)
    assert restored.computer_player == Player.TWO
    assert restored.difficulty == Difficulty.HARD


def test_invalid_status_name() -> None:
    model = GameModel(
        moves=[], registered_players={"1": "alice", "2": "bob"}, status="not_existing"
    )
    with pytest.raises(GameStateError):
        _ = Game.from_model(model)


@pytest.mark.parametrize(
    "registered_players",
    [{"1": "alice"}, {"1": "alice", "3": "bob"}, {"one": "alice", "two": "bob"}],
)
def test_invalid_registered_players(registered_players: dict[str, str]) -> None:
    model = GameModel(moves=[], registered_players=registered_players, status="in progress")
    with pytest.raises(GameStateError):
        _ = Game.from_model(model)


def test_model_with_illegal_move_history() -> None:
    """Replaying the moves checks them: a pawn cannot skip a square"""
    model = GameModel(
        moves=["e3"], registered_players={"1": "alice", "2": "bob"}, status="in progress"
    )
    with pytest.raises(IllegalMoveError):
        _ = Game.from_model(model)


def test_model_status_must_match_the_moves() -> None:
    model = GameModel(
        moves=["e2"], registered_players={"1": "alice", "2": "bob"}, status="finished"
    )
    with pytest.raises(GameStateError):
        _ = Game.from_model(model)


# --- LEGAL MOVE GENERATION ---
def test_legal_moves_in_notation(game: Game) -> None:
    legal_moves = game.legal_moves("alice")
    assert len(legal_moves) == 131
    assert {"e2", "d1", "f1"} <= set(legal_moves)
    assert "a8h" in legal_moves
    assert "h1v" in legal_moves


def test_asking_for_legal_moves_before_your_turn(game: Game) -> None:
    with pytest.raises(NotYourTurnError):
        game.legal_moves("bob")


def test_asking_for_legal_moves_as_a_stranger(game: Game) -> None:
    with pytest.raises(GameStateError):
        game.legal_moves("mallory")


# --- MAKING MOVES ---
def test_making_a_pawn_move(game: Game) -> None:
    game.make_move("e2", "alice")
    assert game.board.p1_pos == Position(7, 4)
    assert game.moves == [PawnMove(7, 4)]
    assert game.turn_player == "bob"


def test_making_a_wall_move(game: Game) -> None:
    game.make_move("e3h", "alice")
    assert game.moves == [WallMove(5, 4, Orientation.HORIZONTAL)]
    assert game.board.walls_remaining(Player.ONE) == 9
    assert game.board.horizontal_walls == frozenset({Position(5, 4)})


def test_making_a_move_before_your_turn(game: Game) -> None:
    with pytest.raises(NotYourTurnError):
        game.make_move("e8", "bob")


@pytest.mark.parametrize("move", ["e3", "a1", "e1", "e9"])
def test_illegal_pawn_moves(game: Game, move: str) -> None:
    with pytest.raises(IllegalMoveError):
        game.make_move(move, "alice")
    assert game.moves == []


def test_crossing_wall_is_illegal(game: Game) -> None:
    game.make_move("e3h", "alice")
    with pytest.raises(IllegalMoveError):
        game.make_move("e3v", "bob")


def test_unreadable_move(game: Game) -> None:
    with pytest.raises(InvalidNotationError):
        game.make_move("hello", "alice")


# --- WINNER ---
def test_reaching_the_goal_row_ends_the_game(almost_won_game: Game) -> None:
    almost_won_game.make_move("a9", "alice")
    assert almost_won_game.status == Status.FINISHED
    assert almost_won_game.winner == "alice"
    assert almost_won_game.board.get_winner() == Player.ONE


def test_no_moves_after_the_game_ended(almost_won_game: Game) -> None:
    almost_won_game.make_move("a9", "alice")
    with pytest.raises(GameError):
        almost_won_game.make_move("i8", "bob")
    with pytest.raises(GameStateError):
        almost_won_game.legal_moves("bob")


def test_no_winner_while_playing(game: Game) -> None:
    game.make_move("e2", "alice")
    assert game.winner is None
