"""Orchestration of communication from API router to business logic and repository layers (and the reverse direction)."""

import logging
from random import Random
from typing import Optional
from uuid import UUID

from src.api.models import (
    ComputerMoveRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
)
from src.core.exceptions import GameStateError, NotYourTurnError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import DEFAULT_DIFFICULTY, Orientation, Player
from src.db.repository import GameRepository
from src.quoridor.agent import Agent
from src.quoridor.game import Game
from src.quoridor.moves import WallMove
from src.quoridor.position import Position

logger = logging.getLogger(__name__)

COMPUTER_NAME = "computer"


class QuoridorService:
    """Orchestration of layers for a Quoridor game."""

    def __init__(self, repository: GameRepository, rng: Optional[Random] = None) -> None:
        self.repo = repository
        # shared by every computer opponent of this service
        self.rng = rng if rng is not None else Random()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """First player requested a new game, either against a named opponent or against the computer."""

        if request.opponent_name is None:
            difficulty = request.difficulty or DEFAULT_DIFFICULTY
            new_game = Game.new_game(
                player_one=request.player_name,
                player_two=f"{COMPUTER_NAME} ({difficulty})",
                computer_player=Player.TWO,
                difficulty=difficulty,
            )
        else:
            new_game = Game.new_game(
                player_one=request.player_name, player_two=request.opponent_name
            )

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("created game %s for players %s", game_id, stored_game.registered_players)

        # Return a GameResponse
        return self._create_game_response(game_id, new_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves."""

        game = Game.from_model(self._fetch_game(request.game_id))
        legal_moves = game.legal_moves(request.player_name)
        return LegalMovesResponse(
            game_id=request.game_id,
            player_name=request.player_name,
            player_number=int(game.player_number(request.player_name)),
            legal_moves=legal_moves,
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt."""

        game = Game.from_model(self._fetch_game(request.game_id))

        # Attempt the move
        game.make_move(request.move, request.player_name)

        return self._store_and_respond(request.game_id, game)

    def computer_move(self, request: ComputerMoveRequest) -> GameResponse:
        """Let the computer opponent pick and play its move. Only allowed when it is the computer's turn."""

        game = Game.from_model(self._fetch_game(request.game_id))
        if game.computer_player is None:
            raise GameStateError("This game has no computer opponent.")
        if game.board.get_to_move() != game.computer_player:
            raise NotYourTurnError(
                f"It is not the computer's turn. Waiting for player {game.turn_player} to make a move first."
            )

        computer_name = game.players[game.computer_player]
        agent = Agent(
            game.computer_player,
            game.difficulty or DEFAULT_DIFFICULTY,
            rng=self.rng,
        )
        move = agent.choose_move(game.board)
        if move is None:
            raise GameStateError(f"Game is not in progress. status: {game.status}")

        game.make_move(move.to_notation(), computer_name)
        return self._store_and_respond(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _store_and_respond(self, game_id: UUID, game: Game) -> GameResponse:
        """Capture the updated state in a GameModel, store it and build the response"""
        self.repo.update_game(game_id, game.to_model())
        if game.winner is not None:
            logger.info("game %s won by %s", game_id, game.winner)
        return self._create_game_response(game_id, game)

    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the Game into a GameResponse (for game with given ID.)"""
        model = game.to_model()
        board = game.board
        return GameResponse(
            game_id=game_id,
            players=model.registered_players,
            player_to_move=game.turn_player,
            pawns={
                str(int(player)): board.position_of(player).to_algebraic()
                for player in Player
            },
            walls_remaining={
                str(int(player)): board.walls_remaining(player) for player in Player
            },
            horizontal_walls=self._wall_notations(board.horizontal_walls, Orientation.HORIZONTAL),
            vertical_walls=self._wall_notations(board.vertical_walls, Orientation.VERTICAL),
            move_history=model.moves,
            status=game.status,
            winner=game.winner,
            computer_player=model.computer_player,
        )

    def _wall_notations(
        self, slots: frozenset[Position], orientation: Orientation
    ) -> list[str]:
        return sorted(
            WallMove(slot.row, slot.col, orientation).to_notation() for slot in slots
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
