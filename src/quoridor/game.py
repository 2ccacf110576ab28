"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError, IllegalMoveError, NotYourTurnError
from src.core.models import GameModel
from src.core.shared_types import Difficulty, Player, Status, difficulty_from_label
from src.quoridor.board import Board
from src.quoridor.moves import Move, PawnMove, move_from_notation

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    moves: list[Move]
    players: dict[Player, str]
    status: Status
    computer_player: Optional[Player] = None
    difficulty: Optional[Difficulty] = None

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has

        The board is rebuilt by replaying the recorded moves from the starting position.
        """

        # Validation
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )
        try:
            players = {
                Player(int(number)): name
                for number, name in model.registered_players.items()
            }
        except ValueError as err:
            raise GameStateError(
                f"Invalid player numbers: {list(model.registered_players)}"
            ) from err
        if set(players) != set(Player):
            raise GameStateError("A game needs exactly two registered players.")

        # create the Game
        game = cls(
            board=Board(),
            moves=[],
            players=players,
            status=Status.IN_PROGRESS,
            computer_player=(
                Player(int(model.computer_player)) if model.computer_player else None
            ),
            difficulty=difficulty_from_label(model.difficulty) if model.difficulty else None,
        )
        for notation in model.moves:
            game._play(move_from_notation(notation))

        if game.status != Status(model.status):
            raise GameStateError(
                f"Recorded status {model.status!r} does not match the replayed moves ({game.status})."
            )
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            moves=[move.to_notation() for move in self.moves],
            registered_players={
                str(int(player)): name for player, name in self.players.items()
            },
            status=self.status.value,
            computer_player=(
                str(int(self.computer_player)) if self.computer_player else None
            ),
            difficulty=self.difficulty.value if self.difficulty else None,
        )

    @classmethod
    def new_game(
        cls,
        player_one: str,
        player_two: str,
        computer_player: Optional[Player] = None,
        difficulty: Optional[Difficulty] = None,
    ) -> Self:
        """Start from the canonical starting position: player one at e1, player two at e9, ten walls each."""
        if player_one == player_two:
            raise GameStateError(
                f"Both players are called {player_one!r}. Pick different names."
            )
        return cls(
            board=Board(),
            moves=[],
            players={Player.ONE: player_one, Player.TWO: player_two},
            status=Status.IN_PROGRESS,
            computer_player=computer_player,
            difficulty=difficulty,
        )

    @property
    def winner(self) -> Optional[str]:
        winning_player = self.board.get_winner()
        if winning_player is None:
            return None
        return self.players[winning_player]

    @property
    def turn_player(self) -> str:
        return self.players[self.board.get_to_move()]

    def legal_moves(self, player: str) -> list[str]:
        """
        Service will request the set of legal moves.
        ----

        1. Check the game is still running and it is your turn
        2. Yes? Generate legal moves and return them in notation.
        """
        self._assert_in_progress()
        self._assert_your_turn(player)
        player_number = self.player_number(player)
        return [move.to_notation() for move in self.board.get_legal_moves(player_number)]

    def make_move(self, move_notation: str, player: str) -> None:
        """
        Attempt to make a move
        -----

        1. make sure the game is running and it is your turn
        2. parse the move and check it is legal
        3. update the board, the move list and (if a pawn reached its goal row) the status
        """
        self._assert_in_progress()
        self._assert_your_turn(player)

        new_move = move_from_notation(move_notation)
        self._play(new_move)

    def player_number(self, player: str) -> Player:
        try:
            return next(number for number, name in self.players.items() if name == player)
        except StopIteration:
            raise GameStateError(f"{player!r} is not playing this game.") from None

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_your_turn(self, player: str) -> None:
        """You must wait for your turn before calculating legal moves / making a move."""
        player_number = self.player_number(player)
        if player_number != self.board.get_to_move():
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {self.turn_player} to make a move first."
            )

    def _play(self, move: Move) -> None:
        """Check legality for the player to move, then update board, move list and status"""
        mover = self.board.get_to_move()
        if self.status != Status.IN_PROGRESS or not self._is_legal(move, mover):
            raise IllegalMoveError(f"Move not allowed: {move.to_notation()}")

        self.board = self.board.apply_move(move)
        self.moves.append(move)
        logger.debug("player %s played %s", mover, move.to_notation())

        if self.board.is_terminal():
            self.status = Status.FINISHED
            logger.debug("game finished, winner: %s", self.winner)

    def _is_legal(self, move: Move, player: Player) -> bool:
        """Same answer as membership in `board.get_legal_moves(player)`, without generating every wall"""
        if isinstance(move, PawnMove):
            return move in self.board.pawn_moves(player)
        return self.board.is_wall_placement_valid(player, move)
