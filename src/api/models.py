"""Requests and Response models"""

import re
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Difficulty, Status, difficulty_from_label

PlayerNumber = str
PlayerName = str

# pawn move: target square a1-i9. wall move: slot a1-h8 + orientation.
MOVE_NOTATION = re.compile(r"^([a-i][1-9]|[a-h][1-8][hv])$")


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """Two named players, or leave out the opponent to play against the computer (which then plays second)."""

    player_name: str
    opponent_name: Optional[str] = None
    difficulty: Optional[Difficulty] = None

    @field_validator("player_name", "opponent_name")
    @classmethod
    def validate_name(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise InvalidRequestError("Player names cannot be empty.")
        return value

    @field_validator("difficulty", mode="before")
    @classmethod
    def validate_difficulty(cls, value: Optional[str]) -> Optional[Difficulty]:
        """Unknown labels fall back to the default level instead of failing the request"""
        if value is None:
            return value
        return difficulty_from_label(str(value))


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    player_name: str


class MoveRequest(BaseModel):
    game_id: UUID
    player_name: str
    move: str

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not MOVE_NOTATION.match(normalized):
            raise InvalidRequestError(
                f"Cannot interpret move: {value!r}. Use a square ('e2') for pawn moves or slot + orientation ('e3h') for walls."
            )
        return normalized


class ComputerMoveRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[PlayerNumber, PlayerName]
    player_to_move: PlayerName
    pawns: dict[PlayerNumber, str]
    walls_remaining: dict[PlayerNumber, int]
    horizontal_walls: list[str]
    vertical_walls: list[str]
    move_history: list[str]
    status: Status
    winner: Optional[PlayerName] = None
    computer_player: Optional[PlayerNumber] = None


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player_name: str
    player_number: int
    legal_moves: list[str]
