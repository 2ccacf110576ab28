"""
Type definitions used across layers
"""

from enum import IntEnum, StrEnum


class Player(IntEnum):
    """Player identifiers. IntEnum, so a plain 1 or 2 works wherever a player is expected."""

    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self == Player.ONE else Player.ONE

    @property
    def goal_row(self) -> int:
        # player one starts at the bottom and races to the top row, player two the reverse
        return 0 if self == Player.ONE else 8


class Orientation(StrEnum):
    HORIZONTAL = "h"
    VERTICAL = "v"


class MoveKind(StrEnum):
    PAWN = "pawn"
    WALL = "wall"


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


DEFAULT_DIFFICULTY = Difficulty.MEDIUM


def difficulty_from_label(label: str) -> Difficulty:
    """Case-insensitive. Anything unrecognised plays at the default (medium) level."""
    try:
        return Difficulty(label.strip().lower())
    except ValueError:
        return DEFAULT_DIFFICULTY
