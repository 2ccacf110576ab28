"""
Custom exceptions. Every layer raises a subclass of GameError, so the caller can decide how fine-grained to catch.

NOTE: none of these subclass ValueError. Pydantic would otherwise wrap them into a ValidationError inside validators.
"""


class GameError(Exception):
    """Base class for everything that goes wrong while playing a game"""


class IllegalMoveError(GameError):
    """The move is not legal on the current board for the player making it"""


class NotYourTurnError(GameError):
    """A player tried to act while it is the opponent's turn"""


class GameStateError(GameError):
    """The game is in a state that does not allow the requested action"""


class InvalidNotationError(GameError):
    """A square or move could not be parsed from its notation"""


class InvalidRequestError(GameError):
    """Request data failed validation at the API boundary"""


class RepositoryError(GameError):
    """Requested record does not exist"""
