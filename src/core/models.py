"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and the domain layer (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the API layer or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PlayerNumber = str
PlayerName = str


@dataclass
class GameModel:
    """Transport-safe representation of a Quoridor game used between API, Service, Repository, and Game layers.

    The board itself is not stored: it is rebuilt by replaying `moves` from the starting position.
    """

    moves: list[str]
    registered_players: dict[PlayerNumber, PlayerName]
    status: str
    computer_player: Optional[PlayerNumber] = None
    difficulty: Optional[str] = None
