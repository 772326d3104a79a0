"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/store layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the API layer or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
SquareName = str
PieceCode = str  # FEN letter: upper case white, lower case black


@dataclass
class GameModel:
    """Read-only snapshot of a chess game: everything the presentation layer needs to draw it."""

    board: list[list[Optional[PieceCode]]]
    active_side: str
    selection: Optional[SquareName]
    legal_destinations: list[SquareName]
    move_history: list[str]
