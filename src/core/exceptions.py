"""
Errors raised across layers.

NOTE: an illegal move is NOT an error. The domain layer absorbs it silently (see src/chess/game.py).
These are for the boundaries: malformed requests and unknown sessions.
"""


class GameError(Exception):
    """Base class for everything this application raises on purpose."""


class InvalidRequestError(GameError):
    """Request could not be interpreted (ex. a square outside of the board)."""


class RepositoryError(GameError):
    """Something went wrong looking up / storing a game."""


class GameNotFoundError(RepositoryError):
    """No game is stored under the requested ID."""
