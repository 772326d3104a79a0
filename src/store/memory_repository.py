"""Implementation of (Game)Repository keeping everything in a dictionary. Nothing is written to disk."""

import logging
from uuid import UUID, uuid4

from src.chess.game import GameState

logger = logging.getLogger(__name__)


class InMemoryGameRepository:
    """Games are stored per session ID until deleted (or until the process ends)."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameState] = {}

    def get_game(self, game_id: UUID) -> GameState | None:
        """Get game by ID, if record exists."""
        return self._games.get(game_id)

    def create_game(self, game: GameState) -> tuple[GameState, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        new_id = uuid4()
        self._games[new_id] = game
        logger.info("Created game %s", new_id)
        return game, new_id

    def update_game(self, game_id: UUID, game: GameState) -> GameState | None:
        """Replace an existing record."""
        if game_id not in self._games:
            return None
        self._games[game_id] = game
        return game

    def delete_game(self, game_id: UUID) -> GameState | None:
        """Remove a game's record."""
        game = self._games.pop(game_id, None)
        if game is not None:
            logger.info("Deleted game %s", game_id)
        return game
