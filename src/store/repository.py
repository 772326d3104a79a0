"""Protocol repository (games only live as long as the process: see memory_repository.py)"""

from typing import Protocol
from uuid import UUID

from src.chess.game import GameState


class GameRepository(Protocol):
    """Session storage orchestration"""

    def get_game(self, game_id: UUID) -> GameState | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameState) -> tuple[GameState, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    def update_game(self, game_id: UUID, game: GameState) -> GameState | None:
        """Replace an existing record."""
        ...

    def delete_game(self, game_id: UUID) -> GameState | None:
        """Remove a game's record."""
        ...
