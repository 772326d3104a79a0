"""Orchestration of communication from the presentation layer to the game logic and session store (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    ClickRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    ResetRequest,
    SquareNameRequest,
    SquareNameResponse,
)
from src.chess.game import GameState, handle_click, reset, to_model
from src.chess.square import Position, square_name
from src.core.exceptions import GameNotFoundError
from src.core.models import GameModel
from src.store.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- Presentation layer entrypoints ---
    def create_new_game(self) -> GameResponse:
        """Start a new session with the standard starting position, white to move."""
        stored_game, game_id = self.repo.create_game(GameState.new())
        return self._create_game_response(game_id, stored_game)

    def click(self, request: ClickRequest) -> GameResponse:
        """
        The user clicked a square.
        ----
        Selecting, deselecting, moving or an ignored/rejected click all return the (possibly unchanged) game state.
        """
        game = self._fetch_game(request.game_id)
        outcome = handle_click(game, Position(request.row, request.col))
        logger.debug(
            "Game %s: click on %s -> %s",
            request.game_id,
            square_name(Position(request.row, request.col)),
            outcome.name,
        )
        self.repo.update_game(request.game_id, game)
        return self._create_game_response(request.game_id, game)

    def reset_game(self, request: ResetRequest) -> GameResponse:
        """Back to the starting position, white to move, empty move history."""
        game = self._fetch_game(request.game_id)
        reset(game)
        self.repo.update_game(request.game_id, game)
        return self._create_game_response(request.game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by the frontend to (re)draw the board, highlights, and move history.
        """
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to throw away a session."""
        self._fetch_game(request.game_id)
        self.repo.delete_game(request.game_id)

    def square_name(self, request: SquareNameRequest) -> SquareNameResponse:
        """Label for a square, ex. (6, 4) -> 'e2'"""
        return SquareNameResponse(
            row=request.row,
            col=request.col,
            name=square_name(Position(request.row, request.col)),
        )

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: GameState) -> GameResponse:
        """Convert the GameState snapshot into a GameResponse (for game with given ID.)"""
        model: GameModel = to_model(game)
        return GameResponse(
            game_id=game_id,
            board=model.board,
            active_side=model.active_side,
            selection=model.selection,
            legal_destinations=model.legal_destinations,
            move_history=model.move_history,
            move_count=len(model.move_history),
        )

    def _fetch_game(self, game_id: UUID) -> GameState:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game
