"""
The Game is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating the business logic of a turn, one click at a time:
select a piece -> pick a destination -> validate -> update the board -> log the move -> switch turns.

All state lives in an explicit GameState that gets passed to `handle_click()` / `reset()`.
Illegal moves are NOT errors: the attempt is simply absorbed (selection is cleared, nothing else changes).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import is_legal, legal_destinations
from src.chess.notation import MoveRecord
from src.chess.square import Position, square_name
from src.core.models import GameModel
from src.core.shared_types import Side

logger = logging.getLogger(__name__)


class ClickOutcome(Enum):
    """What a single click did to the game."""

    IGNORED = auto()  # nothing selected and the square did not hold one of your pieces
    SELECTED = auto()
    DESELECTED = auto()
    MOVED = auto()
    REJECTED = auto()  # illegal move attempt: selection dropped, board untouched


@dataclass
class GameState:
    board: Board
    active_side: Side = Side.WHITE
    selection: Optional[Position] = None
    move_log: list[MoveRecord] = field(default_factory=list)

    @classmethod
    def new(cls) -> Self:
        return cls(board=Board.starting_position())

    @property
    def move_count(self) -> int:
        return len(self.move_log)


# --- DOMAIN LAYER API ---
def handle_click(state: GameState, position: Position) -> ClickOutcome:
    """
    The player clicked a square.
    ----

    Nothing selected yet:
    * own piece -> select it
    * anything else -> ignore

    Something selected:
    * same square again -> deselect
    * any other square -> try to move there. Whether it succeeds or not, the selection is cleared.
    """
    if state.selection is None:
        return _select(state, position)

    selected = state.selection
    state.selection = None
    if position == selected:
        logger.debug("Deselected %s", square_name(selected))
        return ClickOutcome.DESELECTED

    if _try_move(state, selected, position):
        return ClickOutcome.MOVED
    return ClickOutcome.REJECTED


def reset(state: GameState) -> None:
    """Start over: replaces the whole state (board, turn, selection, log) at once."""
    state.board = Board.starting_position()
    state.active_side = Side.WHITE
    state.selection = None
    state.move_log = []
    logger.info("Game reset to the starting position")


def selected_destinations(state: GameState) -> set[Position]:
    """Squares to highlight: where the selected piece can go (nothing when no piece is selected)."""
    if state.selection is None:
        return set()
    return legal_destinations(state.selection, state.board)


def move_history(state: GameState) -> list[str]:
    return [record.to_notation() for record in state.move_log]


def to_model(state: GameState) -> GameModel:
    """Encode into a format the Service layer uses"""
    return GameModel(
        board=[
            [piece.to_fen() if piece is not None else None for piece in row]
            for row in state.board.grid
        ],
        active_side=str(state.active_side),
        selection=square_name(state.selection) if state.selection else None,
        legal_destinations=[
            square_name(position) for position in sorted(selected_destinations(state))
        ],
        move_history=move_history(state),
    )


# -- PRIVATE HELPERS ---
def _select(state: GameState, position: Position) -> ClickOutcome:
    piece = state.board.piece_at(position)
    if piece is None or piece.side != state.active_side:
        return ClickOutcome.IGNORED

    state.selection = position
    logger.debug("Selected %s %s on %s", piece.side, piece.kind, square_name(position))
    return ClickOutcome.SELECTED


def _try_move(state: GameState, from_square: Position, to_square: Position) -> bool:
    """
    Make the move if it is allowed
    -----

    1. the moving piece must be yours
    2. the target square must be empty or hold an opponent's piece (no capturing your own pieces)
    3. the piece's movement rule must allow it
    4. update the board, the move log, and whose turn it is
    """
    piece = state.board.piece_at(from_square)
    target = state.board.piece_at(to_square)

    if piece is None or piece.side != state.active_side:
        return _reject(from_square, to_square, "not your piece")

    if target is not None and target.side == state.active_side:
        return _reject(from_square, to_square, "own piece on target square")

    if not is_legal(piece, from_square, to_square, state.board):
        return _reject(from_square, to_square, f"{piece.kind} cannot move there")

    state.board.move_piece(from_square, to_square)
    record = MoveRecord(from_square, to_square, captured=target is not None)
    state.move_log.append(record)
    state.active_side = state.active_side.opponent
    logger.info("Move %d: %s", state.move_count, record.to_notation())
    return True


def _reject(from_square: Position, to_square: Position, reason: str) -> bool:
    logger.debug(
        "Rejected %s -> %s: %s", square_name(from_square), square_name(to_square), reason
    )
    return False


@dataclass
class Game:
    """Convenience wrapper owning exactly one GameState."""

    state: GameState = field(default_factory=GameState.new)

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def active_side(self) -> Side:
        return self.state.active_side

    @property
    def selection(self) -> Optional[Position]:
        return self.state.selection

    @property
    def move_log(self) -> list[MoveRecord]:
        return self.state.move_log

    def click(self, position: Position) -> ClickOutcome:
        return handle_click(self.state, position)

    def reset(self) -> None:
        reset(self.state)

    def legal_destinations(self) -> set[Position]:
        return selected_destinations(self.state)

    def move_history(self) -> list[str]:
        return move_history(self.state)

    def to_model(self) -> GameModel:
        return to_model(self.state)
