"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import EMPTY_FEN, Board
from src.chess.pieces import Piece
from src.chess.square import Position
from src.store.memory_repository import InMemoryGameRepository


@pytest.fixture
def empty_board() -> Board:
    return Board.from_fen(EMPTY_FEN)


@pytest.fixture
def board_with_pieces() -> Callable[[dict[str, str]], Board]:
    """Call the inner function with {square name: FEN letter}, ex. {"e2": "P", "d7": "p"}"""

    def _create_board(pieces: dict[str, str]) -> Board:
        board = Board.empty()
        for name, fen_char in pieces.items():
            board.place_piece(Piece.from_fen(fen_char), Position.from_name(name))
        return board

    return _create_board


@pytest.fixture
def repository() -> InMemoryGameRepository:
    return InMemoryGameRepository()
