"""The Game board: an 8x8 grid where every square holds either a Piece or nothing (None)."""

from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Position, all_positions
from src.core.shared_types import Side

# Only the piece placement part of a FEN string: the engine does not track castling rights, en passant etc.
STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_FEN = "/".join(["8"] * BOARD_DIMENSIONS[0])

Occupant = Optional[Piece]
Grid = list[list[Occupant]]


@dataclass
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls(
            [[None] * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0])]
        )

    @classmethod
    def starting_position(cls) -> Self:
        """Rooks, knights, bishops, queen and king on the back ranks, pawns right in front, four empty ranks between."""
        return cls.from_fen(STARTING_FEN)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board from the piece placement field of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 0), read from the a-file to the h-file
        * pawns cover the 7th rank (row 1) entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 (row 6) are the white pawns (capital letters)
        * 1st rank (row 7) are the white pieces
        """
        board = cls.empty()
        # FEN string is read from top rank (8th) to bottom rank (1st), which is exactly row 0 to row 7
        for row, fen_one_rank in enumerate(fen_str.split("/")):
            col = 0
            for character in fen_one_rank:
                if character.isalpha():
                    board.grid[row][col] = Piece.from_fen(character)
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
        return board

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in self.grid)

    @staticmethod
    def _row_to_fen(row: list[Occupant]) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece_at(self, position: Position) -> Occupant:
        """Positions must be on the board: that's the caller's job."""
        return self.grid[position.row][position.col]

    def is_empty(self, position: Position) -> bool:
        return self.piece_at(position) is None

    def squares(self) -> Iterator[tuple[Position, Occupant]]:
        for position in all_positions():
            yield position, self.piece_at(position)

    def locate_side(self, side: Side) -> list[Position]:
        return [
            position
            for position, piece in self.squares()
            if piece is not None and piece.side == side
        ]

    def place_piece(self, piece: Piece, position: Position) -> None:
        self.grid[position.row][position.col] = piece

    def remove_piece(self, position: Position) -> Occupant:
        piece = self.piece_at(position)
        self.grid[position.row][position.col] = None
        return piece

    def move_piece(self, from_square: Position, to_square: Position) -> Occupant:
        """Update the position on the board. Returns whatever was standing on the target square."""
        captured = self.piece_at(to_square)
        self.grid[to_square.row][to_square.col] = self.remove_piece(from_square)
        return captured


def square_at(board: Board, position: Position) -> Occupant:
    """Occupant of a square (None when empty). No side effects."""
    return board.piece_at(position)
