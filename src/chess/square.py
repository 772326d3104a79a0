"""
A square on the board

(placed in its own module as multiple other modules need to import it)

Squares are addressed as (row, col), the way the board is drawn on screen:
* row 0 is the far rank (rank 8), row 7 the near rank (rank 1)
* col 0 is the a-file
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8 (rows, cols).
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True, order=True)
class Position:
    row: int
    col: int

    @classmethod
    def from_name(cls, name: str) -> Position:
        """Algebraic notation: 'a8' - 'h1' get converted to (0,0) - (7,7)"""
        col = ord(name[0]) - ord("a")
        row = BOARD_DIMENSIONS[0] - int(name[1])
        return cls(row, col)

    def name(self) -> str:
        return square_name(self)

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def is_light(self) -> bool:
        """a8 (0,0) is a light square, and colors alternate from there."""
        return (self.row + self.col) % 2 == 0


def square_name(position: Position) -> str:
    """file letter + rank digit. ex. (6, 4) -> 'e2'"""
    return f"{chr(ord('a') + position.col)}{BOARD_DIMENSIONS[0] - position.row}"


def all_positions() -> list[Position]:
    """All 64 squares, row by row starting at a8."""
    return [
        Position(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
