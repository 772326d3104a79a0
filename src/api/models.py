"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Side

SquareName = str
PieceCode = str


def _validate_coordinate(value: int, size: int, axis: str) -> int:
    if not 0 <= value < size:
        raise InvalidRequestError(
            f"{axis} {value!r} is off the board. Pick a value from 0 to {size - 1}."
        )
    return value


# --- REQUEST MODELS ---
class SquareRequest(BaseModel):
    """A square on the board, as (row, col) with row 0 the 8th rank and col 0 the a-file."""

    row: int
    col: int

    @field_validator("row")
    @classmethod
    def validate_row(cls, value: int) -> int:
        return _validate_coordinate(value, BOARD_DIMENSIONS[0], "row")

    @field_validator("col")
    @classmethod
    def validate_col(cls, value: int) -> int:
        return _validate_coordinate(value, BOARD_DIMENSIONS[1], "col")


class ClickRequest(SquareRequest):
    game_id: UUID


class SquareNameRequest(SquareRequest):
    pass


class ResetRequest(BaseModel):
    game_id: UUID


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board: list[list[Optional[PieceCode]]]
    active_side: Side
    selection: Optional[SquareName]
    legal_destinations: list[SquareName]
    move_history: list[str]
    move_count: int


class SquareNameResponse(BaseModel):
    row: int
    col: int
    name: SquareName
