from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import ClickRequest, GameResponse, SquareNameRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Side


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - ClickRequest --
@pytest.mark.parametrize("row, col", [(0, 0), (7, 7), (6, 4), (0, 7)])
def test_valid_click(mock_id: UUID, row: int, col: int) -> None:
    request = ClickRequest(game_id=mock_id, row=row, col=col)
    assert (request.row, request.col) == (row, col)
    assert request.game_id == mock_id


@pytest.mark.parametrize("row, col", [(-1, 0), (8, 0), (0, -1), (0, 8), (100, 3)])
def test_click_off_the_board(mock_id: UUID, row: int, col: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = ClickRequest(game_id=mock_id, row=row, col=col)


def test_click_requires_integers(mock_id: UUID) -> None:
    with pytest.raises(ValidationError):
        _ = ClickRequest(game_id=mock_id, row="e", col=2)


def test_click_requires_game_id() -> None:
    with pytest.raises(ValidationError):
        _ = ClickRequest(game_id="not-a-uuid", row=1, col=2)


# -- Validation - SquareNameRequest --
def test_square_name_request_off_the_board() -> None:
    with pytest.raises(InvalidRequestError):
        _ = SquareNameRequest(row=3, col=9)


# -- Response --
def test_game_response_side(mock_id: UUID) -> None:
    response = GameResponse(
        game_id=mock_id,
        board=[[None] * 8 for _ in range(8)],
        active_side="black",
        selection=None,
        legal_destinations=[],
        move_history=["e2-e4"],
        move_count=1,
    )
    assert response.active_side == Side.BLACK
