"""Unit tests for /src/chess/notation.py"""

import pytest

from src.chess.notation import CAPTURE_MARKER, MOVE_SEPARATOR, MoveRecord, encode
from src.chess.square import Position


def test_encode_plain_move() -> None:
    record = MoveRecord(Position(6, 4), Position(4, 4), captured=False)
    assert encode(record, "e2", "e4") == "e2-e4"


def test_encode_capture() -> None:
    record = MoveRecord(Position(4, 4), Position(3, 3), captured=True)
    assert encode(record, "e4", "d5") == "e4xd5"


def test_encode_uses_given_names() -> None:
    """The encoder does not look at the positions, only at the names it is handed."""
    record = MoveRecord(Position(0, 0), Position(0, 1), captured=False)
    assert encode(record, "from", "to") == f"from{MOVE_SEPARATOR}to"


@pytest.mark.parametrize(
    "record, notation",
    [
        (MoveRecord(Position(6, 4), Position(4, 4)), "e2-e4"),
        (MoveRecord(Position(7, 6), Position(5, 5)), "g1-f3"),
        (MoveRecord(Position(4, 4), Position(3, 3), captured=True), "e4xd5"),
        (MoveRecord(Position(0, 0), Position(7, 0), captured=True), "a8xa1"),
    ],
)
def test_record_to_notation(record: MoveRecord, notation: str) -> None:
    assert record.to_notation() == notation


def test_capture_marker_differs_from_separator() -> None:
    assert CAPTURE_MARKER != MOVE_SEPARATOR


def test_records_are_immutable() -> None:
    record = MoveRecord(Position(6, 4), Position(4, 4))
    with pytest.raises(AttributeError):
        record.captured = True  # type: ignore[misc]
