"""Move log entries and the short notation shown in the move history: 'e2-e4', 'd4xe5'."""

from dataclasses import dataclass

from src.chess.square import Position, square_name

CAPTURE_MARKER = "x"
MOVE_SEPARATOR = "-"


@dataclass(frozen=True)
class MoveRecord:
    """A move that has been played. Never changes after it is added to the log."""

    from_square: Position
    to_square: Position
    captured: bool = False

    def to_notation(self) -> str:
        return encode(self, square_name(self.from_square), square_name(self.to_square))


def encode(record: MoveRecord, from_name: str, to_name: str) -> str:
    separator = CAPTURE_MARKER if record.captured else MOVE_SEPARATOR
    return f"{from_name}{separator}{to_name}"
