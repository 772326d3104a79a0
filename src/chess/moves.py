"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the movement rule for each piece kind.

A rule answers a single question: "may this piece go from here to there on this board?"
Only pseudo-legal moves exist here: nobody ever looks at checks.
Whether the target square holds one of your own pieces is checked by the caller (Game / legal_destinations).
"""

from typing import Callable, Protocol

from src.chess.pieces import Piece
from src.chess.square import Position, all_positions
from src.core.shared_types import PieceKind, Side


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece_at(self, position: Position) -> Piece | None: ...
    def is_empty(self, position: Position) -> bool: ...


Vector = tuple[int, int]

# White moves UP the board (towards row 0), black moves DOWN (towards row 7)
PAWN_DIRECTION: dict[Side, int] = {Side.WHITE: -1, Side.BLACK: 1}
PAWN_START_ROW: dict[Side, int] = {Side.WHITE: 6, Side.BLACK: 1}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def deltas(from_square: Position, to_square: Position) -> Vector:
    return to_square.row - from_square.row, to_square.col - from_square.col


def is_path_clear(from_square: Position, to_square: Position, board: Board) -> bool:
    """
    Walk from one square towards the other, one step at a time, along a straight or diagonal line.
    ---

    Fails on the first occupied square found strictly in between.
    NOTE: the destination itself is not inspected (capturing vs. moving to an empty square is decided elsewhere).
    """
    d_row, d_col = deltas(from_square, to_square)
    step_row, step_col = _sign(d_row), _sign(d_col)
    if (step_row, step_col) == (0, 0):
        return False

    row = from_square.row + step_row
    col = from_square.col + step_col
    while (row, col) != (to_square.row, to_square.col):
        if not board.is_empty(Position(row, col)):
            return False
        row += step_row
        col += step_col
    return True


# --- MOVEMENT RULES ---
def is_legal_pawn_move(
    piece: Piece, from_square: Position, to_square: Position, board: Board
) -> bool:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - It can move by two in their first move (so when on their starting rank), if both squares are empty
    - takes diagonally (and only takes: a diagonal step onto an empty square is not allowed)

    NOTE: No en passant, no promotion.
    """
    d_row, d_col = deltas(from_square, to_square)
    direction = PAWN_DIRECTION[piece.side]
    target = board.piece_at(to_square)

    if d_col == 0 and target is None:
        if d_row == direction:
            return True
        one_step = Position(from_square.row + direction, from_square.col)
        return (
            d_row == 2 * direction
            and from_square.row == PAWN_START_ROW[piece.side]
            and board.is_empty(one_step)
        )

    if abs(d_col) == 1 and d_row == direction and target is not None:
        return target.is_opponent_of(piece)

    return False


def is_legal_knight_move(
    piece: Piece, from_square: Position, to_square: Position, board: Board
) -> bool:
    """Knights jump: |delta_row|, |delta_col| is 1 and 2 (in any order). Whatever stands in between does not matter."""
    d_row, d_col = deltas(from_square, to_square)
    return {abs(d_row), abs(d_col)} == {1, 2}


def is_legal_bishop_move(
    piece: Piece, from_square: Position, to_square: Position, board: Board
) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    d_row, d_col = deltas(from_square, to_square)
    if abs(d_row) != abs(d_col) or d_row == 0:
        return False
    return is_path_clear(from_square, to_square, board)


def is_legal_rook_move(
    piece: Piece, from_square: Position, to_square: Position, board: Board
) -> bool:
    """Rooks move either horizontally or vertically"""
    d_row, d_col = deltas(from_square, to_square)
    if d_row != 0 and d_col != 0:
        return False
    return is_path_clear(from_square, to_square, board)


def is_legal_queen_move(
    piece: Piece, from_square: Position, to_square: Position, board: Board
) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_legal_rook_move(
        piece, from_square, to_square, board
    ) or is_legal_bishop_move(piece, from_square, to_square, board)


def is_legal_king_move(
    piece: Piece, from_square: Position, to_square: Position, board: Board
) -> bool:
    """The king can move by a single square at the time, in any direction."""
    d_row, d_col = deltas(from_square, to_square)
    return max(abs(d_row), abs(d_col)) == 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
IsLegalFn = Callable[[Piece, Position, Position, Board], bool]
MOVEMENT_RULES: dict[PieceKind, IsLegalFn] = {
    PieceKind.PAWN: is_legal_pawn_move,
    PieceKind.KNIGHT: is_legal_knight_move,
    PieceKind.BISHOP: is_legal_bishop_move,
    PieceKind.ROOK: is_legal_rook_move,
    PieceKind.QUEEN: is_legal_queen_move,
    PieceKind.KING: is_legal_king_move,
}

# Every PieceKind must have a movement rule.
_missing_rules = set(PieceKind) - set(MOVEMENT_RULES)
if _missing_rules:
    raise RuntimeError(
        f"No movement rule defined for: {', '.join(sorted(_missing_rules))}"
    )


def is_legal(
    piece: Piece, from_square: Position, to_square: Position, board: Board
) -> bool:
    """
    Can `piece` (standing on from_square) move to to_square?
    ---

    Preconditions (caller's responsibility): from_square != to_square, and `piece` is the one standing on from_square.
    """
    movement_rule: IsLegalFn = MOVEMENT_RULES[piece.kind]
    return movement_rule(piece, from_square, to_square, board)


# --- LEGAL DESTINATIONS ---
def legal_destinations(position: Position, board: Board) -> set[Position]:
    """
    Every square the piece standing on `position` may move to (used to highlight squares for the user).

    Recomputed from scratch every call: simply try all 64 squares.
    """
    piece = board.piece_at(position)
    if piece is None:
        return set()

    destinations: set[Position] = set()
    for target_square in all_positions():
        if target_square == position:
            continue

        target = board.piece_at(target_square)
        if target is not None and target.side == piece.side:
            continue

        if is_legal(piece, position, target_square, board):
            destinations.add(target_square)
    return destinations
