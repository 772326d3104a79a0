"""Defines the chess pieces"""

from dataclasses import dataclass
from typing import Self

from src.core.shared_types import PieceKind, Side

FEN_TO_KIND: dict[str, PieceKind] = {
    "p": PieceKind.PAWN,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "r": PieceKind.ROOK,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
}

KIND_TO_FEN: dict[PieceKind, str] = {value: key for key, value in FEN_TO_KIND.items()}

GLYPHS: dict[Side, dict[PieceKind, str]] = {
    Side.WHITE: {
        PieceKind.KING: "♔",
        PieceKind.QUEEN: "♕",
        PieceKind.ROOK: "♖",
        PieceKind.BISHOP: "♗",
        PieceKind.KNIGHT: "♘",
        PieceKind.PAWN: "♙",
    },
    Side.BLACK: {
        PieceKind.KING: "♚",
        PieceKind.QUEEN: "♛",
        PieceKind.ROOK: "♜",
        PieceKind.BISHOP: "♝",
        PieceKind.KNIGHT: "♞",
        PieceKind.PAWN: "♟",
    },
}


@dataclass(frozen=True)
class Piece:
    """
    An occupied square. An empty square is simply `None` on the board,
    so a Piece always has both a kind and a side.
    """

    kind: PieceKind
    side: Side

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        side = Side.WHITE if character.isupper() else Side.BLACK
        kind = FEN_TO_KIND[character.lower()]
        return cls(kind, side)

    def to_fen(self) -> str:
        return (
            KIND_TO_FEN[self.kind].upper()
            if self.side == Side.WHITE
            else KIND_TO_FEN[self.kind]
        )

    @property
    def glyph(self) -> str:
        return GLYPHS[self.side][self.kind]

    def is_opponent_of(self, other: "Piece") -> bool:
        return self.side != other.side
