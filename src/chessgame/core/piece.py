"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgame.core.enums import Color, PieceType

# kind -> (letter, offset of the white glyph from U+2654 WHITE CHESS KING)
_KIND_GLYPHS: dict[PieceType, tuple[str, int]] = {
    PieceType.KING: ("k", 0),
    PieceType.QUEEN: ("q", 1),
    PieceType.ROOK: ("r", 2),
    PieceType.BISHOP: ("b", 3),
    PieceType.KNIGHT: ("n", 4),
    PieceType.PAWN: ("p", 5),
}

_WHITE_KING = 0x2654
_BLACK_GLYPH_SHIFT = 6  # black glyphs follow the six white ones


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable colored, kind-tagged game unit."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Letter for text boards: uppercase white, lowercase black."""
        letter = _KIND_GLYPHS[self.piece_type][0]
        return letter.upper() if self.color == Color.WHITE else letter

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        offset = _KIND_GLYPHS[self.piece_type][1]
        if self.color == Color.BLACK:
            offset += _BLACK_GLYPH_SHIFT
        return chr(_WHITE_KING + offset)
