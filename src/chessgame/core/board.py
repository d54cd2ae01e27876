"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from chessgame.core.enums import Color, PieceType
from chessgame.core.piece import Piece
from chessgame.core.types import BOARD_SIZE, Square, all_squares, square_name

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces, stored top-to-bottom (Black first)."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._grid[sq.row][sq.col] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.col] is None

    # -- Color predicates ---------------------------------------------------

    @staticmethod
    def is_own_piece(piece: Piece | None, color: Color) -> bool:
        return piece is not None and piece.color == color

    @staticmethod
    def is_opponent_piece(piece: Piece | None, color: Color) -> bool:
        return piece is not None and piece.color != color

    # -- Query helpers ------------------------------------------------------

    def has_king(self, color: Color) -> bool:
        """Whether *color* still has its king on the board."""
        king = Piece(color, PieceType.KING)
        return any(self[sq] == king for sq in all_squares())

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Put the piece on *from_sq* onto *to_sq* and return what was there.

        No legality check is made; callers validate first.
        """
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece to move on {square_name(from_sq)}")
        captured = self[to_sq]
        self[to_sq] = piece
        self[from_sq] = None
        return captured

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, Black on rows 0-1, White on rows 6-7."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
