"""Move legality for capture-the-king chess.

Moves are judged on geometry and occupancy only: there is no notion of
check, so a king may step onto an attacked square and a player may leave
their own king capturable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgame.core.enums import Color, PieceType
from chessgame.core.types import Square, all_squares, is_valid_square

if TYPE_CHECKING:
    from chessgame.core.board import Board
    from chessgame.core.piece import Piece


KNIGHT_DELTAS: frozenset[tuple[int, int]] = frozenset({(1, 2), (2, 1)})

# color -> (forward row step, home rank)
_PAWN_RULES: dict[Color, tuple[int, int]] = {
    Color.WHITE: (-1, 6),
    Color.BLACK: (1, 1),
}


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def is_clear_path(from_sq: Square, to_sq: Square, board: Board) -> bool:
    """Whether every square strictly between two aligned squares is empty."""
    step_row = _sign(to_sq.row - from_sq.row)
    step_col = _sign(to_sq.col - from_sq.col)
    row = from_sq.row + step_row
    col = from_sq.col + step_col
    while (row, col) != (to_sq.row, to_sq.col):
        if not board.is_empty(Square(row, col)):
            return False
        row += step_row
        col += step_col
    return True


def _is_straight(dx: int, dy: int) -> bool:
    return dx == 0 or dy == 0


def _is_diagonal(dx: int, dy: int) -> bool:
    return abs(dx) == abs(dy)


def _is_legal_pawn_move(
    piece: Piece, from_sq: Square, to_sq: Square, board: Board
) -> bool:
    forward, home_rank = _PAWN_RULES[piece.color]
    dx = to_sq.col - from_sq.col
    dy = to_sq.row - from_sq.row
    target = board.piece_at(to_sq)

    if dx == 0 and dy == forward:
        return target is None
    if dx == 0 and dy == 2 * forward and from_sq.row == home_rank:
        between = Square(from_sq.row + forward, from_sq.col)
        return target is None and board.is_empty(between)
    if abs(dx) == 1 and dy == forward:
        return board.is_opponent_piece(target, piece.color)
    return False


def is_legal_move(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    """Whether *piece* standing on *from_sq* may move to *to_sq*."""
    if from_sq == to_sq:
        return False
    if not is_valid_square(*to_sq):
        return False

    dx = to_sq.col - from_sq.col
    dy = to_sq.row - from_sq.row
    target = board.piece_at(to_sq)

    if board.is_own_piece(target, piece.color):
        return False

    kind = piece.piece_type
    if kind == PieceType.PAWN:
        return _is_legal_pawn_move(piece, from_sq, to_sq, board)
    if kind == PieceType.ROOK:
        return _is_straight(dx, dy) and is_clear_path(from_sq, to_sq, board)
    if kind == PieceType.BISHOP:
        return _is_diagonal(dx, dy) and is_clear_path(from_sq, to_sq, board)
    if kind == PieceType.QUEEN:
        return (_is_straight(dx, dy) or _is_diagonal(dx, dy)) and is_clear_path(
            from_sq, to_sq, board
        )
    if kind == PieceType.KNIGHT:
        return (abs(dx), abs(dy)) in KNIGHT_DELTAS
    if kind == PieceType.KING:
        return abs(dx) <= 1 and abs(dy) <= 1
    return False


def legal_destinations(piece: Piece, from_sq: Square, board: Board) -> set[Square]:
    """All squares *piece* on *from_sq* may legally move to."""
    return {sq for sq in all_squares() if is_legal_move(piece, from_sq, sq, board)}
