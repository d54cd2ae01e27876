"""Core domain layer — board, pieces and move legality, with no Qt imports.

Quick start::

    from chessgame.core import Board, Square, legal_destinations

    board = Board.initial()
    pawn = board.piece_at(Square(6, 4))
    print(sorted(legal_destinations(pawn, Square(6, 4), board)))
"""

from chessgame.core.board import Board
from chessgame.core.enums import Color, GameResult, PieceType
from chessgame.core.move_evaluator import (
    is_clear_path,
    is_legal_move,
    legal_destinations,
)
from chessgame.core.piece import Piece
from chessgame.core.types import (
    BOARD_SIZE,
    Square,
    all_squares,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "all_squares",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    # Move legality
    "is_clear_path",
    "is_legal_move",
    "legal_destinations",
]
