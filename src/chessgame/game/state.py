"""Game state — board, turn, selection and the king-capture win condition."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessgame.core.board import Board
from chessgame.core.enums import Color, GameResult, PieceType
from chessgame.core.move_evaluator import legal_destinations
from chessgame.core.piece import Piece
from chessgame.core.types import Square
from chessgame.game.selection import EMPTY, Selected, Selection


@dataclass
class GameState:
    """The single mutable root of a game.

    This is a pure data/logic class — no threading, no UI.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    turn: Color = field(default=Color.WHITE, init=False)
    game_over: bool = field(default=False, init=False)
    winner: Color | None = field(default=None, init=False)
    selection: Selection = field(default=EMPTY, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self) -> None:
        """Initialise (or reset) the game to the starting position."""
        self.board = Board.initial()
        self.turn = Color.WHITE
        self.game_over = False
        self.winner = None
        self.selection = EMPTY

    # ── Move application ─────────────────────────────────────────────────

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Apply a move and return the captured piece, if any.

        Caller is responsible for legality check. The turn passes to the
        other side even when the move captures a king and ends the game.
        """
        captured = self.board.move_piece(from_sq, to_sq)
        if captured is not None and captured.piece_type == PieceType.KING:
            self.game_over = True
            self.winner = captured.color.opposite
        self.turn = self.turn.opposite
        return captured

    # ── Query helpers ────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board.piece_at(sq)

    def legal_destinations(self, sq: Square) -> set[Square]:
        """Legal targets for the piece on *sq* (empty set if none)."""
        piece = self.board.piece_at(sq)
        if piece is None:
            return set()
        return legal_destinations(piece, sq, self.board)

    @property
    def selected_square(self) -> Square | None:
        if isinstance(self.selection, Selected):
            return self.selection.square
        return None

    @property
    def result(self) -> GameResult:
        return GameResult.for_winner(self.winner)
