"""GameController — the turn gate between the board UI and the game state.

The UI reports every clicked square through :meth:`on_square_activated`;
the controller decides whether it is a pickup, a move or nothing at all.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgame.core.enums import Color
from chessgame.core.move_evaluator import is_legal_move
from chessgame.core.piece import Piece
from chessgame.core.types import Square, square_name
from chessgame.game.selection import EMPTY, Empty, Selected, Selection
from chessgame.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Selection], None]
MoveCallback = Callable[[Square, Square, Piece | None], None]  # from, to, captured
TurnCallback = Callable[[Color], None]
GameOverCallback = Callable[[Color], None]  # winner


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Accepts square activations, enforces turn order and applies moves.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def turn(self) -> Color:
        return self._state.turn

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    @property
    def winner(self) -> Color | None:
        return self._state.winner

    def piece_at(self, sq: Square) -> Piece | None:
        return self._state.piece_at(sq)

    def highlights(self) -> set[Square]:
        """Legal targets of the picked-up piece; empty when nothing is held."""
        selected = self._state.selected_square
        if selected is None:
            return set()
        return self._state.legal_destinations(selected)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._state.setup()
        _LOGGER.info("New game started")
        self._emit_selection(EMPTY)
        self._emit_turn(self._state.turn)

    def on_square_activated(self, sq: Square) -> bool:
        """Handle a click on *sq*. Returns whether the board changed."""
        if self._state.game_over:
            return False

        selection = self._state.selection
        if isinstance(selection, Empty):
            self._try_pickup(sq)
            return False
        return self._try_move(selection, sq)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _try_pickup(self, sq: Square) -> None:
        piece = self._state.piece_at(sq)
        if piece is None or piece.color != self._state.turn:
            _LOGGER.debug("Pickup rejected on %s", square_name(sq))
            return
        self._set_selection(Selected(sq))
        _LOGGER.debug("Picked up %s on %s", piece, square_name(sq))

    def _try_move(self, selection: Selected, to_sq: Square) -> bool:
        from_sq = selection.square
        piece = self._state.piece_at(from_sq)
        # Any destination click ends the selection, legal or not.
        self._set_selection(EMPTY)

        if piece is None or not is_legal_move(piece, from_sq, to_sq, self._state.board):
            _LOGGER.debug(
                "Move rejected: %s -> %s", square_name(from_sq), square_name(to_sq)
            )
            return False

        captured = self._state.move_piece(from_sq, to_sq)
        _LOGGER.debug(
            "Moved %s %s -> %s", piece, square_name(from_sq), square_name(to_sq)
        )
        self._emit_move(from_sq, to_sq, captured)

        if self._state.game_over:
            winner = self._state.winner
            assert winner is not None
            _LOGGER.info("%s captured the king and wins", winner.name.capitalize())
            self._emit_game_over(winner)
        else:
            self._emit_turn(self._state.turn)
        return True

    def _set_selection(self, selection: Selection) -> None:
        self._state.selection = selection
        self._emit_selection(selection)

    def _emit_selection(self, selection: Selection) -> None:
        for cb in self.events.on_selection_changed:
            cb(selection)

    def _emit_move(self, from_sq: Square, to_sq: Square, captured: Piece | None) -> None:
        for cb in self.events.on_move:
            cb(from_sq, to_sq, captured)

    def _emit_turn(self, color: Color) -> None:
        for cb in self.events.on_turn_changed:
            cb(color)

    def _emit_game_over(self, winner: Color) -> None:
        for cb in self.events.on_game_over:
            cb(winner)
