"""Tests for GameController — the turn gate."""

import logging

import pytest

from chessgame.core.board import Board
from chessgame.core.enums import Color, PieceType
from chessgame.core.piece import Piece
from chessgame.core.types import Square, parse_square
from chessgame.game.controller import GameController
from chessgame.game.selection import EMPTY, Selected


def _play(ctrl: GameController, *moves: str) -> None:
    """Helper: click each move's origin then destination, e.g. 'e2e4'."""
    for move in moves:
        ctrl.on_square_activated(parse_square(move[:2]))
        ctrl.on_square_activated(parse_square(move[2:]))


def _snapshot(ctrl: GameController) -> Board:
    return ctrl.state.board.copy()


# 1.e4 f6 2.Qh5 a6 3.Qxe8
QUEEN_RAID = ("e2e4", "f7f6", "d1h5", "a7a6", "h5e8")


class TestPickup:
    def test_own_piece_selected(self) -> None:
        ctrl = GameController()
        assert not ctrl.on_square_activated(Square(6, 4))
        assert ctrl.state.selection == Selected(Square(6, 4))

    def test_empty_square_rejected(self) -> None:
        ctrl = GameController()
        ctrl.on_square_activated(Square(4, 4))
        assert ctrl.state.selection == EMPTY
        assert ctrl.turn == Color.WHITE

    def test_opponent_piece_rejected(self) -> None:
        ctrl = GameController()
        before = _snapshot(ctrl)
        ctrl.on_square_activated(Square(1, 4))
        assert ctrl.state.selection == EMPTY
        assert ctrl.turn == Color.WHITE
        assert ctrl.state.board == before

    def test_highlights_follow_selection(self) -> None:
        ctrl = GameController()
        assert ctrl.highlights() == set()
        ctrl.on_square_activated(Square(7, 1))
        assert ctrl.highlights() == {Square(5, 0), Square(5, 2)}


class TestMove:
    def test_legal_move_applied(self) -> None:
        ctrl = GameController()
        ctrl.on_square_activated(Square(6, 4))
        assert ctrl.on_square_activated(Square(4, 4))
        assert ctrl.piece_at(Square(4, 4)) == Piece(Color.WHITE, PieceType.PAWN)
        assert ctrl.piece_at(Square(6, 4)) is None
        assert ctrl.turn == Color.BLACK
        assert ctrl.state.selection == EMPTY

    def test_illegal_move_deselects_without_moving(self) -> None:
        ctrl = GameController()
        before = _snapshot(ctrl)
        ctrl.on_square_activated(Square(6, 4))
        assert not ctrl.on_square_activated(Square(3, 4))
        assert ctrl.state.board == before
        assert ctrl.state.selection == EMPTY
        assert ctrl.turn == Color.WHITE

    def test_clicking_origin_again_deselects(self) -> None:
        ctrl = GameController()
        ctrl.on_square_activated(Square(6, 4))
        assert not ctrl.on_square_activated(Square(6, 4))
        assert ctrl.state.selection == EMPTY

    def test_clicking_other_own_piece_only_deselects(self) -> None:
        ctrl = GameController()
        ctrl.on_square_activated(Square(6, 4))
        ctrl.on_square_activated(Square(6, 3))
        assert ctrl.state.selection == EMPTY

    def test_turns_alternate(self) -> None:
        ctrl = GameController()
        _play(ctrl, "e2e4")
        assert ctrl.turn == Color.BLACK
        _play(ctrl, "e4e5")  # white piece, black to move: rejected
        assert ctrl.turn == Color.BLACK
        assert ctrl.piece_at(parse_square("e4")) == Piece(Color.WHITE, PieceType.PAWN)
        _play(ctrl, "e7e5")
        assert ctrl.turn == Color.WHITE

    def test_pawn_cannot_double_step_twice(self) -> None:
        ctrl = GameController()
        _play(ctrl, "e2e4", "a7a6")
        before = _snapshot(ctrl)
        _play(ctrl, "e4e6")
        assert ctrl.state.board == before
        assert ctrl.turn == Color.WHITE


class TestKingCapture:
    def test_capture_ends_game(self) -> None:
        ctrl = GameController()
        _play(ctrl, *QUEEN_RAID)
        assert ctrl.game_over
        assert ctrl.winner == Color.WHITE
        assert ctrl.piece_at(parse_square("e8")) == Piece(Color.WHITE, PieceType.QUEEN)
        assert ctrl.turn == Color.BLACK  # turn still flips on the final move
        assert not ctrl.state.board.has_king(Color.BLACK)
        assert ctrl.state.board.has_king(Color.WHITE)

    def test_activations_after_game_over_are_noops(self) -> None:
        ctrl = GameController()
        _play(ctrl, *QUEEN_RAID)
        before = _snapshot(ctrl)
        for sq in (parse_square("a6"), parse_square("a5")):
            assert not ctrl.on_square_activated(sq)
        assert ctrl.state.board == before
        assert ctrl.state.selection == EMPTY
        assert ctrl.turn == Color.BLACK

    def test_new_game_resets(self) -> None:
        ctrl = GameController()
        _play(ctrl, *QUEEN_RAID)
        ctrl.new_game()
        assert not ctrl.game_over
        assert ctrl.winner is None
        assert ctrl.turn == Color.WHITE
        assert ctrl.state.board == Board.initial()


class TestEvents:
    def test_event_sequence(self) -> None:
        ctrl = GameController()
        moves: list[tuple[Square, Square, Piece | None]] = []
        turns: list[Color] = []
        winners: list[Color] = []
        ctrl.events.on_move.append(lambda f, t, c: moves.append((f, t, c)))
        ctrl.events.on_turn_changed.append(turns.append)
        ctrl.events.on_game_over.append(winners.append)

        _play(ctrl, *QUEEN_RAID)

        assert len(moves) == 5
        assert moves[-1][2] == Piece(Color.BLACK, PieceType.KING)
        # No turn notice once the game has ended.
        assert turns == [Color.BLACK, Color.WHITE, Color.BLACK, Color.WHITE]
        assert winners == [Color.WHITE]

    def test_selection_events(self) -> None:
        ctrl = GameController()
        seen: list[object] = []
        ctrl.events.on_selection_changed.append(seen.append)
        _play(ctrl, "e2e5")
        assert seen == [Selected(Square(6, 4)), EMPTY]

    def test_no_move_event_on_rejection(self) -> None:
        ctrl = GameController()
        moves: list[object] = []
        ctrl.events.on_move.append(lambda *args: moves.append(args))
        _play(ctrl, "e2d3", "e7e5")
        assert moves == []


class TestLogging:
    def test_game_end_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.INFO, logger="chessgame.game.controller"):
            _play(ctrl, *QUEEN_RAID)
        assert "White captured the king and wins" in caplog.text
