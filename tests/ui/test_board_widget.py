"""Tests for BoardWidget rendering and click forwarding."""

from __future__ import annotations

import pytest

from chessgame.core.types import Square
from chessgame.game.controller import GameController
from chessgame.ui.board_widget import BoardWidget
from chessgame.ui.settings import AppSettings
from chessgame.ui.theme import BoardTheme


@pytest.fixture
def widget(qapp: object) -> BoardWidget:
    return BoardWidget(GameController())


def test_initial_symbols(widget: BoardWidget) -> None:
    assert widget.button(Square(0, 4)).text() == "♚"
    assert widget.button(Square(7, 0)).text() == "♖"
    assert widget.button(Square(4, 4)).text() == ""


def test_letters_when_symbols_disabled(widget: BoardWidget) -> None:
    widget.set_use_symbols(False)
    assert widget.button(Square(0, 4)).text() == "k"
    assert widget.button(Square(7, 4)).text() == "K"


def test_click_selects_and_highlights(widget: BoardWidget) -> None:
    theme = BoardTheme.default()
    widget.button(Square(6, 4)).click()

    assert theme.selected.name() in widget.button(Square(6, 4)).styleSheet()
    assert theme.legal_target.name() in widget.button(Square(4, 4)).styleSheet()
    assert theme.legal_target.name() not in widget.button(Square(3, 4)).styleSheet()


def test_hidden_legal_moves(widget: BoardWidget) -> None:
    theme = BoardTheme.default()
    widget.set_show_legal_moves(False)
    widget.button(Square(6, 4)).click()
    assert theme.legal_target.name() not in widget.button(Square(4, 4)).styleSheet()


def test_two_clicks_move_piece(widget: BoardWidget) -> None:
    clicked: list[Square] = []
    widget.square_clicked.connect(clicked.append)

    widget.button(Square(6, 4)).click()
    widget.button(Square(4, 4)).click()

    assert widget.button(Square(4, 4)).text() == "♙"
    assert widget.button(Square(6, 4)).text() == ""
    assert clicked == [Square(6, 4), Square(4, 4)]


def test_checkered_squares(widget: BoardWidget) -> None:
    theme = BoardTheme.default()
    assert theme.light_square.name() in widget.button(Square(4, 4)).styleSheet()
    assert theme.dark_square.name() in widget.button(Square(4, 5)).styleSheet()


def test_theme_lookup_falls_back_to_default() -> None:
    assert BoardTheme.by_name("Nope") == BoardTheme.default()
    assert BoardTheme.by_name("Blue") == BoardTheme.blue()


def test_settings_theme_names_resolve() -> None:
    assert BoardTheme.by_name("Green") == BoardTheme.default()
    assert BoardTheme.by_name("Classic") == BoardTheme.classic()
    assert BoardTheme.by_name(AppSettings().board_theme) == BoardTheme.default()
