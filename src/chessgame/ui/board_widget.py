"""BoardWidget — an 8x8 grid of buttons bound to a GameController."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from chessgame.core.enums import Color
from chessgame.core.types import Square, all_squares, square_name
from chessgame.game.controller import GameController
from chessgame.ui.theme import BoardTheme


class BoardWidget(QWidget):
    """Renders the board and forwards every square click to the controller.

    Signals:
        square_clicked(Square): Emitted after the controller handled a click.
    """

    square_clicked = pyqtSignal(object)

    _FONT_POINT_SIZE = 28

    def __init__(self, controller: GameController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = BoardTheme.default()
        self._show_legal_moves = True
        self._use_symbols = True
        self._buttons: dict[Square, QPushButton] = {}

        layout = QGridLayout(self)
        layout.setSpacing(0)
        layout.setContentsMargins(0, 0, 0, 0)

        font = QFont()
        font.setPointSize(self._FONT_POINT_SIZE)
        for sq in all_squares():
            button = QPushButton()
            button.setObjectName(square_name(sq))
            button.setFont(font)
            button.setFlat(True)
            button.setMinimumSize(48, 48)
            button.setSizePolicy(
                QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
            )
            button.clicked.connect(lambda _checked=False, s=sq: self._on_clicked(s))
            layout.addWidget(button, sq.row, sq.col)
            self._buttons[sq] = button

        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    def button(self, sq: Square) -> QPushButton:
        return self._buttons[sq]

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self.refresh()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-target highlights."""
        self._show_legal_moves = visible
        self.refresh()

    def set_use_symbols(self, enabled: bool) -> None:
        self._use_symbols = enabled
        self.refresh()

    def refresh(self) -> None:
        """Redraw every square from the current game state."""
        selected = self._controller.state.selected_square
        targets = self._controller.highlights() if self._show_legal_moves else set()

        for sq, button in self._buttons.items():
            piece = self._controller.piece_at(sq)
            if piece is None:
                button.setText("")
            else:
                button.setText(piece.symbol if self._use_symbols else str(piece))

            if sq == selected:
                background = self._theme.selected
            elif sq in targets:
                background = self._theme.legal_target
            elif (sq.row + sq.col) % 2 == 0:
                background = self._theme.light_square
            else:
                background = self._theme.dark_square

            if piece is None:
                foreground = background
            elif piece.color == Color.WHITE:
                foreground = self._theme.white_piece
            else:
                foreground = self._theme.black_piece

            button.setStyleSheet(self._square_style(background, foreground))

    # ── Internal ─────────────────────────────────────────────────────────

    @staticmethod
    def _square_style(background: QColor, foreground: QColor) -> str:
        return (
            f"QPushButton {{ background-color: {background.name()}; "
            f"color: {foreground.name()}; border: none; }}"
        )

    def _on_clicked(self, sq: Square) -> None:
        self._controller.on_square_activated(sq)
        self.refresh()
        self.square_clicked.emit(sq)
