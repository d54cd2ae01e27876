"""MainWindow — top-level window with the board, turn label and status bar."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from chessgame.core.enums import Color
from chessgame.game.controller import GameController
from chessgame.ui.board_widget import BoardWidget
from chessgame.ui.settings import AppSettings
from chessgame.ui.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

_STATUS_TIMEOUT_MS = 2000


def turn_message(color: Color) -> str:
    return "White's turn ⬜" if color == Color.WHITE else "Black's turn ⬛"


def win_message(winner: Color) -> str:
    return f"{winner.name.capitalize()} wins! 🏁"


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Chess Game")
        self.setMinimumSize(420, 460)

        self._controller = GameController()
        self._settings = settings or AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_game_events()
        self._apply_settings()

        self._controller.new_game()
        self._board_widget.refresh()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def turn_label(self) -> QLabel:
        return self._turn_label

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._turn_label = QLabel()
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._turn_label)

        self._board_widget = BoardWidget(self._controller)
        root.addWidget(self._board_widget, stretch=1)

        self.setStatusBar(QStatusBar())

    def _setup_menu(self) -> None:
        menu = self.menuBar().addMenu("Game")
        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        menu.addAction(self._act_new_game)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_turn_changed.append(self._on_turn_changed)
        events.on_game_over.append(self._on_game_over)

    def _apply_settings(self) -> None:
        s = self._settings
        self._board_widget.set_theme(BoardTheme.by_name(s.board_theme))
        self._board_widget.set_show_legal_moves(s.show_legal_moves)
        self._board_widget.set_use_symbols(s.use_symbols)

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._controller.new_game()
        self._board_widget.refresh()

    def _on_turn_changed(self, color: Color) -> None:
        message = turn_message(color)
        self._turn_label.setText(message)
        self.statusBar().showMessage(message, _STATUS_TIMEOUT_MS)

    def _on_game_over(self, winner: Color) -> None:
        message = win_message(winner)
        _LOGGER.info("Game over: %s", message)
        self._turn_label.setText(message)
        self.statusBar().showMessage(message)
