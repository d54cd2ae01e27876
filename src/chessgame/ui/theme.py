"""Visual theme constants for the board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # picked-up piece origin
    legal_target: QColor  # squares the picked-up piece may move to
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor("#C8E6C9"),  # light green
            dark_square=QColor("#4CAF50"),  # green
            selected=QColor(255, 255, 0),  # yellow
            legal_target=QColor("#FFF59D"),  # pale yellow
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selected=QColor(246, 246, 105),
            legal_target=QColor(205, 210, 106),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            selected=QColor(255, 255, 0),
            legal_target=QColor(186, 202, 68),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Look up a preset by its settings name, falling back to the default."""
        presets = {
            "Green": cls.default,
            "Classic": cls.classic,
            "Blue": cls.blue,
        }
        return presets.get(name, cls.default)()
