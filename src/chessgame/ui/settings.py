"""User-configurable settings for the board window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Green"
    show_legal_moves: bool = True
    use_symbols: bool = True  # Unicode glyphs instead of letters

    # Diagnostics
    log_level: str = "WARNING"
