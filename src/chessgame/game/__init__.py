"""Game management layer — state, selection and the turn-gating controller.

Quick start::

    from chessgame.core import Square
    from chessgame.game import GameController

    ctrl = GameController()
    ctrl.on_square_activated(Square(6, 4))  # pick up the e2 pawn
    ctrl.on_square_activated(Square(4, 4))  # and push it to e4
"""

from chessgame.game.controller import GameController, GameEvents
from chessgame.game.selection import EMPTY, Empty, Selected, Selection
from chessgame.game.state import GameState

__all__ = [
    # Selection
    "EMPTY",
    "Empty",
    "Selected",
    "Selection",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
