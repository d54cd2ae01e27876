"""Selection sum type: nothing picked up, or one square picked up."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessgame.core.types import Square


@dataclass(frozen=True, slots=True)
class Empty:
    """No piece is picked up."""


@dataclass(frozen=True, slots=True)
class Selected:
    """The piece on *square* is picked up and awaits a destination."""

    square: Square


Selection: TypeAlias = Empty | Selected

EMPTY = Empty()
