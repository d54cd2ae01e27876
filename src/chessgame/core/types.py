"""Square type and coordinate helpers.

Board layout (top-to-bottom, Black first):
    row 0 = rank 8 (Black back rank), row 7 = rank 1 (White back rank)
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """Board coordinate, each component in 0–7."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_name(self)


def is_valid_square(row: int, col: int) -> bool:
    """Check whether *row*/*col* lie on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def all_squares() -> Iterator[Square]:
    """All 64 squares, row-major from the top-left corner."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Square(row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 0) → 'a1', (0, 4) → 'e8'."""
    return chr(ord("a") + sq.col) + str(BOARD_SIZE - sq.row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → Square(6, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))
