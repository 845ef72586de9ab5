from __future__ import annotations

from enum import Enum
from typing import Optional

from reversi.othello.board import OutOfRange


class Direction(Enum):
    # Values are (row step, column step).
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    DOWN_RIGHT = (1, 1)

    def delta(self, size: int) -> int:
        d_row, d_col = self.value
        return d_row * size + d_col

    def inverse(self) -> Direction:
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))


def step(index: int, size: int, direction: Direction) -> Optional[int]:
    """
    Returns the index of the neighbour of `index` in `direction`, or None when
    that step leaves the board. Rows and columns are bounded separately, so
    horizontal and diagonal steps never wrap into an adjacent row.
    """

    if not 0 <= index < size * size:
        raise OutOfRange(f"Index {index} is outside board of size {size}")

    row, col = divmod(index, size)
    d_row, d_col = direction.value
    row += d_row
    col += d_col

    if not (0 <= row < size and 0 <= col < size):
        return None

    return row * size + col


def neighbors(index: int, size: int) -> list[tuple[Direction, int]]:
    result: list[tuple[Direction, int]] = []

    for direction in Direction:
        neighbor = step(index, size, direction)
        if neighbor is not None:
            result.append((direction, neighbor))

    return result
