from __future__ import annotations

import re
from typing import Optional

from reversi.othello.game import InvalidInput

QUIT_WORDS = ["q", "quit", "exit"]

ROW_FIRST_REGEX = re.compile(r"^(\d+)\s*([a-z])$")
COLUMN_FIRST_REGEX = re.compile(r"^([a-z])\s*(\d+)$")


def parse_column(letter: str, size: int) -> int:
    col = ord(letter.lower()) - ord("a")
    if not 0 <= col < size:
        last = chr(ord("a") + size - 1)
        raise InvalidInput(f'Column must be between "a" and "{last}", got "{letter}"')
    return col


def parse_row(digits: str, size: int) -> int:
    row = int(digits)
    if not 1 <= row <= size:
        raise InvalidInput(f"Row must be between 1 and {size}, got {row}")
    return row


def parse_move(text: str, size: int) -> Optional[tuple[int, int]]:
    """
    Parses operator input like "3 d", "3d" or "d3" into a (row, column) pair
    with a 1-based row and 0-based column. Returns None for a quit request.
    """

    text = text.strip().lower()

    if text in QUIT_WORDS:
        return None

    match = ROW_FIRST_REGEX.match(text)
    if match:
        digits, letter = match.groups()
    else:
        match = COLUMN_FIRST_REGEX.match(text)
        if not match:
            raise InvalidInput(f'Could not parse move "{text}"')
        letter, digits = match.groups()

    return parse_row(digits, size), parse_column(letter, size)
