from __future__ import annotations

from typing import Iterable

from reversi.othello.board import BLACK, WHITE
from reversi.othello.game import Snapshot

SQUARE_CHARS = {BLACK: "B", WHITE: "W"}

PLAYER_NAMES = {BLACK: "Black", WHITE: "White"}

LEGAL_MOVE_CHAR = "."


def column_letter(col: int) -> str:
    return chr(ord("A") + col)


def index_to_field(index: int, size: int) -> str:
    if index not in range(size * size):
        raise ValueError(f"Index {index} is outside board of size {size}")

    row, col = divmod(index, size)
    return f"{row + 1}{column_letter(col)}"


def indexes_to_fields(indexes: Iterable[int], size: int) -> str:
    return " ".join(index_to_field(index, size) for index in indexes)


def render(snapshot: Snapshot, legal_moves: Iterable[int] = ()) -> str:
    size = snapshot.size
    marked = set(legal_moves)
    row_id_width = len(str(size))

    lines = [
        " " * (row_id_width + 2)
        + "   ".join(column_letter(col) for col in range(size))
    ]

    for row in range(size):
        cells: list[str] = []
        for col in range(size):
            square = snapshot.board.at(row * size + col)

            if square.index in marked:
                cells.append(LEGAL_MOVE_CHAR)
            else:
                cells.append(SQUARE_CHARS.get(square.status, " "))

        lines.append(f"{row + 1:>{row_id_width}}| " + " | ".join(cells) + " |")

    lines.append(
        f"Black {snapshot.black_count} - {snapshot.white_count} White, "
        f"{PLAYER_NAMES[snapshot.active_player]} to move"
    )
    return "\n".join(lines)
