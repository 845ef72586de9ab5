from __future__ import annotations

from reversi.othello.board import EMPTY, Board, opponent
from reversi.othello.direction import Direction, step


class InvalidMove(Exception):
    pass


class OccupiedSquare(InvalidMove):
    pass


class NoCaptures(InvalidMove):
    pass


class Move:
    """
    A placement by `player` on `target` together with the squares it captures,
    grouped per direction and ordered closest-first.
    """

    def __init__(self, target: int, player: int, flips: dict[Direction, list[int]]) -> None:
        self.target = target
        self.player = player
        self.flips = flips

    def __repr__(self) -> str:
        return f"Move({self.target}, {self.player}, {self.flipped()})"

    def flipped(self) -> list[int]:
        return [index for line in self.flips.values() for index in line]

    def changes(self) -> dict[int, int]:
        changes = {index: self.player for index in self.flipped()}
        changes[self.target] = self.player
        return changes


def find_line(board: Board, player: int, target: int, direction: Direction) -> list[int]:
    """
    Walks away from `target` and returns the run of opponent squares that is
    closed off by a square of `player`. Returns an empty list if the run hits
    an empty square or the edge of the board first.
    """

    opp = opponent(player)
    line: list[int] = []

    index = step(target, board.size, direction)
    while index is not None:
        status = board.at(index).status

        if status == opp:
            line.append(index)
        elif status == player:
            return line
        else:
            return []

        index = step(index, board.size, direction)

    return []


def resolve(board: Board, player: int, target: int) -> Move:
    if board.at(target).status != EMPTY:
        raise OccupiedSquare(f"Square {target} is already occupied")

    flips: dict[Direction, list[int]] = {}

    for direction in Direction:
        line = find_line(board, player, target, direction)
        if line:
            flips[direction] = line

    if not flips:
        raise NoCaptures(f"Placing on square {target} captures nothing")

    return Move(target, player, flips)


def is_legal(board: Board, player: int, target: int) -> bool:
    if board.at(target).status != EMPTY:
        return False

    return any(find_line(board, player, target, direction) for direction in Direction)


def legal_moves(board: Board, player: int) -> set[int]:
    return {index for index in board.empty_indexes() if is_legal(board, player, index)}


def has_legal_move(board: Board, player: int) -> bool:
    return any(is_legal(board, player, index) for index in board.empty_indexes())
