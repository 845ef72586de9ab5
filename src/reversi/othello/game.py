from __future__ import annotations

from enum import Enum
from typing import Optional

from reversi.othello.board import BLACK, WHITE, Board, opponent
from reversi.othello.capture import Move, has_legal_move, legal_moves, resolve


class InvalidInput(ValueError):
    pass


class GameOver(Exception):
    pass


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    TERMINATED = "terminated"


class Termination(Enum):
    QUIT = "quit"
    NO_LEGAL_MOVES = "no_legal_moves"
    BOARD_FULL = "board_full"


class Snapshot:
    def __init__(
        self,
        *,
        board: Board,
        size: int,
        active_player: int,
        black_count: int,
        white_count: int,
    ) -> None:
        self.board = board
        self.size = size
        self.active_player = active_player
        self.black_count = black_count
        self.white_count = white_count


class Game:
    """
    Turn state machine for one game. The game owns its board and is the only
    thing that mutates it; every accepted move is applied as one `replace()`.
    """

    def __init__(self, board: Board, turn: int = BLACK) -> None:
        assert turn in [BLACK, WHITE]

        self.board = board
        self.turn = turn
        self.turn_number = 0
        self.status = GameStatus.IN_PROGRESS
        self.termination: Optional[Termination] = None
        self.moves: list[Move] = []
        self.passes: list[int] = []

        self._settle()

    @classmethod
    def start(cls, size: int = 8) -> Game:
        return Game(Board.create(size), BLACK)

    @classmethod
    def from_moves(cls, moves: list[tuple[int, int]], size: int = 8) -> Game:
        game = cls.start(size)

        for row, col in moves:
            game.play(row, col)

        return game

    def __repr__(self) -> str:
        return f"Game({self.board}, {self.turn}, {self.status}, {self.termination})"

    @property
    def size(self) -> int:
        return self.board.size

    def is_over(self) -> bool:
        return self.status == GameStatus.TERMINATED

    def count(self, color: int) -> int:
        assert color in [BLACK, WHITE]
        return self.board.count(color)

    def winner(self) -> Optional[int]:
        black = self.count(BLACK)
        white = self.count(WHITE)

        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return None

    def legal_moves(self) -> set[int]:
        if self.is_over():
            return set()
        return legal_moves(self.board, self.turn)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=self.board.copy(),
            size=self.size,
            active_player=self.turn,
            black_count=self.count(BLACK),
            white_count=self.count(WHITE),
        )

    def play(self, row: int, col: int) -> Move:
        """
        Plays on `row` (1-based) and `col` (0-based) for the player to move.
        """

        if not 1 <= row <= self.size:
            raise InvalidInput(f"Row must be between 1 and {self.size}, got {row}")

        if not 0 <= col < self.size:
            raise InvalidInput(f"Column must be between 0 and {self.size - 1}, got {col}")

        return self.play_index(self.board.index_of(row - 1, col))

    def play_index(self, index: int) -> Move:
        self._check_not_over()

        move = resolve(self.board, self.turn, index)

        self.board.replace(move.changes())
        self.moves.append(move)
        self.turn_number += 1
        self.turn = opponent(self.turn)

        self._settle()
        return move

    def quit(self) -> None:
        self._check_not_over()
        self._terminate(Termination.QUIT)

    def _check_not_over(self) -> None:
        if self.is_over():
            raise GameOver(f"Game has already ended: {self.termination}")

    def _terminate(self, reason: Termination) -> None:
        self.status = GameStatus.TERMINATED
        self.termination = reason

    def _settle(self) -> None:
        # Skip the player to move if they cannot move, end the game if nobody can.
        if self.board.is_full():
            self._terminate(Termination.BOARD_FULL)
            return

        if has_legal_move(self.board, self.turn):
            return

        if has_legal_move(self.board, opponent(self.turn)):
            self.passes.append(self.turn)
            self.turn = opponent(self.turn)
            return

        self._terminate(Termination.NO_LEGAL_MOVES)
