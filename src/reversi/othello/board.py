from __future__ import annotations

from math import isqrt

BLACK = -1
WHITE = 1
EMPTY = 0

MIN_SIZE = 4


class InvalidSize(ValueError):
    pass


class OutOfRange(IndexError):
    pass


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def validate_size(size: int) -> None:
    if size < MIN_SIZE or size % 2 != 0:
        raise InvalidSize(f"Board size must be even and at least {MIN_SIZE}, got {size}")


def starting_places(size: int) -> list[int]:
    """
    Indexes of the four starting squares: top-left of the central 2x2 block,
    then its right, down and down-right neighbours, in that order.
    """
    center = (size // 2 - 1) * (size + 1)
    return [center, center + 1, center + size, center + size + 1]


class Square:
    def __init__(self, index: int, status: int) -> None:
        assert status in [BLACK, WHITE, EMPTY]

        self.index = index
        self.status = status

    def __repr__(self) -> str:
        return f"Square({self.index}, {self.status})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Square):
            raise TypeError(f"Cannot compare Square with {type(other)}")

        return (self.index, self.status) == (other.index, other.status)

    def __hash__(self) -> int:
        return hash((self.index, self.status))

    def is_empty(self) -> bool:
        return self.status == EMPTY


class Board:
    def __init__(self, size: int, squares: list[Square]) -> None:
        validate_size(size)
        assert len(squares) == size * size

        self.size = size
        self.__squares = squares

    @classmethod
    def create(cls, size: int) -> Board:
        validate_size(size)

        white_first, black_first, black_second, white_second = starting_places(size)
        colors = {
            white_first: WHITE,
            black_first: BLACK,
            black_second: BLACK,
            white_second: WHITE,
        }

        squares = [Square(index, colors.get(index, EMPTY)) for index in range(size * size)]
        return Board(size, squares)

    @classmethod
    def from_squares(cls, statuses: list[int]) -> Board:
        size = isqrt(len(statuses))
        if size * size != len(statuses):
            raise InvalidSize(f"Square count {len(statuses)} is not a perfect square")

        validate_size(size)

        squares = [Square(index, status) for index, status in enumerate(statuses)]
        return Board(size, squares)

    def __repr__(self) -> str:
        return f"Board({self.size}, {[square.status for square in self.__squares]})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.size == other.size and self.squares() == other.squares()

    def __hash__(self) -> int:
        return hash((self.size, self.squares()))

    def copy(self) -> Board:
        return Board(self.size, list(self.__squares))

    def in_range(self, index: int) -> bool:
        return 0 <= index < self.size * self.size

    def at(self, index: int) -> Square:
        if not self.in_range(index):
            raise OutOfRange(f"Index {index} is outside board of size {self.size}")
        return self.__squares[index]

    def squares(self) -> tuple[Square, ...]:
        return tuple(self.__squares)

    def replace(self, changes: dict[int, int]) -> None:
        # Validate everything first, so a bad entry leaves the board untouched.
        for index, status in changes.items():
            if not self.in_range(index):
                raise OutOfRange(f"Index {index} is outside board of size {self.size}")

            if status not in [BLACK, WHITE]:
                raise ValueError(f"Square {index} cannot be set to status {status}")

        for index, status in changes.items():
            self.__squares[index] = Square(index, status)

    def index_of(self, row: int, col: int) -> int:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfRange(f"Square ({row}, {col}) is outside board of size {self.size}")
        return row * self.size + col

    def coordinates(self, index: int) -> tuple[int, int]:
        if not self.in_range(index):
            raise OutOfRange(f"Index {index} is outside board of size {self.size}")
        return divmod(index, self.size)

    def count(self, color: int) -> int:
        assert color in [BLACK, WHITE, EMPTY]
        return sum(1 for square in self.__squares if square.status == color)

    def count_empties(self) -> int:
        return self.count(EMPTY)

    def count_discs(self) -> int:
        return self.size * self.size - self.count_empties()

    def is_full(self) -> bool:
        return self.count_empties() == 0

    def empty_indexes(self) -> list[int]:
        return [square.index for square in self.__squares if square.is_empty()]
