import pytest
from typing import Optional

from reversi.othello.board import OutOfRange
from reversi.othello.direction import Direction, neighbors, step


@pytest.mark.parametrize(
    ["index", "direction", "expected"],
    [
        pytest.param(27, Direction.UP, 19, id="up"),
        pytest.param(27, Direction.DOWN, 35, id="down"),
        pytest.param(27, Direction.LEFT, 26, id="left"),
        pytest.param(27, Direction.RIGHT, 28, id="right"),
        pytest.param(27, Direction.UP_LEFT, 18, id="up-left"),
        pytest.param(27, Direction.UP_RIGHT, 20, id="up-right"),
        pytest.param(27, Direction.DOWN_LEFT, 34, id="down-left"),
        pytest.param(27, Direction.DOWN_RIGHT, 36, id="down-right"),
        pytest.param(0, Direction.UP, None, id="off-top"),
        pytest.param(63, Direction.DOWN, None, id="off-bottom"),
        pytest.param(0, Direction.UP_LEFT, None, id="off-corner"),
        pytest.param(8, Direction.LEFT, None, id="no-wrap-left"),
        pytest.param(7, Direction.RIGHT, None, id="no-wrap-right"),
        pytest.param(16, Direction.UP_LEFT, None, id="no-wrap-up-left"),
        pytest.param(16, Direction.DOWN_LEFT, None, id="no-wrap-down-left"),
        pytest.param(15, Direction.UP_RIGHT, None, id="no-wrap-up-right"),
        pytest.param(15, Direction.DOWN_RIGHT, None, id="no-wrap-down-right"),
    ],
)
def test_step(index: int, direction: Direction, expected: Optional[int]) -> None:
    assert step(index, 8, direction) == expected


@pytest.mark.parametrize(
    ["direction", "expected"],
    [
        pytest.param(Direction.UP, -8, id="up"),
        pytest.param(Direction.DOWN, 8, id="down"),
        pytest.param(Direction.LEFT, -1, id="left"),
        pytest.param(Direction.RIGHT, 1, id="right"),
        pytest.param(Direction.UP_LEFT, -9, id="up-left"),
        pytest.param(Direction.UP_RIGHT, -7, id="up-right"),
        pytest.param(Direction.DOWN_LEFT, 7, id="down-left"),
        pytest.param(Direction.DOWN_RIGHT, 9, id="down-right"),
    ],
)
def test_delta(direction: Direction, expected: int) -> None:
    assert direction.delta(8) == expected


@pytest.mark.parametrize(
    ["size"],
    [
        pytest.param(4, id="size-4"),
        pytest.param(8, id="size-8"),
        pytest.param(10, id="size-10"),
    ],
)
def test_step_inverse_returns_to_origin(size: int) -> None:
    for index in range(size * size):
        for direction in Direction:
            neighbor = step(index, size, direction)
            if neighbor is None:
                continue

            assert step(neighbor, size, direction.inverse()) == index
            assert neighbor - index == direction.delta(size)


def test_inverse_is_involution() -> None:
    for direction in Direction:
        assert direction.inverse() != direction
        assert direction.inverse().inverse() == direction


@pytest.mark.parametrize(
    ["index"],
    [
        pytest.param(-1, id="too-small"),
        pytest.param(64, id="too-big"),
    ],
)
def test_step_out_of_range(index: int) -> None:
    with pytest.raises(OutOfRange):
        step(index, 8, Direction.UP)


@pytest.mark.parametrize(
    ["index", "expected_count"],
    [
        pytest.param(0, 3, id="corner"),
        pytest.param(3, 5, id="top-edge"),
        pytest.param(24, 5, id="left-edge"),
        pytest.param(27, 8, id="center"),
        pytest.param(63, 3, id="bottom-right-corner"),
    ],
)
def test_neighbors(index: int, expected_count: int) -> None:
    found = neighbors(index, 8)
    assert len(found) == expected_count

    for direction, neighbor in found:
        assert step(index, 8, direction) == neighbor


def test_neighbors_of_top_left_corner() -> None:
    assert dict(neighbors(0, 4)) == {
        Direction.RIGHT: 1,
        Direction.DOWN: 4,
        Direction.DOWN_RIGHT: 5,
    }
