# tests/unit/test_moves.py

import pytest
from typing import Tuple

from sokoban_engine.actions import Direction
from sokoban_engine.components import Position
from sokoban_engine.moves import default_move_fn


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        # all directions
        ((2, 2), Direction.UP, (2, 1)),
        ((2, 2), Direction.DOWN, (2, 3)),
        ((2, 2), Direction.LEFT, (1, 2)),
        ((2, 2), Direction.RIGHT, (3, 2)),
        # clamped at the top/left edge
        ((0, 0), Direction.LEFT, (0, 0)),
        ((0, 0), Direction.UP, (0, 0)),
        ((3, 0), Direction.UP, (3, 0)),
        ((0, 3), Direction.LEFT, (0, 3)),
        # bottom/right edge is left to the caller
        ((4, 4), Direction.DOWN, (4, 5)),
        ((4, 4), Direction.RIGHT, (5, 4)),
    ],
)
def test_simple_moves(
    start: Tuple[int, int],
    direction: Direction,
    expected: Tuple[int, int],
) -> None:
    assert default_move_fn(Position(*start), direction) == Position(*expected)
