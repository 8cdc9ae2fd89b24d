"""Direction arithmetic.

:func:`default_move_fn` maps (position, direction) -> candidate destination.
The resolver validates the candidate against terrain and occupancy; this
module only does the coordinate arithmetic.

* Never returns a negative coordinate. Moving past the top or left edge
  clamps to 0, so the candidate equals the current position and the resolver
  treats the turn as a no-op.
* Does not look at the world and does not check the bottom or right edge;
  the caller handles bounds.
"""

from typing import Dict, Tuple

from sokoban_engine.actions import Direction
from sokoban_engine.components import Position

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def default_move_fn(pos: Position, direction: Direction) -> Position:
    """Single-tile cardinal step, clamped at 0 on both axes."""
    dx, dy = DIRECTION_DELTAS[direction]
    return Position(max(pos.x + dx, 0), max(pos.y + dy, 0))
