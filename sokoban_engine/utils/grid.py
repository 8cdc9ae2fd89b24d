"""Grid math / collision helpers.

Terrain predicates used by the movement and push systems. Functions here are
pure and only read the board.
"""

from sokoban_engine.components import Position, Tile
from sokoban_engine.world import World


def is_in_bounds(world: World, pos: Position) -> bool:
    """Return True if ``pos`` lies within the board rectangle."""
    return 0 <= pos.x < world.width and 0 <= pos.y < world.height


def is_wall_at(world: World, pos: Position) -> bool:
    """Return True if the terrain at ``pos`` is a wall. Out of bounds counts as wall."""
    if not is_in_bounds(world, pos):
        return True
    return world.tile_at(pos) == Tile.WALL


def compute_destination(current_pos: Position, next_pos: Position) -> Position:
    """Return the square one step beyond ``next_pos``, moving away from ``current_pos``.

    The result can be negative or out of bounds; callers check with
    :func:`is_wall_at`.
    """
    dx = next_pos.x - current_pos.x
    dy = next_pos.y - current_pos.y
    return Position(next_pos.x + dx, next_pos.y + dy)
