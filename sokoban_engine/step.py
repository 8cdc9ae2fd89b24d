"""Movement resolver.

:func:`attempt_move` is the only public entry point for gameplay progression
on a single world and is pure: it returns a *new*
:class:`sokoban_engine.world.World` or ``None`` when the move is illegal.

Resolution order:

1. Locate the player (a world without one is a programming error).
2. Compute the candidate destination with ``default_move_fn``.
3. Reject immediately if the destination is the current cell (clamped at the
    edge), outside the board, or a wall.
4. Try to push a box at the destination (``push_system``). A blocked push
    blocks the whole turn; the player never moves alone into a box cell.
5. Otherwise walk (``movement_system``).

No tile is ever written; only entity positions change.
"""

import logging
from typing import Optional

from sokoban_engine.actions import Direction
from sokoban_engine.moves import default_move_fn
from sokoban_engine.systems.movement import movement_system
from sokoban_engine.systems.push import push_system
from sokoban_engine.utils.grid import is_wall_at
from sokoban_engine.world import World

logger = logging.getLogger(__name__)


def attempt_move(world: World, direction: Direction) -> Optional[World]:
    """Resolve one player move.

    Args:
        world (World): Current immutable world. Left untouched.
        direction (Direction): Direction the player tries to move in.

    Returns:
        World | None: The next world if the move is legal, otherwise ``None``.
        Callers must not record history or swap worlds on ``None``.

    Raises:
        MissingPlayerError: If ``world`` has no player entity.
    """
    player_index = world.player_index
    current_pos = world.entities[player_index].position
    next_pos = default_move_fn(current_pos, direction)

    if next_pos == current_pos or is_wall_at(world, next_pos):
        logger.debug("Move %s from %s blocked by terrain", direction, current_pos)
        return None

    pushed = push_system(world, player_index, next_pos)
    if pushed is None:
        return None
    if pushed is not world:
        return pushed

    moved = movement_system(world, player_index, next_pos)
    if moved is None:
        logger.debug("Move %s from %s blocked by entity", direction, current_pos)
    return moved
