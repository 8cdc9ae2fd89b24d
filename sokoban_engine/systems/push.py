"""Push interaction system.

Lets the player push the box standing on the cell it is trying to enter into
the next cell along the same vector, provided that cell is open floor or goal
and nobody stands on it. Only a single box can be pushed: a box with another
box behind it is immovable, as is a cell somehow holding two boxes.
"""

import logging
from dataclasses import replace
from typing import Optional

from sokoban_engine.components import Player, Position, SokoBox, moved_to
from sokoban_engine.types import EntityIndex
from sokoban_engine.utils.ecs import entities_of_type_at, is_occupied_at
from sokoban_engine.utils.grid import compute_destination, is_wall_at
from sokoban_engine.world import World

logger = logging.getLogger(__name__)


def push_system(
    world: World, player_index: EntityIndex, next_pos: Position
) -> Optional[World]:
    """Attempt to push the box at ``next_pos``.

    Args:
        world (World): Current immutable world.
        player_index (EntityIndex): Index of the pushing player in ``world.entities``.
        next_pos (Position): Adjacent position the player is trying to move into.

    Returns:
        World | None: ``world`` itself if there is nothing to push, a new world
        with both player and box advanced if the push succeeds, or ``None`` if
        the push is blocked (which blocks the whole turn).
    """
    player = world.entities[player_index]
    assert isinstance(player, Player)

    box_ids = entities_of_type_at(world, next_pos, SokoBox)
    if not box_ids:
        return world  # Nothing to push

    if len(box_ids) > 1:
        logger.debug("Push rejected: %d boxes stacked at %s", len(box_ids), next_pos)
        return None

    box_id = box_ids[0]
    push_to = compute_destination(player.position, next_pos)
    if is_wall_at(world, push_to) or is_occupied_at(world, push_to):
        logger.debug("Push rejected: box at %s cannot enter %s", next_pos, push_to)
        return None

    entities = world.entities.set(player_index, moved_to(player, next_pos))
    entities = entities.set(box_id, moved_to(world.entities[box_id], push_to))
    return replace(world, entities=entities)
