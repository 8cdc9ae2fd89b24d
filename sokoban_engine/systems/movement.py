"""Player movement system.

Moves the player to ``next_pos`` when the destination is inside the board,
is not a wall and holds no entity. Box pushing happens in
:mod:`sokoban_engine.systems.push` before this system is consulted.
"""

from dataclasses import replace
from typing import Optional

from sokoban_engine.components import Player, Position, moved_to
from sokoban_engine.types import EntityIndex
from sokoban_engine.utils.ecs import is_occupied_at
from sokoban_engine.utils.grid import is_wall_at
from sokoban_engine.world import World


def movement_system(
    world: World, player_index: EntityIndex, next_pos: Position
) -> Optional[World]:
    """Move the player one tile if allowed.

    Args:
        world (World): Current world.
        player_index (EntityIndex): Index of the player in ``world.entities``.
        next_pos (Position): Desired destination position.

    Returns:
        World | None: Updated world, or ``None`` if the destination is blocked
        or equal to the current position.
    """
    player = world.entities[player_index]
    assert isinstance(player, Player)

    if next_pos == player.position:
        return None  # Clamped at the edge

    if is_wall_at(world, next_pos) or is_occupied_at(world, next_pos):
        return None

    return replace(
        world, entities=world.entities.set(player_index, moved_to(player, next_pos))
    )
