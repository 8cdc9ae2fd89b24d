"""Entity occupancy queries.

Helper functions for asking which entities stand where without putting
iteration logic into systems. All functions are pure and operate on the
immutable :class:`sokoban_engine.world.World` snapshot.

Performance: ``entities_at`` uses a cached reverse index of the immutable
``World.entities`` vector, so repeated lookups on one snapshot are O(1).
"""

from functools import lru_cache
from typing import Dict, List, Mapping, Tuple

from pyrsistent.typing import PVector

from sokoban_engine.components import Entity, Position
from sokoban_engine.types import EntityIndex
from sokoban_engine.world import World


@lru_cache(maxsize=4096)
def _position_index(
    entities: PVector[Entity],
) -> Mapping[Position, Tuple[EntityIndex, ...]]:
    """Build a reverse index from position to entity indices.

    The argument is a persistent vector of frozen dataclasses, which is
    hashable and thus safe to use with ``lru_cache``. Any move produces a new
    vector and therefore a distinct cache key.
    """
    index: Dict[Position, List[EntityIndex]] = {}
    for i, entity in enumerate(entities):
        index.setdefault(entity.position, []).append(i)
    return {pos: tuple(indices) for pos, indices in index.items()}


def entities_at(world: World, pos: Position) -> List[EntityIndex]:
    """Return indices of entities whose position equals ``pos``, in source order."""
    return list(_position_index(world.entities).get(pos, ()))


def entities_of_type_at(
    world: World, pos: Position, entity_type: type
) -> List[EntityIndex]:
    """Return indices at ``pos`` whose entity is an instance of ``entity_type``."""
    return [
        i for i in entities_at(world, pos) if isinstance(world.entities[i], entity_type)
    ]


def is_occupied_at(world: World, pos: Position) -> bool:
    """Return True if any entity (player or box) stands on ``pos``."""
    return bool(entities_at(world, pos))
