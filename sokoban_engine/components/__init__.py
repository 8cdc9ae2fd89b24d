"""sokoban_engine.components
=================================

Aggregate import surface for the value types that make up a world snapshot.

Terrain (:class:`Tile`) is static and lives on the board; :class:`Player` and
:class:`SokoBox` are the movable entities, each holding a :class:`Position`.
All of them are frozen dataclasses or enums so they can be shared freely
between snapshots::

    from sokoban_engine.components import Player, Position, Tile
"""

from .entities import Entity, Player, SokoBox, moved_to
from .position import Position
from .tile import Tile

__all__ = [
    "Entity",
    "Player",
    "Position",
    "SokoBox",
    "Tile",
    "moved_to",
]
