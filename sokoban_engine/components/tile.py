"""Static terrain values.

A ``Tile`` never holds a movable entity; boxes and the player live in
``World.entities`` and are layered on top of the board when rendered.
"""

from enum import StrEnum, auto


class Tile(StrEnum):
    """Terrain kind of a single board cell."""

    EMPTY = auto()
    WALL = auto()
    GOAL = auto()
