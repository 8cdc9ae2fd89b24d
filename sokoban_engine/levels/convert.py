"""Conversions from ``World`` to rendering-friendly forms.

Renderers are collaborators outside the engine. They need the board row-major
with entities layered on top. Two forms are provided:

* :func:`to_text` gives level-set glyph rows, the inverse of the parser.
* :func:`to_array` gives a ``numpy`` grid of integer cell codes.
"""

from enum import IntEnum
from typing import Dict, List, Optional, Tuple, Type

import numpy as np

from sokoban_engine.components import Entity, Player, SokoBox, Tile
from sokoban_engine.world import World


class CellCode(IntEnum):
    """Layered cell codes used by :func:`to_array`."""

    EMPTY = 0
    WALL = 1
    GOAL = 2
    BOX = 3
    BOX_ON_GOAL = 4
    PLAYER = 5
    PLAYER_ON_GOAL = 6


# (tile, occupant type) -> (glyph, code)
CELL_TABLE: Dict[Tuple[Tile, Optional[Type[Entity]]], Tuple[str, CellCode]] = {
    (Tile.EMPTY, None): (" ", CellCode.EMPTY),
    (Tile.WALL, None): ("#", CellCode.WALL),
    (Tile.GOAL, None): (".", CellCode.GOAL),
    (Tile.EMPTY, SokoBox): ("$", CellCode.BOX),
    (Tile.GOAL, SokoBox): ("*", CellCode.BOX_ON_GOAL),
    (Tile.EMPTY, Player): ("@", CellCode.PLAYER),
    (Tile.GOAL, Player): ("+", CellCode.PLAYER_ON_GOAL),
}


def _cells(world: World) -> List[List[Tuple[str, CellCode]]]:
    occupants: Dict[Tuple[int, int], Type[Entity]] = {}
    for entity in world.entities:
        pos = entity.position
        # The player wins over a box if a malformed world stacks them.
        if occupants.get((pos.x, pos.y)) is not Player:
            occupants[(pos.x, pos.y)] = type(entity)
    rows: List[List[Tuple[str, CellCode]]] = []
    for y, row in enumerate(world.board):
        cells = []
        for x, tile in enumerate(row):
            occupant = occupants.get((x, y))
            # An entity on a wall cannot come from the parser; show the wall.
            key = (tile, None if tile == Tile.WALL else occupant)
            cells.append(CELL_TABLE[key])
        rows.append(cells)
    return rows


def to_text(world: World) -> str:
    """Render ``world`` as level-set board rows (no title line).

    Rows keep their padding so every row is ``world.width`` glyphs wide.
    """
    lines = ["".join(glyph for glyph, _ in row) for row in _cells(world)]
    return "\n".join(lines) + ("\n" if lines else "")


def to_array(world: World) -> np.ndarray:
    """Return a ``(height, width)`` ``int8`` array of :class:`CellCode` values."""
    grid = np.zeros((world.height, world.width), dtype=np.int8)
    for y, row in enumerate(_cells(world)):
        for x, (_, code) in enumerate(row):
            grid[y, x] = code
    return grid
