"""Common type aliases."""

from typing import TYPE_CHECKING

from pyrsistent.typing import PVector

if TYPE_CHECKING:
    from sokoban_engine.components import Tile

EntityIndex = int

Row = PVector["Tile"]
Board = PVector[Row]
