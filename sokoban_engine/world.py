"""Core immutable ``World`` dataclass.

This module defines the frozen :class:`World` object that represents one
puzzle at a single turn. The resolver is a pure function that takes a
previous ``World`` plus a direction and returns a *new* ``World``; no mutation
happens in-place. That is what lets :class:`sokoban_engine.history.History`
keep earlier snapshots without them being corrupted by later moves.

Design notes:

* ``board`` is a persistent vector of persistent row vectors
    (``pyrsistent.PVector``) holding :class:`Tile` terrain. It never changes
    after load, so every snapshot of a level shares the same board object.
* ``entities`` is a persistent vector of :class:`Player` / :class:`SokoBox`
    values in source order. A move replaces at most two items, sharing the
    rest of the vector structure.
* ``camera_position`` is carried for viewport-aware renderers and otherwise
    ignored by the engine.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from sokoban_engine.components import Entity, Player, Position, SokoBox, Tile
from sokoban_engine.errors import MissingPlayerError
from sokoban_engine.types import Board, EntityIndex


@dataclass(frozen=True)
class World:
    """Immutable level snapshot.

    Instances are *value objects*; two worlds with equal boards and entities
    compare equal regardless of identity.

    Attributes:
        name (str): Level title from the ``; <title>`` header line.
        width (int): Board width in tiles (widest row).
        height (int): Board height in tiles (number of rows).
        board (Board): Row-major terrain grid, ``board[y][x]``.
        entities (PVector[Entity]): Player and boxes in source order.
        camera_position (Position | None): Viewport anchor for renderers.
    """

    name: str
    width: int
    height: int
    board: Board = pvector()
    entities: PVector[Entity] = pvector()
    camera_position: Optional[Position] = None

    def tile_at(self, pos: Position) -> Tile:
        """Return the terrain at ``pos``. Caller checks bounds."""
        return self.board[pos.y][pos.x]

    @property
    def player_index(self) -> EntityIndex:
        """Index of the player in ``entities``.

        Raises:
            MissingPlayerError: If the world has no player.
        """
        for index, entity in enumerate(self.entities):
            if isinstance(entity, Player):
                return index
        raise MissingPlayerError(self.name)

    @property
    def player(self) -> Player:
        player = self.entities[self.player_index]
        assert isinstance(player, Player)
        return player

    @property
    def boxes(self) -> List[SokoBox]:
        return [entity for entity in self.entities if isinstance(entity, SokoBox)]

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse summary of the snapshot for logging and debugging.

        Returns:
            PMap[str, Any]: Name, dimensions, player position and box positions.
        """
        player_pos: Optional[Position] = next(
            (e.position for e in self.entities if isinstance(e, Player)), None
        )
        return pmap(
            {
                "name": self.name,
                "size": (self.width, self.height),
                "player": player_pos,
                "boxes": tuple(box.position for box in self.boxes),
            }
        )
