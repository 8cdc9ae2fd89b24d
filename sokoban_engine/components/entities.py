"""Movable entity variants.

``Entity`` is a closed union of :class:`Player` and :class:`SokoBox`. Each
variant carries exactly one :class:`Position`. Systems dispatch on the
concrete class rather than on behavior attached to the objects.
"""

from dataclasses import dataclass, replace
from typing import TypeVar, Union

from .position import Position


@dataclass(frozen=True)
class Player:
    """The single controllable entity of a world."""

    position: Position


@dataclass(frozen=True)
class SokoBox:
    """A box the player can push one cell at a time."""

    position: Position


Entity = Union[Player, SokoBox]

E = TypeVar("E", Player, SokoBox)


def moved_to(entity: E, position: Position) -> E:
    """Return a copy of ``entity`` placed at ``position``."""
    return replace(entity, position=position)
