"""Sokoban simulation engine.

Parses level-set text into immutable :class:`World` snapshots and resolves
player moves against them, with an undo/reset :class:`History`::

    from sokoban_engine import parse_worlds, new_session, step_session, Action

    session = new_session(parse_worlds(text)[0])
    session = step_session(session, Action.RIGHT)
"""

from sokoban_engine.actions import Action, Direction
from sokoban_engine.history import History
from sokoban_engine.levels.parser import parse_worlds
from sokoban_engine.session import Session, new_session, step_session
from sokoban_engine.step import attempt_move
from sokoban_engine.world import World

__all__ = [
    "Action",
    "Direction",
    "History",
    "Session",
    "World",
    "attempt_move",
    "new_session",
    "parse_worlds",
    "step_session",
]
