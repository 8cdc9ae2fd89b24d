"""Action enumerations.

:class:`Action` is the full set of turn inputs a session understands, while
:class:`Direction` is the subset the movement resolver accepts. Input
collaborators translate raw key events to an ``Action`` (see
:mod:`sokoban_engine.config`) and hand it to
:func:`sokoban_engine.session.step_session`.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions; checks like
``if action in MOVE_ACTIONS`` are preferred over enum name comparisons.
"""

from enum import StrEnum, auto
from typing import Dict


class Direction(StrEnum):
    """Cardinal movement direction."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class Action(StrEnum):
    """String enum of session inputs.

    Members:
        UP, DOWN, LEFT, RIGHT: Move the player (possibly pushing a box).
        UNDO: Restore the previous snapshot.
        RESET: Jump back to the first recorded snapshot.
        QUIT: Stop the session.
        NONE: No input this turn.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UNDO = auto()
    RESET = auto()
    QUIT = auto()
    NONE = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_TO_DIRECTION: Dict[Action, Direction] = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}
