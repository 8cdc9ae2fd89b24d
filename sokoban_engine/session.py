"""Game session and turn reducer.

A :class:`Session` owns the active world and its :class:`History`. Input
collaborators map key events to an :class:`Action` and call
:func:`step_session` once per event; renderers read ``session.world``. The
reducer is pure: it returns a new ``Session`` and never touches the old one.
"""

import logging
from dataclasses import dataclass, replace

from sokoban_engine.actions import ACTION_TO_DIRECTION, MOVE_ACTIONS, Action
from sokoban_engine.history import History
from sokoban_engine.step import attempt_move
from sokoban_engine.world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """State of one running game.

    Attributes:
        world (World): The currently displayed world.
        history (History): Snapshots preceding ``world``.
        running (bool): False once the player has quit.
    """

    world: World
    history: History = History()
    running: bool = True

    @property
    def history_depth(self) -> int:
        """Number of recorded snapshots. Resets add one, undos remove one."""
        return len(self.history)


def new_session(world: World) -> Session:
    """Start a session on ``world`` with an empty history."""
    return Session(world=world)


def step_session(session: Session, action: Action) -> Session:
    """Apply one input action.

    Args:
        session (Session): Previous session.
        action (Action): Input to resolve.

    Returns:
        Session: Next session. Illegal moves, undo/reset with nothing to
        rewind, ``Action.NONE`` and any input after quitting return
        ``session`` unchanged.

    Raises:
        ValueError: If the action is not recognized.
    """
    if not session.running:
        return session

    if action in MOVE_ACTIONS:
        return _step_move(session, action)
    elif action == Action.UNDO:
        return _step_undo(session)
    elif action == Action.RESET:
        return _step_reset(session)
    elif action == Action.QUIT:
        logger.debug("Session quit after %d snapshots", session.history_depth)
        return replace(session, running=False)
    elif action == Action.NONE:
        return session
    raise ValueError(f"Action is not valid: {action!r}")


def _step_move(session: Session, action: Action) -> Session:
    """Resolve a move and record the previous world if it succeeded."""
    moved = attempt_move(session.world, ACTION_TO_DIRECTION[action])
    if moved is None:
        return session
    return replace(session, world=moved, history=session.history.record(session.world))


def _step_undo(session: Session) -> Session:
    history, previous = session.history.undo()
    if previous is None:
        return session
    return replace(session, world=previous, history=history)


def _step_reset(session: Session) -> Session:
    history, first = session.history.reset(session.world)
    if history is session.history:
        return session
    return replace(session, world=first, history=history)
