"""Undo / reset history.

``History`` is an append-only stack of earlier :class:`World` snapshots, oldest
first. Like ``World`` it is a frozen value: every operation returns a new
``History`` so a session can be rewound or inspected without aliasing.

Worlds are recorded *before* the session swaps in a new one, and only when a
move actually changed something. Snapshots are shared, never copied; they are
immutable, so later moves cannot corrupt them.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterator, Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from sokoban_engine.world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class History:
    """Immutable stack of prior world snapshots.

    Attributes:
        snapshots (PVector[World]): Recorded worlds, oldest first.
    """

    snapshots: PVector[World] = pvector()

    def __len__(self) -> int:
        return len(self.snapshots)

    def __iter__(self) -> Iterator[World]:
        return iter(self.snapshots)

    @property
    def first(self) -> Optional[World]:
        return self.snapshots[0] if self.snapshots else None

    @property
    def last(self) -> Optional[World]:
        return self.snapshots[-1] if self.snapshots else None

    def record(self, world: World) -> "History":
        """Return a history with ``world`` appended."""
        return replace(self, snapshots=self.snapshots.append(world))

    def undo(self) -> Tuple["History", Optional[World]]:
        """Pop the most recent snapshot.

        Returns:
            tuple[History, World | None]: The shortened history and the popped
            world, or ``(self, None)`` when there is nothing to undo.
        """
        if not self.snapshots:
            return self, None
        logger.debug("Undo to snapshot %d", len(self.snapshots) - 1)
        popped = self.snapshots[-1]
        return replace(self, snapshots=self.snapshots.delete(len(self) - 1)), popped

    def reset(self, current: World) -> Tuple["History", World]:
        """Record ``current`` and return the oldest snapshot.

        The oldest snapshot stays in history, so after a reset an undo brings
        back the pre-reset ``current``. With an empty history nothing has been
        played yet and the call is a no-op.
        """
        if not self.snapshots:
            return self, current
        recorded = self.record(current)
        logger.debug("Reset over %d snapshots", len(recorded))
        return recorded, recorded.snapshots[0]
