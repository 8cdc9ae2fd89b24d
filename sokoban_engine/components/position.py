"""Position component.

Immutable integer grid coordinates shared by every entity variant. The board
is indexed ``board[y][x]`` so ``x`` is the column and ``y`` the row.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
