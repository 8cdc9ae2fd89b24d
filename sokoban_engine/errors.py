"""Exception hierarchy.

Only genuine failures raise. An illegal move is a normal outcome and is
reported as ``None`` by :func:`sokoban_engine.step.attempt_move`.
"""

from typing import Optional


class SokobanError(Exception):
    """Base class for all engine errors."""


class LevelFormatError(SokobanError, ValueError):
    """An unrecognized glyph was found while tokenizing a level set.

    This is fatal for the whole parse call: once an unknown symbol appears the
    level geometry cannot be trusted.
    """

    def __init__(self, char: str, line: int, column: int) -> None:
        self.char = char
        self.line = line
        self.column = column
        super().__init__(
            f"Unrecognized level character {char!r} at line {line}, column {column}"
        )


class LevelStructureError(SokobanError, ValueError):
    """A token group could not be turned into a level (e.g. missing title)."""


class MissingPlayerError(SokobanError, ValueError):
    """A world without a player was handed to the resolver."""

    def __init__(self, world_name: Optional[str] = None) -> None:
        self.world_name = world_name
        super().__init__(f"World {world_name!r} contains no player")


class LevelSelectionError(SokobanError, IndexError):
    """The requested level index does not exist in the loaded set."""


class ConfigError(SokobanError, ValueError):
    """Engine configuration is missing or malformed."""
