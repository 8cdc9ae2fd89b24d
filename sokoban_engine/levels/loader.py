"""Level-set loading and level selection.

Bridges the filesystem and the pure parser: reads a level-set file, parses it
and picks the world a session starts on.
"""

import logging
import os
from typing import List, Sequence, Union

from sokoban_engine.config import EngineConfig
from sokoban_engine.errors import LevelSelectionError
from sokoban_engine.levels.parser import parse_worlds
from sokoban_engine.session import Session, new_session
from sokoban_engine.world import World

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load_worlds(path: PathLike) -> List[World]:
    """Read and parse the level set at ``path``.

    Raises:
        OSError: If the file cannot be read.
        LevelFormatError: If the file contains an unknown glyph.
    """
    with open(path, encoding="utf-8") as fh:
        text = fh.read()
    worlds = parse_worlds(text)
    logger.info("Loaded %d levels from %s", len(worlds), os.fspath(path))
    return worlds


def select_world(worlds: Sequence[World], index: int) -> World:
    """Return ``worlds[index]``.

    Raises:
        LevelSelectionError: If ``index`` is negative or out of range.
    """
    if not 0 <= index < len(worlds):
        raise LevelSelectionError(
            f"Level index {index} out of range for {len(worlds)} levels"
        )
    return worlds[index]


def load_session(config: EngineConfig) -> Session:
    """Load ``config.level_path`` and start a session on ``config.level_index``."""
    world = select_world(load_worlds(config.level_path), config.level_index)
    logger.info("Starting level %r", world.name)
    return new_session(world)
