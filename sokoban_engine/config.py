"""Engine configuration.

``EngineConfig`` bundles what a front end needs to start a session: which
level-set file to load, which level in it to play and how keys map to
:class:`Action` values. It is a plain frozen dataclass so front ends can build
it from widgets, CLI flags or the environment (:meth:`EngineConfig.from_env`).
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from sokoban_engine.actions import Action
from sokoban_engine.errors import ConfigError

LEVEL_PATH_ENV = "SOKOBAN_LEVEL_PATH"
LEVEL_INDEX_ENV = "SOKOBAN_LEVEL_INDEX"

DEFAULT_KEY_BINDINGS: PMap[str, Action] = pmap(
    {
        "q": Action.QUIT,
        "u": Action.UNDO,
        "r": Action.RESET,
        "w": Action.UP,
        "s": Action.DOWN,
        "a": Action.LEFT,
        "d": Action.RIGHT,
    }
)


@dataclass(frozen=True)
class EngineConfig:
    """Session start-up configuration.

    Attributes:
        level_path: Path of the level-set text file.
        level_index: Zero-based index of the level to play.
        key_bindings: Key name to action mapping used by input handlers.
    """

    level_path: str
    level_index: int = 0
    key_bindings: PMap[str, Action] = field(default=DEFAULT_KEY_BINDINGS)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Build a config from ``SOKOBAN_LEVEL_PATH`` / ``SOKOBAN_LEVEL_INDEX``.

        Raises:
            ConfigError: If the path is unset or the index is not a
                non-negative integer.
        """
        env = os.environ if environ is None else environ
        level_path = env.get(LEVEL_PATH_ENV)
        if not level_path:
            raise ConfigError(f"{LEVEL_PATH_ENV} is not set")
        raw_index = env.get(LEVEL_INDEX_ENV, "0")
        try:
            level_index = int(raw_index)
        except ValueError:
            raise ConfigError(
                f"{LEVEL_INDEX_ENV} must be an integer, got {raw_index!r}"
            ) from None
        if level_index < 0:
            raise ConfigError(f"{LEVEL_INDEX_ENV} must be >= 0, got {level_index}")
        return cls(level_path=level_path, level_index=level_index)


def action_for_key(
    key: str, bindings: Mapping[str, Action] = DEFAULT_KEY_BINDINGS
) -> Action:
    """Map a key name to its bound action, ``Action.NONE`` when unbound."""
    return bindings.get(key, Action.NONE)
