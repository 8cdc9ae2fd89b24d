from pathlib import Path

import pytest

from sokoban_engine.config import EngineConfig
from sokoban_engine.errors import LevelFormatError, LevelSelectionError
from sokoban_engine.levels.loader import load_session, load_worlds, select_world

MICRO = """\
; Micro 1
#####
#@$.#
#####

; Micro 2
####
#.@#
#$ #
####
"""


@pytest.fixture
def level_file(tmp_path: Path) -> Path:
    path = tmp_path / "micro.ban"
    path.write_text(MICRO, encoding="utf-8")
    return path


def test_load_worlds(level_file: Path) -> None:
    worlds = load_worlds(level_file)
    assert [w.name for w in worlds] == ["Micro 1", "Micro 2"]


def test_load_worlds_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_worlds(tmp_path / "nope.ban")


def test_load_worlds_bad_glyph(tmp_path: Path) -> None:
    path = tmp_path / "bad.ban"
    path.write_text("; Bad\n#%#\n", encoding="utf-8")
    with pytest.raises(LevelFormatError):
        load_worlds(path)


def test_select_world(level_file: Path) -> None:
    worlds = load_worlds(level_file)
    assert select_world(worlds, 1).name == "Micro 2"
    with pytest.raises(LevelSelectionError):
        select_world(worlds, 2)
    with pytest.raises(LevelSelectionError):
        select_world(worlds, -1)
    with pytest.raises(IndexError):
        select_world([], 0)


def test_load_session(level_file: Path) -> None:
    session = load_session(EngineConfig(level_path=str(level_file), level_index=1))
    assert session.world.name == "Micro 2"
    assert session.running
    assert session.history_depth == 0
