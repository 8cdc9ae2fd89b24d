"""Level-set tokenizer.

Turns the raw text of a level set into a flat list of :class:`Token` values.
The format is the common Skinner-style ``.ban`` / ``.txt`` layout::

    ; Level One
    #####
    #@$.#
    #####

* ``; <title>`` lines start a new level and become ``TEXT`` tokens.
* Rows are split on ``\n`` only (a trailing ``\r`` is dropped); any other
    control character is an unknown glyph.
* Empty lines are ignored entirely.
* Every other line is a board row. Each character becomes one token and a
    ``NEWLINE`` token closes the row.

Tokenizing is strict: an unknown character fails the whole input with
:class:`sokoban_engine.errors.LevelFormatError`.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, List, Optional

from sokoban_engine.errors import LevelFormatError

TITLE_MARKER = ";"


class TokenKind(StrEnum):
    """Kinds of token produced by :func:`tokenize`."""

    TEXT = auto()
    WALL = auto()
    PLAYER = auto()
    SOKOBOX = auto()
    GOAL = auto()
    SOKOBOX_AND_GOAL = auto()
    PLAYER_AND_GOAL = auto()
    EMPTY = auto()
    NEWLINE = auto()


@dataclass(frozen=True)
class Token:
    """A single lexical unit.

    Attributes:
        kind: Token kind.
        text: Title text, only set for ``TokenKind.TEXT``.
    """

    kind: TokenKind
    text: Optional[str] = None


GLYPH_TO_TOKEN: Dict[str, TokenKind] = {
    "#": TokenKind.WALL,
    "@": TokenKind.PLAYER,
    "$": TokenKind.SOKOBOX,
    ".": TokenKind.GOAL,
    "*": TokenKind.SOKOBOX_AND_GOAL,
    "+": TokenKind.PLAYER_AND_GOAL,
    " ": TokenKind.EMPTY,
}

NEWLINE = Token(TokenKind.NEWLINE)


def parse_title(line: str) -> str:
    """Strip the ``;`` marker and a single following space from a title line."""
    title = line[len(TITLE_MARKER) :]
    return title[1:] if title.startswith(" ") else title


def tokenize(text: str) -> List[Token]:
    """Tokenize a whole level set.

    Args:
        text (str): Raw level-set contents.

    Returns:
        List[Token]: Tokens in source order.

    Raises:
        LevelFormatError: On the first character outside the glyph table.
    """
    tokens: List[Token] = []
    for line_no, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.removesuffix("\r")
        if line.startswith(TITLE_MARKER):
            tokens.append(Token(TokenKind.TEXT, parse_title(line)))
            continue
        if not line:
            continue
        for col, ch in enumerate(line, start=1):
            kind = GLYPH_TO_TOKEN.get(ch)
            if kind is None:
                raise LevelFormatError(ch, line_no, col)
            tokens.append(Token(kind))
        tokens.append(NEWLINE)
    return tokens
