"""Level-set parser.

Builds immutable :class:`World` values from the token stream produced by
:mod:`sokoban_engine.levels.tokens`.

Pipeline:

1. ``tokenize`` the text (strict, any bad glyph fails the call).
2. ``group_tokens`` into one group per title, from the ``TEXT`` token up to
    the next one.
3. ``parse_level`` each group. Groups that are not a well-formed level (for
    example board rows before the first title) are dropped, and parsing goes
    on with the rest.

Rows shorter than the widest row are padded with ``Tile.EMPTY``.
"""

import logging
from typing import List, Sequence, Tuple

from pyrsistent import pvector

from sokoban_engine.components import Entity, Player, Position, SokoBox, Tile
from sokoban_engine.errors import LevelStructureError
from sokoban_engine.levels.tokens import Token, TokenKind, tokenize
from sokoban_engine.world import World

logger = logging.getLogger(__name__)

# Terrain written for each token kind; kinds not listed leave the default.
TOKEN_TO_TILE = {
    TokenKind.WALL: Tile.WALL,
    TokenKind.GOAL: Tile.GOAL,
    TokenKind.SOKOBOX_AND_GOAL: Tile.GOAL,
    TokenKind.PLAYER_AND_GOAL: Tile.GOAL,
}

TOKEN_TO_ENTITY = {
    TokenKind.PLAYER: Player,
    TokenKind.PLAYER_AND_GOAL: Player,
    TokenKind.SOKOBOX: SokoBox,
    TokenKind.SOKOBOX_AND_GOAL: SokoBox,
}


def get_board_dimensions(tokens: Sequence[Token]) -> Tuple[int, int]:
    """Return ``(width, height)`` of the board described by ``tokens``.

    Width is the longest run of cell tokens closed by a ``NEWLINE``; height is
    the number of ``NEWLINE`` tokens.
    """
    width = 0
    height = 0
    count = 0
    for token in tokens:
        if token.kind == TokenKind.NEWLINE:
            width = max(width, count)
            height += 1
            count = 0
        else:
            count += 1
    return width, height


def group_tokens(tokens: Sequence[Token]) -> List[List[Token]]:
    """Split a token stream into one group per title.

    Tokens that precede the first title form a leading group of their own,
    which :func:`parse_level` will reject.
    """
    boundaries = [i for i, token in enumerate(tokens) if token.kind == TokenKind.TEXT]
    if not boundaries or boundaries[0] != 0:
        boundaries.insert(0, 0)
    boundaries.append(len(tokens))
    return [
        list(tokens[start:end])
        for start, end in zip(boundaries, boundaries[1:])
        if end > start
    ]


def parse_level(tokens: Sequence[Token]) -> World:
    """Parse a single level group.

    Args:
        tokens (Sequence[Token]): ``[TEXT, cells..., NEWLINE, ...]``.

    Returns:
        World: The freshly loaded level.

    Raises:
        LevelStructureError: If the group does not start with a title.
    """
    if not tokens or tokens[0].kind != TokenKind.TEXT:
        raise LevelStructureError("Level must start with a title")

    title = tokens[0].text or ""
    level_tokens = tokens[1:]
    width, height = get_board_dimensions(level_tokens)

    board = [[Tile.EMPTY] * width for _ in range(height)]
    entities: List[Entity] = []

    x, y = 0, 0
    for token in level_tokens:
        if token.kind == TokenKind.NEWLINE:
            x, y = 0, y + 1
            continue
        tile = TOKEN_TO_TILE.get(token.kind)
        if tile is not None:
            board[y][x] = tile
        entity_type = TOKEN_TO_ENTITY.get(token.kind)
        if entity_type is not None:
            entities.append(entity_type(Position(x, y)))
        x += 1

    return World(
        name=title,
        width=width,
        height=height,
        board=pvector(pvector(row) for row in board),
        entities=pvector(entities),
        camera_position=Position(0, 0),
    )


def parse_worlds(text: str) -> List[World]:
    """Parse a whole level set.

    Args:
        text (str): Raw level-set contents.

    Returns:
        List[World]: One world per well-formed titled group, in source order.
        Empty or title-less input gives an empty list.

    Raises:
        LevelFormatError: If any board row contains an unknown character. No
            worlds are returned in that case.
    """
    worlds: List[World] = []
    for index, group in enumerate(group_tokens(tokenize(text))):
        try:
            worlds.append(parse_level(group))
        except LevelStructureError as exc:
            logger.debug("Dropping token group %d: %s", index, exc)
    logger.debug("Parsed %d levels", len(worlds))
    return worlds
