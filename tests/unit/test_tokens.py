import pytest

from sokoban_engine.errors import LevelFormatError
from sokoban_engine.levels.tokens import Token, TokenKind, parse_title, tokenize


@pytest.mark.parametrize(
    "glyph, kind",
    [
        ("#", TokenKind.WALL),
        ("@", TokenKind.PLAYER),
        ("$", TokenKind.SOKOBOX),
        (".", TokenKind.GOAL),
        ("*", TokenKind.SOKOBOX_AND_GOAL),
        ("+", TokenKind.PLAYER_AND_GOAL),
        (" ", TokenKind.EMPTY),
    ],
)
def test_glyph_maps_to_single_token(glyph: str, kind: TokenKind) -> None:
    assert tokenize(glyph) == [Token(kind), Token(TokenKind.NEWLINE)]


def test_title_line_becomes_text_token() -> None:
    assert tokenize("; Level One") == [Token(TokenKind.TEXT, "Level One")]


@pytest.mark.parametrize(
    "line, title",
    [
        ("; Level One", "Level One"),
        (";Level One", "Level One"),
        (";", ""),
        ("; ", ""),
        (";  Indented", " Indented"),
    ],
)
def test_parse_title(line: str, title: str) -> None:
    assert parse_title(line) == title


def test_blank_lines_produce_no_tokens() -> None:
    assert tokenize("\n\n#\n\n") == [Token(TokenKind.WALL), Token(TokenKind.NEWLINE)]


def test_newline_closes_each_row() -> None:
    tokens = tokenize("##\n#")
    kinds = [t.kind for t in tokens]
    assert kinds == [
        TokenKind.WALL,
        TokenKind.WALL,
        TokenKind.NEWLINE,
        TokenKind.WALL,
        TokenKind.NEWLINE,
    ]


def test_windows_line_endings_are_accepted() -> None:
    assert tokenize("; A\r\n#\r\n") == [
        Token(TokenKind.TEXT, "A"),
        Token(TokenKind.WALL),
        Token(TokenKind.NEWLINE),
    ]


def test_unknown_character_reports_location() -> None:
    with pytest.raises(LevelFormatError) as excinfo:
        tokenize("; A\n###\n#%#\n")
    err = excinfo.value
    assert err.char == "%"
    assert err.line == 3
    assert err.column == 2


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        tokenize("x")


@pytest.mark.parametrize(
    "separator",
    ["\x0c", "\x0b", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029", "\r"],
)
def test_control_characters_inside_row_are_rejected(separator: str) -> None:
    with pytest.raises(LevelFormatError) as excinfo:
        tokenize("; A\n#@" + separator + "$#\n")
    assert excinfo.value.char == separator
    assert (excinfo.value.line, excinfo.value.column) == (2, 3)


def test_title_keeps_unicode_line_separators() -> None:
    assert tokenize("; Level\x85One\n") == [Token(TokenKind.TEXT, "Level\x85One")]


def test_only_one_trailing_carriage_return_is_dropped() -> None:
    with pytest.raises(LevelFormatError):
        tokenize("#\r\r\n")


def test_line_of_spaces_is_a_floor_row() -> None:
    assert tokenize("   ") == [
        Token(TokenKind.EMPTY),
        Token(TokenKind.EMPTY),
        Token(TokenKind.EMPTY),
        Token(TokenKind.NEWLINE),
    ]
