import io

import pytest

from tomlscan.errors import (
    EmptyValue,
    ExpectedCharacter,
    ExpectedSequence,
    FormatError,
    ParserError,
    UnallowedCharacter,
    UnallowedCharacterReason,
    UnexpectedEnd,
    UnknownEscapeSequence,
    UnknownFormatError,
)
from tomlscan.reader import Reader


@pytest.mark.parametrize(
    "error, message",
    [
        (EmptyValue(), "empty value"),
        (UnexpectedEnd(), "unexpected end of file"),
        (UnknownEscapeSequence(), "unknown escape sequence"),
        (ExpectedCharacter("#"), "expected character `#`"),
        (ExpectedSequence("MM"), "expected `MM`"),
        (UnknownFormatError("boom"), "unknown error: boom"),
        (
            UnallowedCharacter("x", UnallowedCharacterReason.IN_KEY),
            "unexpected character `x` in key",
        ),
    ],
)
def test_format_error_messages(error, message):
    assert str(error) == message
    assert isinstance(error, FormatError)


@pytest.mark.parametrize(
    "reason, text",
    [
        (UnallowedCharacterReason.IN_TYPE_NUMBER, "in a number"),
        (UnallowedCharacterReason.IN_COMMENT, "in a comment"),
        (UnallowedCharacterReason.IN_TYPE_DATE_TIME, "in a date-time value"),
        (UnallowedCharacterReason.IN_UNICODE_SEQUENCE, "in a unicode escape sequence"),
    ],
)
def test_unallowed_character_reason_text(reason, text):
    error = UnallowedCharacter("?", reason)
    assert str(error) == f"unexpected character `?` {text}"
    assert error.reason is reason
    assert error.char == "?"


def test_parser_error_wraps_format_error():
    source = EmptyValue()
    error = ParserError(source)
    assert str(error) == "Failed to parse value: empty value"
    assert error.source is source


def test_parser_error_wraps_value_error():
    source = ValueError("bad digits")
    error = ParserError(source)
    assert str(error) == "Failed to parse value: bad digits"
    assert error.__cause__ is source


def test_parser_error_keeps_sequence_of_source():
    error = ParserError(ExpectedSequence("DD"))
    assert str(error) == "Failed to parse value: expected `DD`"
    assert error.source.sequence == "DD"


def test_explain_prints_message(capsys):
    error = ParserError(UnexpectedEnd())
    error.explain()
    assert capsys.readouterr().out == str(error) + "\n"


def test_explain_with_debug_points_at_position(capsys):
    iterator = Reader(io.StringIO("key = value\nnext")).iter_with_debug()
    for _ in range(3):
        iterator.get()
    error = ParserError(EmptyValue())
    error.explain_with_debug(iterator)
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["key = value", "  ^", str(error)]