import datetime as dt

import pytest

from tomlscan.errors import (
    EmptyValue,
    ExpectedCharacter,
    ParserError,
    UnallowedCharacter,
    UnallowedCharacterReason,
    UnexpectedEnd,
)
from tomlscan.parsers import parse_entry, parse_key_segment, parse_value
from tomlscan.reader import StringSupplier
from tomlscan.values import Entry


def _value(text):
    return parse_value(StringSupplier(text))


def test_integer_value():
    assert _value(" 42\n") == 42


def test_negative_integer():
    assert _value(" -7") == -7


def test_float_value():
    assert _value(" 3.14") == pytest.approx(3.14)


def test_boolean_value():
    assert _value(" true") is True
    assert _value(" false # off") is False


def test_string_value_with_comment():
    assert _value(' "hi" # comment') == "hi"


def test_date_value():
    assert _value(" 1979-05-27") == dt.date(1979, 5, 27)


def test_time_value():
    assert _value(" 07:32:00") == dt.time(7, 32)


def test_datetime_value():
    assert _value(" 1979-05-27T07:32:00") == dt.datetime(1979, 5, 27, 7, 32)


def test_empty_value():
    with pytest.raises(ParserError) as exc:
        _value("   \n")
    assert isinstance(exc.value.source, EmptyValue)


def test_unknown_value_start():
    with pytest.raises(ParserError) as exc:
        _value(" x")
    assert isinstance(exc.value.source, EmptyValue)


def test_trailing_garbage_after_value():
    with pytest.raises(ParserError) as exc:
        _value(' "a" x')
    assert isinstance(exc.value.source, ExpectedCharacter)
    assert exc.value.source.char == "#"


def test_key_segment_followed_by_equals():
    assert parse_key_segment(None, StringSupplier("name = ")) == ("name", True)


def test_key_segment_followed_by_dot():
    assert parse_key_segment(None, StringSupplier("a.b")) == ("a", False)


def test_key_segment_with_given_first_char():
    assert parse_key_segment("k", StringSupplier("ey=")) == ("key", True)


def test_quoted_key_segment():
    assert parse_key_segment(None, StringSupplier('"quoted key" =')) == (
        "quoted key",
        True,
    )


def test_empty_key_segment():
    with pytest.raises(ParserError) as exc:
        parse_key_segment(None, StringSupplier("= "))
    assert isinstance(exc.value.source, EmptyValue)


def test_unallowed_key_character():
    with pytest.raises(ParserError) as exc:
        parse_key_segment(None, StringSupplier("a$ ="))
    source = exc.value.source
    assert isinstance(source, UnallowedCharacter)
    assert source.char == "$"
    assert source.reason is UnallowedCharacterReason.IN_KEY


def test_key_without_end():
    with pytest.raises(ParserError) as exc:
        parse_key_segment(None, StringSupplier("abc"))
    assert isinstance(exc.value.source, UnexpectedEnd)


def test_entry_with_string():
    assert parse_entry(StringSupplier('title = "TOML"\n')) == Entry("title", "TOML")


def test_entry_after_comments_and_blank_lines():
    supplier = StringSupplier("# comment\n\nport = 8080\n")
    assert parse_entry(supplier) == Entry("port", 8080)


def test_dotted_entry():
    assert parse_entry(StringSupplier("a.b = true")) == Entry("a", {"b": True})


def test_deeply_dotted_entry():
    assert parse_entry(StringSupplier("a.b.c = 1")) == Entry("a", {"b": {"c": 1}})


def test_consecutive_entries():
    supplier = StringSupplier('a = "x"\nb = "y"\n')
    assert parse_entry(supplier) == Entry("a", "x")
    assert parse_entry(supplier) == Entry("b", "y")


def test_entry_on_empty_input():
    with pytest.raises(ParserError) as exc:
        parse_entry(StringSupplier(""))
    assert isinstance(exc.value.source, EmptyValue)