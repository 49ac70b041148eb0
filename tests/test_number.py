import pytest

from tomlscan.errors import ParserError, UnallowedCharacter, UnallowedCharacterReason
from tomlscan.number import parse_number, parse_number_with_buffer
from tomlscan.reader import StringSupplier


def test_integer():
    result = parse_number("4", StringSupplier("2"))
    assert result == 42
    assert isinstance(result, int)


def test_negative_integer_stops_at_space():
    supplier = StringSupplier("17 # note")
    assert parse_number("-", supplier) == -17
    assert supplier.last == " "


def test_positive_float():
    result = parse_number("+", StringSupplier("3.5"))
    assert result == 3.5
    assert isinstance(result, float)


def test_leading_dot():
    assert parse_number(".", StringSupplier("5")) == 0.5


@pytest.mark.parametrize("number", [0, 7, -3, 123456789, -9223372036854775808, 9223372036854775807])
def test_integer_round_trip(number):
    text = str(number)
    assert parse_number(text[0], StringSupplier(text[1:] + "\n")) == number


@pytest.mark.parametrize("number", [1.25, -0.75, 1000.5, 3.0])
def test_float_round_trip(number):
    text = repr(number)
    assert parse_number(text[0], StringSupplier(text[1:])) == number


def test_with_buffer():
    assert parse_number_with_buffer(StringSupplier("12"), StringSupplier("34#")) == 1234


def test_with_plain_string_buffer():
    assert parse_number_with_buffer("9.", StringSupplier("25")) == 9.25


def test_second_dot():
    with pytest.raises(ParserError) as info:
        parse_number("1", StringSupplier(".2.3"))
    source = info.value.source
    assert isinstance(source, UnallowedCharacter)
    assert source.char == "."
    assert source.reason is UnallowedCharacterReason.IN_TYPE_NUMBER


def test_sign_after_first_character():
    with pytest.raises(ParserError) as info:
        parse_number("1", StringSupplier("-2"))
    assert info.value.source.char == "-"


def test_non_ascii_digit():
    with pytest.raises(ParserError) as info:
        parse_number("1", StringSupplier("\u0661"))
    assert isinstance(info.value.source, UnallowedCharacter)


@pytest.mark.parametrize("first,rest", [("+", ""), ("-", " "), (".", ""), ("-", ".")])
def test_unparsable(first, rest):
    with pytest.raises(ParserError) as info:
        parse_number(first, StringSupplier(rest))
    assert isinstance(info.value.source, ValueError)


def test_too_large():
    with pytest.raises(ParserError) as info:
        parse_number("9", StringSupplier("223372036854775808"))
    assert isinstance(info.value.source, ValueError)


def test_too_small():
    with pytest.raises(ParserError):
        parse_number("-", StringSupplier("9223372036854775809"))