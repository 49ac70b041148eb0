"""Parsing of values, keys and key/value entries."""

from __future__ import annotations

from typing import Optional

from tomlscan.boolean import parse_boolean
from tomlscan.chars import (
    check_comment_or_whitespaces,
    is_comment_start,
    is_linebreak,
    is_whitespace,
    skip_whitespaces,
)
from tomlscan.datetimes import parse_datetime_with_buffer
from tomlscan.errors import (
    EmptyValue,
    ParserError,
    UnallowedCharacter,
    UnallowedCharacterReason,
    UnexpectedEnd,
)
from tomlscan.number import parse_number, parse_number_with_buffer
from tomlscan.reader import Supplier
from tomlscan.strings import StringType, parse_string
from tomlscan.values import Entry, Value


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _read_leading_digits(first: str, supplier: Supplier) -> tuple[str, bool]:
    """Read enough of a value starting with a digit to tell numbers from dates.

    Returns the characters kept and whether the value is a date or time.
    """
    buffer = first
    length = 1
    while (c := supplier.get()) is not None:
        length += 1
        if _is_digit(c):
            buffer += c
        elif (length == 3 and c == ":") or (length == 5 and c == "-"):
            return buffer + c, True
        elif c == ".":
            return buffer + c, False
        else:
            return buffer, False
        if length > 4:
            return buffer, False
    return buffer, False


def parse_value(supplier: Supplier) -> Value:
    """Parse the value of an entry and the rest of its line."""
    c = skip_whitespaces(supplier, True)
    if c is None:
        raise ParserError(EmptyValue())

    result: Value
    if c in "\"'":
        result = parse_string(c, supplier)
    elif c in "tf":
        result = parse_boolean(c, supplier)
    elif c in "+-.":
        result = parse_number(c, supplier)
    elif _is_digit(c):
        buffer, is_datetime = _read_leading_digits(c, supplier)
        if is_datetime:
            result = parse_datetime_with_buffer(buffer, supplier)
        else:
            result = parse_number_with_buffer(buffer, supplier)
    else:
        raise ParserError(EmptyValue())

    last = supplier.last
    if last is not None and not is_linebreak(last):
        check_comment_or_whitespaces(supplier, is_comment_start(last))
    return result


def parse_key_segment(first: Optional[str], supplier: Supplier) -> tuple[str, bool]:
    """Parse one dotted part of a key.

    Returns the segment and True when it was followed by ``=``, False for ``.``.
    """
    c = first if first is not None else skip_whitespaces(supplier, False)
    if c is None:
        raise ParserError(EmptyValue())

    if c in "\"'":
        kind = StringType.BASIC if c == '"' else StringType.LITERAL
        following = supplier.get()
        if following is None:
            raise ParserError(UnexpectedEnd())
        key = kind.parse(following, supplier)
    else:
        key = ""
        while True:
            if (c.isascii() and c.isalnum()) or c in "_-":
                key += c
            elif c in ".=":
                if not key:
                    raise ParserError(EmptyValue())
                return key, c == "="
            elif is_whitespace(c) and not is_linebreak(c):
                break
            else:
                raise ParserError(
                    UnallowedCharacter(c, UnallowedCharacterReason.IN_KEY)
                )
            following = supplier.get()
            if following is None:
                raise ParserError(UnexpectedEnd())
            c = following

    c = skip_whitespaces(supplier, True)
    if c is None:
        raise ParserError(EmptyValue())
    if c in "=.":
        return key, c == "="
    raise ParserError(UnallowedCharacter(c, UnallowedCharacterReason.IN_KEY))


def parse_entry(supplier: Supplier) -> Entry:
    """Parse the next ``key = value`` entry, skipping blank and comment lines.

    A dotted key yields nested dictionaries under its first segment.
    """
    while True:
        c = skip_whitespaces(supplier, False)
        if c is None:
            raise ParserError(EmptyValue())
        if is_comment_start(c):
            check_comment_or_whitespaces(supplier, True)
            continue
        break

    key, done = parse_key_segment(c, supplier)
    if done:
        return Entry(key, parse_value(supplier))

    nested: dict = {}
    inner = nested
    while True:
        segment, done = parse_key_segment(None, supplier)
        if done:
            inner[segment] = parse_value(supplier)
            break
        inner = inner.setdefault(segment, {})
    return Entry(key, nested)