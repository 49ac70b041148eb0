"""Parsing of integer and float values."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain
from typing import Union

from tomlscan.chars import is_comment_start, is_linebreak, is_whitespace
from tomlscan.errors import ParserError, UnallowedCharacter, UnallowedCharacterReason
from tomlscan.reader import Supplier

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def parse_number_with_buffer(
    buffer: Iterable[str], supplier: Supplier
) -> Union[int, float]:
    """Parse a number whose first characters were already read into ``buffer``."""
    dotted = False
    signed = False
    text = ""
    for c in chain(buffer, supplier):
        if is_linebreak(c) or is_whitespace(c) or is_comment_start(c):
            break
        if c == "." and not dotted:
            dotted = True
        elif not _is_digit(c) and not (c in "+-" and not signed):
            raise ParserError(
                UnallowedCharacter(c, UnallowedCharacterReason.IN_TYPE_NUMBER)
            )
        signed = True
        text += c

    if dotted:
        try:
            return float(text)
        except ValueError:
            raise ParserError(ValueError("invalid float literal")) from None

    if not text:
        raise ParserError(ValueError("cannot parse integer from empty string"))
    try:
        value = int(text)
    except ValueError:
        raise ParserError(ValueError("invalid digit found in string")) from None
    if value > _INT_MAX:
        raise ParserError(ValueError("number too large to fit in target type"))
    if value < _INT_MIN:
        raise ParserError(ValueError("number too small to fit in target type"))
    return value


def parse_number(first: str, supplier: Supplier) -> Union[int, float]:
    """Parse a number starting with ``first``."""
    return parse_number_with_buffer(first, supplier)