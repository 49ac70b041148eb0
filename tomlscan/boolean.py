"""Parsing of boolean values."""

from __future__ import annotations

from tomlscan.chars import is_comment_start, is_linebreak, is_whitespace
from tomlscan.errors import ParserError, UnallowedCharacter, UnallowedCharacterReason
from tomlscan.reader import Supplier

_BOOLEAN_CHARS = frozenset("truefals")


def parse_boolean(first: str, supplier: Supplier) -> bool:
    """Parse ``true`` or ``false`` starting with ``first``."""
    text = first
    while (c := supplier.get()) is not None:
        if is_linebreak(c) or is_whitespace(c) or is_comment_start(c):
            break
        if c not in _BOOLEAN_CHARS:
            raise ParserError(
                UnallowedCharacter(c, UnallowedCharacterReason.IN_TYPE_BOOLEAN)
            )
        text += c
    if text == "true":
        return True
    if text == "false":
        return False
    raise ParserError(ValueError("provided string was not `true` or `false`"))