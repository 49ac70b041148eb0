"""Character classes, shared constants and small scanning helpers."""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING, Optional

from tomlscan.errors import (
    ExpectedCharacter,
    ParserError,
    UnallowedCharacter,
    UnallowedCharacterReason,
)

if TYPE_CHECKING:
    from tomlscan.reader import Supplier

COMMENT_START = "#"

WHITESPACE_TAB = "\x0a"
WHITESPACE_SPACE = " "

ESCAPE_START = "\\"

DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"
DOUBLE_QUOTE_THRICE = '"""'
SINGLE_QUOTE_THRICE = "'''"

NEWLINE_LF = "\n"
NEWLINE_CR = "\r"
NEWLINE_CRLF = "\r\n"
NEWLINE_LF_STR = "\n"

SPECIAL_CTRL_CHARACTERS = frozenset(
    [chr(code) for code in range(0x00, 0x09)]
    + [chr(code) for code in range(0x0A, 0x20)]
    + ["\x7f"]
)

UNICODE_LOW_ESCAPE_START = "\\u"
UNICODE_HIGH_ESCAPE_START = "\\U"

ESCAPE_SEQUENCE_TO_CHAR = {
    "\\b": "\u0008",
    "\\t": "\u0009",
    "\\n": "\u000a",
    "\\f": "\u000c",
    "\\r": "\u000d",
    '\\"': "\u0022",
    "\\\\": "\u005c",
}

LINE_ENDING_BACKSLASH = "\\\n"


def is_linebreak(c: str) -> bool:
    return c in (NEWLINE_LF, NEWLINE_CR)


def is_special_control(c: str) -> bool:
    return c in SPECIAL_CTRL_CHARACTERS


def is_whitespace(c: str) -> bool:
    return c in (WHITESPACE_SPACE, WHITESPACE_TAB)


def is_comment_start(c: str) -> bool:
    return c == COMMENT_START


def is_control(c: str) -> bool:
    """True for characters of the Unicode control category (Cc)."""
    return unicodedata.category(c) == "Cc"


def skip_whitespaces(supplier: Supplier, stop_at_linebreak: bool) -> Optional[str]:
    """Return the first non-whitespace character, or None at the end.

    With ``stop_at_linebreak`` a line break also ends the search with None.
    """
    while (c := supplier.get()) is not None:
        if stop_at_linebreak and is_linebreak(c):
            return None
        if not is_whitespace(c):
            return c
    return None


def check_comment_or_whitespaces(supplier: Supplier, is_comment: bool) -> None:
    """Consume the rest of a line, which may hold only whitespace and a comment.

    Raises ParserError if anything else is found.
    """
    c = skip_whitespaces(supplier, True)
    if c is None:
        return
    while True:
        if not is_comment:
            if not is_comment_start(c):
                raise ParserError(ExpectedCharacter(COMMENT_START))
            is_comment = True
        if is_control(c) and not is_special_control(c):
            raise ParserError(
                UnallowedCharacter(c, UnallowedCharacterReason.IN_COMMENT)
            )
        following = supplier.get()
        if following is None or is_linebreak(following):
            return
        c = following


class Counter:
    """A small counter that stops at a maximum."""

    def __init__(self, maximum: int) -> None:
        self.value = 0
        self.maximum = maximum

    def inc(self) -> Counter:
        """Increase by one unless capped; returns the counter."""
        if not self.is_capped():
            self.value += 1
        return self

    def is_capped(self) -> bool:
        return self.value >= self.maximum

    def is_zero(self) -> bool:
        return self.value == 0