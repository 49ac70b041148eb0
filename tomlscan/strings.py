"""Parsing of basic, literal and multi-line strings."""

from __future__ import annotations

import string as _string
from enum import Enum
from typing import Optional

from tomlscan.chars import (
    DOUBLE_QUOTE,
    ESCAPE_SEQUENCE_TO_CHAR,
    ESCAPE_START,
    LINE_ENDING_BACKSLASH,
    NEWLINE_CR,
    NEWLINE_LF,
    SINGLE_QUOTE,
    UNICODE_HIGH_ESCAPE_START,
    UNICODE_LOW_ESCAPE_START,
    WHITESPACE_TAB,
    is_control,
    is_linebreak,
    is_special_control,
    skip_whitespaces,
)
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
)
from tomlscan.reader import Supplier

_HEX_DIGITS = frozenset(_string.hexdigits)
_UNICODE_ESCAPE_WIDTHS = {UNICODE_LOW_ESCAPE_START: 4, UNICODE_HIGH_ESCAPE_START: 6}
_MULTILINE_ALLOWED_CONTROLS = (NEWLINE_CR, NEWLINE_LF, WHITESPACE_TAB)


def to_escaped_char(sequence: str) -> Optional[str]:
    """Return the character an escape sequence such as ``\\n`` stands for."""
    return ESCAPE_SEQUENCE_TO_CHAR.get(sequence)


def _codepoint_to_char(digits: str) -> Optional[str]:
    if not digits or any(c not in _HEX_DIGITS for c in digits):
        return None
    codepoint = int(digits, 16)
    if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        return None
    return chr(codepoint)


def _read_escape_sequence(supplier: Supplier, multiline: bool) -> str:
    """Read what follows a backslash and return the character it stands for.

    Raises a FormatError when the sequence is invalid.
    """
    first = supplier.get()
    if first is None:
        raise UnknownEscapeSequence()
    sequence = ESCAPE_START + first
    width = _UNICODE_ESCAPE_WIDTHS.get(sequence)

    if width is None:
        replacement = to_escaped_char(sequence)
        if replacement is not None:
            return replacement
        if multiline and sequence == LINE_ENDING_BACKSLASH:
            following = skip_whitespaces(supplier, False)
            if following is None:
                raise UnexpectedEnd()
            return following
        raise UnknownEscapeSequence()

    digits = ""
    while (c := supplier.get()) is not None:
        digits += c
        if len(digits) == width:
            char = _codepoint_to_char(digits)
            if char is None:
                raise UnknownEscapeSequence()
            return char
        if c not in _HEX_DIGITS:
            raise UnallowedCharacter(c, UnallowedCharacterReason.IN_UNICODE_SEQUENCE)
    raise UnknownEscapeSequence()


class StringType(Enum):
    """The four kinds of TOML string."""

    LITERAL = "literal"
    BASIC = "basic"
    LITERAL_MULTILINE = "literal multi-line"
    BASIC_MULTILINE = "basic multi-line"

    @property
    def is_basic(self) -> bool:
        return self in (StringType.BASIC, StringType.BASIC_MULTILINE)

    @property
    def is_multiline(self) -> bool:
        return self in (StringType.BASIC_MULTILINE, StringType.LITERAL_MULTILINE)

    @property
    def quote(self) -> str:
        return DOUBLE_QUOTE if self.is_basic else SINGLE_QUOTE

    @property
    def quotes(self) -> str:
        return self.quote * 3 if self.is_multiline else self.quote

    @property
    def _reason(self) -> UnallowedCharacterReason:
        return {
            StringType.BASIC: UnallowedCharacterReason.IN_TYPE_BASIC_STRING,
            StringType.LITERAL: UnallowedCharacterReason.IN_TYPE_LITERAL_STRING,
            StringType.BASIC_MULTILINE: (
                UnallowedCharacterReason.IN_TYPE_MULTILINE_BASIC_STRING
            ),
            StringType.LITERAL_MULTILINE: (
                UnallowedCharacterReason.IN_TYPE_MULTILINE_LITERAL_STRING
            ),
        }[self]

    def to_multiline(self) -> StringType:
        """Return the multi-line kind with the same quoting."""
        if self is StringType.BASIC:
            return StringType.BASIC_MULTILINE
        if self is StringType.LITERAL:
            return StringType.LITERAL_MULTILINE
        return self

    def _is_forbidden(self, c: str, allowed: tuple[str, ...]) -> bool:
        if c in allowed:
            return False
        return is_special_control(c) if self.is_basic else is_control(c)

    def _escape(self, supplier: Supplier) -> str:
        try:
            return _read_escape_sequence(supplier, self.is_multiline)
        except UnexpectedEnd as err:
            if self.is_multiline:
                raise ParserError(ExpectedSequence(self.quotes)) from err
            raise ParserError(err) from err
        except FormatError as err:
            raise ParserError(err) from err

    def parse(self, first: str, supplier: Supplier) -> str:
        """Parse the string body that starts with ``first``, after the opening quotes."""
        if self.is_multiline:
            return self._parse_multiline(first, supplier)
        return self._parse_single_line(first, supplier)

    def _parse_single_line(self, first: str, supplier: Supplier) -> str:
        allowed = () if self.is_basic else (WHITESPACE_TAB,)
        value = []
        c: Optional[str] = first
        while c != self.quote:
            if self._is_forbidden(c, allowed):
                raise ParserError(UnallowedCharacter(c, self._reason))
            if self.is_basic and c == ESCAPE_START:
                c = self._escape(supplier)
            value.append(c)
            c = supplier.get()
            if c is None or is_linebreak(c):
                raise ParserError(ExpectedCharacter(self.quote))
        return "".join(value)

    def _next_or_fail(self, supplier: Supplier) -> str:
        c = supplier.get()
        if c is None:
            raise ParserError(ExpectedSequence(self.quotes))
        return c

    def _parse_multiline(self, first: str, supplier: Supplier) -> str:
        c = self._next_or_fail(supplier) if is_linebreak(first) else first
        value = []
        pending_quotes = 0
        while True:
            if c == self.quote:
                pending_quotes += 1
                if pending_quotes == 3:
                    return "".join(value)
            elif pending_quotes:
                value.append(self.quote * pending_quotes)
                pending_quotes = 0

            if self._is_forbidden(c, _MULTILINE_ALLOWED_CONTROLS):
                raise ParserError(UnallowedCharacter(c, self._reason))
            if self.is_basic and c == ESCAPE_START:
                c = self._escape(supplier)
            if not pending_quotes:
                value.append(c)
            c = self._next_or_fail(supplier)


def parse_string(first: str, supplier: Supplier) -> str:
    """Parse a string value whose opening quote ``first`` was already read."""
    kind = StringType.BASIC if first == DOUBLE_QUOTE else StringType.LITERAL
    quotes_seen = 0
    while True:
        c = supplier.get()
        if c is None:
            raise ParserError(EmptyValue())
        if quotes_seen == 2:
            return kind.to_multiline().parse(c, supplier)
        if c == kind.quote:
            quotes_seen += 1
        elif quotes_seen == 1:
            return ""
        else:
            return kind.parse(c, supplier)