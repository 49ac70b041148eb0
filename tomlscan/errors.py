"""Error types raised while scanning TOML input."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tomlscan.reader import DebuggingIterator


class UnallowedCharacterReason(Enum):
    """Where an unallowed character was found; the value describes the place."""

    IN_COMMENT = "in a comment"
    IN_TYPE_NUMBER = "in a number"
    IN_TYPE_BOOLEAN = "in a boolean"
    IN_TYPE_BASIC_STRING = "in a basic string"
    IN_TYPE_MULTILINE_BASIC_STRING = "in a multi-line basic string"
    IN_TYPE_MULTILINE_LITERAL_STRING = "in a multi-line literal string"
    IN_TYPE_LITERAL_STRING = "in a literal string"
    IN_UNICODE_SEQUENCE = "in a unicode escape sequence"
    IN_TYPE_DATE = "in a date value"
    IN_TYPE_TIME = "in a time value"
    IN_TYPE_DATE_TIME = "in a date-time value"
    IN_KEY = "in key"


class FormatError(Exception):
    """Base class for malformed input."""


class UnallowedCharacter(FormatError):
    """A character that may not appear at its position."""

    def __init__(self, char: str, reason: UnallowedCharacterReason) -> None:
        super().__init__(char, reason)
        self.char = char
        self.reason = reason

    def __str__(self) -> str:
        return f"unexpected character `{self.char}` {self.reason.value}"


class ExpectedCharacter(FormatError):
    """A specific character was required but not found."""

    def __init__(self, char: str) -> None:
        super().__init__(char)
        self.char = char

    def __str__(self) -> str:
        return f"expected character `{self.char}`"


class ExpectedSequence(FormatError):
    """A specific sequence of characters was required but not found."""

    def __init__(self, sequence: str) -> None:
        super().__init__(sequence)
        self.sequence = sequence

    def __str__(self) -> str:
        return f"expected `{self.sequence}`"


class UnknownEscapeSequence(FormatError):
    """An escape sequence that has no meaning."""

    def __str__(self) -> str:
        return "unknown escape sequence"


class EmptyValue(FormatError):
    """A value or key was missing."""

    def __str__(self) -> str:
        return "empty value"


class UnexpectedEnd(FormatError):
    """The input ended too early."""

    def __str__(self) -> str:
        return "unexpected end of file"


class UnknownFormatError(FormatError):
    """Any other format problem, described by a message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"unknown error: {self.message}"


class ParserError(Exception):
    """Raised when a value cannot be parsed; wraps the underlying cause."""

    def __init__(self, source: BaseException) -> None:
        super().__init__(source)
        self.source = source
        self.__cause__ = source

    def __str__(self) -> str:
        return f"Failed to parse value: {self.source}"

    def explain_with_debug(self, iterator: DebuggingIterator) -> None:
        """Print the offending line, a caret under the position, and the error."""
        _, column = iterator.needle
        line = iterator.current_line()
        print(line.rstrip())
        print(" " * max(column - 1, 0) + "^")
        print(self)

    def explain(self) -> None:
        """Print the error."""
        print(self)