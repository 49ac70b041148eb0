"""Character suppliers over streams and strings."""

from __future__ import annotations

import codecs
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import IO, Optional, Union

from tomlscan.chars import NEWLINE_CR, NEWLINE_CRLF, NEWLINE_LF_STR, is_linebreak

_CHUNK_SIZE = 8192
_LINE_ENDS = (NEWLINE_CRLF, NEWLINE_LF_STR)


class Supplier(ABC):
    """A source of characters read one at a time, remembering the last one."""

    last: Optional[str] = None

    @abstractmethod
    def get(self) -> Optional[str]:
        """Return the next character, or None once the input is exhausted."""

    def __iter__(self) -> Iterator[str]:
        while (c := self.get()) is not None:
            yield c


def _characters(stream: IO) -> Iterator[str]:
    """Yield characters from a text or UTF-8 binary stream, stopping at invalid data."""
    decoder = codecs.getincrementaldecoder("utf-8")()
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        if isinstance(chunk, str):
            yield from chunk
            continue
        try:
            text = decoder.decode(chunk)
        except UnicodeDecodeError as exc:
            yield from bytes(exc.object[: exc.start]).decode("utf-8")
            return
        yield from text
    try:
        yield from decoder.decode(b"", final=True)
    except UnicodeDecodeError:
        return


class Reader:
    """Wraps a stream; the iterators it hands out share its position."""

    def __init__(self, stream: IO[Union[str, bytes]]) -> None:
        self._chars = _characters(stream)

    def iter_with_debug(self) -> DebuggingIterator:
        """Return a supplier that tracks the current line and position."""
        return DebuggingIterator(self._chars)

    def iter(self) -> LineIterator:
        """Return a plain supplier."""
        return LineIterator(self._chars)


class DebuggingIterator(Supplier):
    """Supplier that folds CR LF into LF and keeps the current line for diagnostics."""

    def __init__(self, chars: Iterator[str]) -> None:
        self._chars = chars
        self._ended = False
        self._line = ""
        self._line_end = ""
        self._row = 0
        self._column = 0
        self.last = None

    @property
    def needle(self) -> tuple[int, int]:
        """The (line, column) of the last character read."""
        return self._row, self._column

    @property
    def ended(self) -> bool:
        return self._ended

    @property
    def at_line_end(self) -> bool:
        return self._line_end in _LINE_ENDS

    def current_line(self) -> str:
        """Read to the end of the current line and return it."""
        while not (self.at_line_end or self._ended):
            self.get()
        return self._line

    def _new_line(self) -> None:
        self._line = ""
        self._column = 0
        self._row += 1
        self._line_end = ""

    def get(self) -> Optional[str]:
        if self._ended:
            return None
        while True:
            c = next(self._chars, None)
            if c is None:
                self._ended = True
                self.last = None
                return None
            if is_linebreak(c) and not self.at_line_end:
                self._line_end += c
                if c == NEWLINE_CR:
                    continue
            else:
                if self.at_line_end:
                    self._new_line()
                self._line += c
                self._column += 1
            self.last = c
            return c


class LineIterator(Supplier):
    """Supplier that folds CR LF into LF."""

    def __init__(self, chars: Iterator[str]) -> None:
        self._chars = chars
        self._ended = False
        self._line_end = ""
        self.last = None

    @property
    def ended(self) -> bool:
        return self._ended

    @property
    def at_line_end(self) -> bool:
        return self._line_end in _LINE_ENDS

    def get(self) -> Optional[str]:
        if self._ended:
            return None
        while True:
            c = next(self._chars, None)
            if c is None:
                self._ended = True
                self.last = None
                return None
            if is_linebreak(c) and not self.at_line_end:
                self._line_end += c
                if c == NEWLINE_CR:
                    continue
            elif self.at_line_end:
                self._line_end = ""
            self.last = c
            return c


class StringSupplier(Supplier):
    """Supplier over the characters of a string."""

    def __init__(self, text: str) -> None:
        self._chars = iter(text)
        self.last = None

    def get(self) -> Optional[str]:
        self.last = next(self._chars, None)
        return self.last