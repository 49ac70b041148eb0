"""Parsing of dates, times and date-times."""

from __future__ import annotations

import datetime as _dt
from collections.abc import Iterable
from itertools import chain
from typing import Optional, TypeVar, Union

from tomlscan.chars import is_comment_start, is_whitespace
from tomlscan.errors import (
    EmptyValue,
    ExpectedSequence,
    ParserError,
    UnallowedCharacter,
    UnallowedCharacterReason,
    UnexpectedEnd,
    UnknownFormatError,
)
from tomlscan.reader import Supplier

_T = TypeVar("_T")
_DAY_SECONDS = 86_400


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _ends_value(c: str) -> bool:
    return is_whitespace(c) or is_comment_start(c)


def _read_digits(
    supplier: Supplier, length: int, suffixes: str, expect_end_of_line: bool
) -> Optional[int]:
    """Read exactly ``length`` digits, stopping early only at a suffix or the value's end."""
    digits = ""
    while (c := supplier.get()) is not None:
        if c in suffixes or (expect_end_of_line and _ends_value(c)):
            break
        if length == 0 or not _is_digit(c):
            return None
        digits += c
        length -= 1
    if length != 0 or not digits:
        return None
    return int(digits)


def _require(value: Optional[_T], sequence: str) -> _T:
    if value is None:
        raise ParserError(ExpectedSequence(sequence))
    return value


def _build(kind, *args):
    try:
        return kind(*args)
    except ValueError:
        return None


def _read_fraction(supplier: Supplier) -> int:
    """Read fractional seconds after a dot; return them as microseconds."""
    fraction = ""
    while (c := supplier.get()) is not None:
        if _is_digit(c):
            fraction += c
        elif _ends_value(c) or c in "Z-+":
            break
        else:
            raise ParserError(ExpectedSequence(".ffffff"))
    if not fraction:
        raise ParserError(ValueError("invalid float literal"))
    return int(fraction[:6].ljust(6, "0"))


def _read_offset(supplier: Supplier) -> Optional[_dt.timedelta]:
    sign = supplier.last
    if sign == "Z":
        return _dt.timedelta(0)
    if sign not in ("-", "+"):
        return None
    hours = _require(_read_digits(supplier, 2, ":", False), "HH")
    minutes = _require(_read_digits(supplier, 2, "", True), "mm")
    shift = (hours * 60 + minutes) * 60
    if sign == "-":
        shift = -shift
    if abs(shift) >= _DAY_SECONDS:
        return None
    return _dt.timedelta(seconds=shift)


def _format_offset(offset: _dt.timedelta) -> str:
    seconds = int(offset.total_seconds())
    sign = "-" if seconds < 0 else "+"
    hours, rest = divmod(abs(seconds), 3600)
    return f"{sign}{hours:02d}:{rest // 60:02d}"


def parse_datetime_with_buffer(
    buffer: Iterable[str], supplier: Supplier
) -> Union[_dt.date, _dt.time, _dt.datetime]:
    """Parse a date, time or date-time whose first characters are in ``buffer``.

    An offset is added to the local date-time and the result has no time zone.
    """
    leading = ""
    is_date = False
    is_time = False
    for c in chain(buffer, supplier):
        if is_whitespace(c):
            raise ParserError(UnexpectedEnd())
        if c == "-":
            is_date = True
            break
        if c == ":":
            is_time = True
            break
        if not _is_digit(c):
            raise ParserError(
                UnallowedCharacter(c, UnallowedCharacterReason.IN_TYPE_DATE_TIME)
            )
        leading += c
    else:
        raise ParserError(UnexpectedEnd())

    if (is_date and len(leading) != 4) or (is_time and len(leading) != 2):
        raise ParserError(UnexpectedEnd())

    date = None
    if is_date:
        year = int(leading)
        month = _require(_read_digits(supplier, 2, "-", False), "MM")
        day = _require(_read_digits(supplier, 2, "T", True), "DD")
        leading = ""
        is_time = supplier.last == "T"
        date = _build(_dt.date, year, month, day)

    if not is_time and date is not None and supplier.last == " ":
        c = supplier.get()
        if c is not None:
            if _is_digit(c):
                leading += c
            elif not _ends_value(c):
                raise ParserError(
                    UnallowedCharacter(c, UnallowedCharacterReason.IN_TYPE_DATE)
                )
        if leading:
            while True:
                if len(leading) > 2:
                    raise ParserError(ExpectedSequence("HH"))
                c = supplier.get()
                if c is None:
                    raise ParserError(UnexpectedEnd())
                if _is_digit(c):
                    leading += c
                elif c == ":":
                    is_time = True
                    break
                else:
                    raise ParserError(
                        UnallowedCharacter(c, UnallowedCharacterReason.IN_TYPE_TIME)
                    )

    time = None
    offset = None
    if is_time:
        if leading:
            hour = int(leading)
        else:
            hour = _require(_read_digits(supplier, 2, ":", False), "hh:")
        minute = _require(_read_digits(supplier, 2, ":", False), "mm:")
        second = _require(_read_digits(supplier, 2, "Z-+.", True), "ss")
        microsecond = _read_fraction(supplier) if supplier.last == "." else 0
        time = _build(_dt.time, hour, minute, second, microsecond)
        offset = _read_offset(supplier)

    if date is not None and time is None and offset is None:
        return date
    if date is None and time is not None and offset is None:
        return time
    if date is not None and time is not None:
        combined = _dt.datetime.combine(date, time)
        if offset is None:
            return combined
        try:
            return combined + offset
        except OverflowError:
            raise ParserError(
                UnknownFormatError(
                    f"failed to construct datetime from {date} {time} "
                    f"{_format_offset(offset)}"
                )
            ) from None
    raise ParserError(EmptyValue())


def parse_datetime(
    first: str, supplier: Supplier
) -> Union[_dt.date, _dt.time, _dt.datetime]:
    """Parse a date, time or date-time starting with ``first``."""
    return parse_datetime_with_buffer(first, supplier)