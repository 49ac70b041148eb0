"""Parsed values and entries, and their textual form."""

from __future__ import annotations

import datetime as _dt
import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

Number = Union[int, float]
DateTimeValue = Union[_dt.date, _dt.time, _dt.datetime]
Value = Union[bool, int, float, str, _dt.date, _dt.time, _dt.datetime, dict]


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_time(value: _dt.time) -> str:
    text = value.strftime("%H:%M:%S")
    micro = value.microsecond
    if micro == 0:
        return text
    if micro % 1000 == 0:
        return f"{text}.{micro // 1000:03d}"
    return f"{text}.{micro:06d}"


def format_value(value: Value) -> str:
    """Render a parsed value as text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, _dt.datetime):
        return f"{value.date().isoformat()} {_format_time(value.time())}"
    if isinstance(value, _dt.date):
        return value.isoformat()
    if isinstance(value, _dt.time):
        return _format_time(value)
    if isinstance(value, Mapping):
        inner = ", ".join(f"{key}: {format_value(item)}" for key, item in value.items())
        return "{" + inner + "}"
    raise TypeError(f"cannot format value of type {type(value).__name__}")


@dataclass(frozen=True)
class Entry:
    """A key together with its value."""

    key: str
    value: Value

    def __str__(self) -> str:
        return f"{self.key}={format_value(self.value)}"