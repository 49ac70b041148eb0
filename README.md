# tomlscan

`tomlscan` reads TOML-style `key = value` entries one character at a time.
It understands bare, quoted and dotted keys; basic and literal strings,
single- and multi-line, with escape sequences; booleans; decimal integers
and floats; and dates, times and date-times. Malformed input raises a
`ParserError` that says what went wrong and, when reading from a file, can
point at the offending column.

It has no dependencies outside the standard library and needs Python 3.10
or later.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
tomlscan
```

reads `input.toml` from the current directory. Pass a path to read another
file:

```
tomlscan settings.toml
```

Each entry is printed as `key=value`; a dotted key prints its first segment
with the rest as nested braces, e.g. `server={name: alpha}`. When an entry
fails to parse, the command prints the line, a caret under the column where
reading stopped, and the error, then carries on with the next entry. The exit
status is 0 when every entry parsed and 1 otherwise (including when the file
cannot be opened).

## Library use

Parsers take a *supplier* (`tomlscan.reader.Supplier`): an object that hands
out one character at a time through `get()` and remembers the last one in
`last`. `StringSupplier` wraps text in memory; `Reader` wraps an open text or
UTF-8 binary stream and gives either a plain `LineIterator`
(`Reader.iter()`) or a `DebuggingIterator` (`Reader.iter_with_debug()`)
that tracks the current line and its `needle` position for error reports.
Both fold `\r\n` into `\n`.

```python
from tomlscan.reader import StringSupplier
from tomlscan.parsers import parse_entry, parse_value
from tomlscan.values import format_value
from tomlscan.errors import ParserError

value = parse_value(StringSupplier("true # enabled\n"))
print(format_value(value))        # true

entry = parse_entry(StringSupplier('server.name = "alpha"\n'))
print(entry.key, entry.value)     # server {'name': 'alpha'}
print(entry)                      # server={name: alpha}

try:
    parse_value(StringSupplier('"unterminated\n'))
except ParserError as error:
    error.explain()               # Failed to parse value: expected character `"`
```

`tomlscan.parsers` offers `parse_entry`, `parse_value` and
`parse_key_segment`. The individual value parsers live in their own
modules: `parse_boolean` (`tomlscan.boolean`), `parse_number` and
`parse_number_with_buffer` (`tomlscan.number`), `parse_datetime` and
`parse_datetime_with_buffer` (`tomlscan.datetimes`), and `parse_string`,
`StringType` and `to_escaped_char` (`tomlscan.strings`). Each takes the
first character already read and the supplier that holds the rest.

Values come back as plain Python objects: `bool`, `int`, `float`, `str`,
`datetime.date`, `datetime.time`, `datetime.datetime`, or a `dict` for the
remainder of a dotted key. `tomlscan.values.format_value` renders any of
them as text, and `Entry` pairs a key with its value.

Some details of the value parsers:

- Integers must fit in a signed 64-bit range.
- Fractional seconds are kept to microseconds.
- A date-time with an offset (`Z`, `+hh:mm`, `-hh:mm`) has the offset added
  to it and is returned without a time zone.

## Errors

Every failure is a `ParserError` wrapping its cause in `source`: one of the
format errors in `tomlscan.errors` (`UnallowedCharacter`,
`ExpectedCharacter`, `ExpectedSequence`, `UnknownEscapeSequence`,
`EmptyValue`, `UnexpectedEnd`, `UnknownFormatError`, all subclasses of
`FormatError`), or a `ValueError` for a number or boolean that does not
read as one. `ParserError.explain()` prints the message;
`ParserError.explain_with_debug(iterator)` prints the current line, a caret
under the failing column, and the message.

## What it does not do

`tomlscan` reads entries one at a time; it does not build a whole document.
Table headers (`[section]`, `[[array]]`), arrays, inline tables,
hexadecimal, octal and binary integers, digit separators (`1_000`),
exponents, and `inf`/`nan` are not recognised. Only the space and the line
feed count as whitespace between tokens; a tab character there is an error.