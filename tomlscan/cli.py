"""Command that scans a TOML file and prints its entries."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from tomlscan.errors import EmptyValue, ParserError
from tomlscan.parsers import parse_entry
from tomlscan.reader import Reader

DEFAULT_INPUT = "input.toml"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every entry of the file; explain each error in place.

    Returns 0 when every entry parsed, 1 otherwise.
    """
    parser = argparse.ArgumentParser(
        prog="tomlscan", description="Scan a TOML file and print its entries."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    try:
        stream = open(args.path, "rb")
    except OSError as err:
        print(f"cannot open {args.path}: {err.strerror}", file=sys.stderr)
        return 1

    failed = False
    with stream:
        supplier = Reader(stream).iter_with_debug()
        while not supplier.ended:
            try:
                entry = parse_entry(supplier)
            except ParserError as err:
                if isinstance(err.source, EmptyValue) and supplier.ended:
                    break
                failed = True
                err.explain_with_debug(supplier)
                continue
            print(entry)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())