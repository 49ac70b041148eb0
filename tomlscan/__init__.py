"""Character-level reading of TOML key/value entries: keys, strings, numbers, booleans and dates."""

__version__ = "0.1.0"