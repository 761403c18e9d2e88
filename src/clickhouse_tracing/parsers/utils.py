"""
Utility functions for connection-string parsers.
"""

from typing import Dict
import re

from ..exceptions import ConnectionStringError

_EMPTY_SEGMENT = re.compile(r"\s*;")
_PAIR = re.compile(
    r"""\s*(?P<key>[^=;]*?)\s*=\s*"""
    r"""(?P<value>"(?:[^"]|"")*"|'(?:[^']|'')*'|[^;]*?)\s*(?:;|\Z)"""
)


def unquote(value: str) -> str:
    """Strip one pair of matching quotes around a value and collapse doubled quotes inside it."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        quote = value[0]
        return value[1:-1].replace(quote * 2, quote)
    return value


def split_pairs(connection_string: str) -> Dict[str, str]:
    """
    Split ``key=value`` pairs separated by semicolons.

    Keys are lower-cased and stripped; empty segments are skipped. Quoted
    values may contain semicolons, and a doubled quote inside them stands for
    one quote character. When a key appears more than once the last value wins.

    Args:
        connection_string: Raw connection string

    Returns:
        Dictionary of lower-cased keys to unquoted values

    Raises:
        ConnectionStringError: If a segment has no ``=`` or an empty key
    """
    pairs: Dict[str, str] = {}
    position = 0
    index = 0
    while position < len(connection_string):
        empty = _EMPTY_SEGMENT.match(connection_string, position)
        if empty:
            position = empty.end()
            index += 1
            continue
        if connection_string[position:].isspace():
            break
        match = _PAIR.match(connection_string, position)
        if match is None or not match.group("key"):
            raise ConnectionStringError(f"Malformed connection string segment at position {index}")
        pairs[match.group("key").lower()] = unquote(match.group("value"))
        position = match.end()
        index += 1
    return pairs
