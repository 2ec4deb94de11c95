"""src/scanurl/parser/path.py

Path, query and fragment stage: "/path[?query][#fragment]".
"""

from typing import Tuple

from scanurl.exceptions import NoSlashError
from scanurl.parser.cursor import peek, scan_until

_PATH_STOPS = frozenset("?#")
_QUERY_STOPS = frozenset("#")


def read_path(text: str, pos: int) -> Tuple[str, int]:
    """
    Read "/path" up to '?', '#' or the end. The leading '/' is not stored.

    Raises:
        NoSlashError: If the input at pos does not start with '/'.
    """
    if peek(text, pos) != "/":
        raise NoSlashError(f"Expected '/' at position {pos}", position=pos)

    pos += 1
    end = scan_until(text, pos, _PATH_STOPS)
    return text[pos:end], end


def read_query(text: str, pos: int) -> Tuple[str, bool, int]:
    """
    Read an optional "?query" up to '#' or the end.

    Returns:
        Tuple of (query, present, resume_position).
    """
    if peek(text, pos) != "?":
        return "", False, pos

    pos += 1
    end = scan_until(text, pos, _QUERY_STOPS)
    return text[pos:end], True, end


def read_fragment(text: str, pos: int) -> Tuple[str, bool, int]:
    """
    Read an optional "#fragment": everything left, no delimiters apply.

    Returns:
        Tuple of (fragment, present, resume_position).
    """
    if peek(text, pos) != "#":
        return "", False, pos

    return text[pos + 1 :], True, len(text)
