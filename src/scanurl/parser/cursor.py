"""src/scanurl/parser/cursor.py

Scanning primitives shared by the parser stages.

Every stage takes the full input and a start index and hands back the index
where the next stage resumes. The input itself is never sliced in place.
"""

from typing import AbstractSet


def peek(text: str, pos: int) -> str:
    """Character at pos, or "" at end of input."""
    return text[pos] if pos < len(text) else ""


def scan_until(text: str, pos: int, stops: AbstractSet[str]) -> int:
    """Index of the first character from pos that is in stops, else len(text)."""
    end = len(text)
    while pos < end and text[pos] not in stops:
        pos += 1
    return pos
