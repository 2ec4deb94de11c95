"""src/scanurl/parser/scheme.py

Scheme stage: "<scheme>:".
"""

from typing import Tuple

from scanurl.exceptions import InvalidSchemeNameError, NoUrlCharacterError
from scanurl.utils.validators import is_valid_scheme


def find_scheme_boundary(text: str) -> Tuple[int, int]:
    """
    Locate the end of the scheme.

    Returns:
        Tuple of (scheme_end, resume) where text[:scheme_end] is the
        candidate scheme and resume is where the authority stage starts.

    Raises:
        NoUrlCharacterError: If text holds neither ':' nor '/'.
    """
    colon = text.find(":")
    slash = text.find("/")

    if colon == -1 and slash == -1:
        raise NoUrlCharacterError(position=len(text))

    if slash != -1 and (colon == -1 or slash < colon):
        # Legacy boundary: without a ':' ahead of the first '/', the
        # character just before that '/' is taken as the terminator and
        # skipped. The reason for this rule is unknown; it is kept as is.
        # A leading '/' leaves no room for a scheme at all.
        return max(slash - 1, 0), slash

    return colon, colon + 1


def read_scheme(text: str, allow_empty: bool = False) -> Tuple[str, int]:
    """
    Read and validate the scheme at the start of text.

    Returns:
        Tuple of (lowercased_scheme, resume_position).

    Raises:
        NoUrlCharacterError: If the scheme cannot be delimited.
        InvalidSchemeNameError: If the scheme is empty (unless allowed) or
            holds characters other than ASCII letters, '+', '-' and '.'.
    """
    end, resume = find_scheme_boundary(text)
    scheme = text[:end]

    if not scheme and not allow_empty:
        raise InvalidSchemeNameError("Empty scheme name", position=0)

    if not is_valid_scheme(scheme):
        raise InvalidSchemeNameError(f"Invalid scheme name: {scheme!r}", position=0)

    return scheme.lower(), resume
