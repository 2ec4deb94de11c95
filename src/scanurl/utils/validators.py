"""utils/validators.py

Validation utilities for Scanurl.
"""

_SCHEME_PUNCTUATION = frozenset("+-.")


def is_valid_scheme(name: str) -> bool:
    """
    Check scheme characters: ASCII letters, '+', '-' and '.' only.

    An empty name passes; callers decide whether an empty scheme is allowed.
    """
    return all(
        (char.isascii() and char.isalpha()) or char in _SCHEME_PUNCTUATION
        for char in name
    )


def is_hex_pair(text: str) -> bool:
    """Check that text is exactly two hexadecimal digits."""
    return len(text) == 2 and all(char in "0123456789abcdefABCDEF" for char in text)


def validate_url(url: str) -> bool:
    """Simple URL validation: True if the URL parses without error."""
    # pylint: disable=import-outside-toplevel
    from scanurl.parser import parse

    return parse(url).is_valid
