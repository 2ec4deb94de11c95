"""src/scanurl/exceptions.py

Scanurl Exceptions hierarchy.
"""

from enum import Enum
from typing import Dict, Type

__all__ = [
    "ErrorCode",
    "ScanurlError",
    "UrlParseError",
    "NoUrlCharacterError",
    "InvalidSchemeNameError",
    "NoDoubleSlashError",
    "NoAtSignError",
    "NoSlashError",
    "InvalidUrlEncodingError",
    "UrlTooLongError",
    "error_for_code",
]


class ErrorCode(Enum):
    """Outcome of a parse. Only ``OK`` marks a usable result."""

    OK = "Ok"
    NO_URL_CHARACTER = "NoUrlCharacter"
    INVALID_SCHEME_NAME = "InvalidSchemeName"
    NO_DOUBLE_SLASH = "NoDoubleSlash"
    NO_AT_SIGN = "NoAtSign"
    NO_SLASH = "NoSlash"
    INVALID_URL_ENCODING = "InvalidUrlEncoding"


class ScanurlError(Exception):
    """Base exception for all Scanurl errors."""


class UrlParseError(ScanurlError):
    """
    Base exception for malformed URLs.

    Attributes:
        code: The ErrorCode describing the failure.
        position: Index in the input where the scan stopped.
    """

    code: ErrorCode = ErrorCode.OK
    default_message = "Malformed URL"

    def __init__(self, message: str = "", position: int = 0):
        super().__init__(message or self.default_message)
        self.position = position


class NoUrlCharacterError(UrlParseError):
    """Neither ':' nor '/' found, the scheme cannot be delimited."""

    code = ErrorCode.NO_URL_CHARACTER
    default_message = "No ':' or '/' found in URL"


class InvalidSchemeNameError(UrlParseError):
    """Scheme is empty or contains a character outside [A-Za-z+.-]."""

    code = ErrorCode.INVALID_SCHEME_NAME
    default_message = "Invalid scheme name"


class NoDoubleSlashError(UrlParseError):
    """Authority does not begin with '//'."""

    code = ErrorCode.NO_DOUBLE_SLASH
    default_message = "Expected '//' after scheme"


class NoAtSignError(UrlParseError):
    """Userinfo detected but not terminated by '@'."""

    code = ErrorCode.NO_AT_SIGN
    default_message = "Userinfo is not terminated by '@'"


class NoSlashError(UrlParseError):
    """Input left after the authority does not start with '/'."""

    code = ErrorCode.NO_SLASH
    default_message = "Expected '/' after authority"


class InvalidUrlEncodingError(UrlParseError):
    """A '%' escape in a query value is not followed by two hex digits."""

    code = ErrorCode.INVALID_URL_ENCODING
    default_message = "Invalid URL encoding"


class UrlTooLongError(ScanurlError, ValueError):
    """Input exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"URL length {length} exceeds maximum of {max_length} characters"
        )
        self.length = length
        self.max_length = max_length


_ERRORS_BY_CODE: Dict[ErrorCode, Type[UrlParseError]] = {
    cls.code: cls
    for cls in (
        NoUrlCharacterError,
        InvalidSchemeNameError,
        NoDoubleSlashError,
        NoAtSignError,
        NoSlashError,
        InvalidUrlEncodingError,
    )
}


def error_for_code(code: ErrorCode) -> Type[UrlParseError]:
    """
    Return the exception class matching an error code.

    Raises:
        ValueError: If code is ErrorCode.OK.
    """
    try:
        return _ERRORS_BY_CODE[code]
    except KeyError:
        raise ValueError(f"{code!r} does not describe a failure") from None
