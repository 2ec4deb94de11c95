"""src/scanurl/parser/url_parser.py

Single-pass URL parser (RFC 1738 / RFC 3986 component split).
"""

import logging
from typing import Optional

from scanurl.exceptions import UrlParseError, UrlTooLongError
from scanurl.options import DEFAULT_OPTIONS, ParserOptions
from scanurl.parser.authority import read_authority
from scanurl.parser.path import read_fragment, read_path, read_query
from scanurl.parser.query import parse_query
from scanurl.parser.scheme import read_scheme
from scanurl.url import ParseResult

__all__ = ["UrlParser", "parse", "parse_strict"]

logger = logging.getLogger(__name__)


class UrlParser:
    """
    URL parser.

    Walks the input once, left to right:

    - scheme, up to ':'
    - authority, "//[user[:password]@]host[:port]"
    - path, query and fragment

    Each stage resumes where the previous one stopped and fails fast.
    Instances hold only their options and can be shared between threads.
    """

    __slots__ = ("options",)

    def __init__(self, options: Optional[ParserOptions] = None):
        self.options = options or DEFAULT_OPTIONS

    def parse(self, url: str) -> ParseResult:
        """
        Parse a URL, reporting malformed input through ``error_code``.

        Raises:
            TypeError: If url is not a string.
            UrlTooLongError: If url exceeds options.max_length.
        """
        try:
            return self.parse_strict(url)
        except UrlParseError as exc:
            return ParseResult.failure(exc.code)

    def parse_strict(self, url: str) -> ParseResult:
        """
        Parse a URL, raising on malformed input.

        Raises:
            UrlParseError: Subclass matching the first problem found.
            TypeError: If url is not a string.
            UrlTooLongError: If url exceeds options.max_length.
        """
        if not isinstance(url, str):
            raise TypeError(f"URL must be str, not {type(url).__name__}")

        max_length = self.options.max_length
        if max_length is not None and len(url) > max_length:
            raise UrlTooLongError(len(url), max_length)

        try:
            return self._scan(url)
        except UrlParseError as exc:
            logger.debug(
                "Failed to parse %r: %s at position %d (%s)",
                url,
                exc.code.value,
                exc.position,
                exc,
            )
            raise

    def _scan(self, url: str) -> ParseResult:
        scheme, pos = read_scheme(url, self.options.allow_empty_scheme)
        authority, pos = read_authority(url, pos)

        if pos == len(url):
            return ParseResult(scheme=scheme, **authority._asdict())

        path, pos = read_path(url, pos)
        query, has_query, pos = read_query(url, pos)
        fragment, has_fragment, pos = read_fragment(url, pos)

        parameters = parse_query(query, self.options) if has_query else {}

        return ParseResult(
            scheme=scheme,
            path=path,
            query=query,
            fragment=fragment,
            parameters=parameters,
            has_path=True,
            has_query=has_query,
            has_fragment=has_fragment,
            **authority._asdict(),
        )


_default_parser = UrlParser()


def _parser_for(options: Optional[ParserOptions]) -> UrlParser:
    if options is None:
        return _default_parser
    return UrlParser(options)


def parse(url: str, options: Optional[ParserOptions] = None) -> ParseResult:
    """Parse a URL; check ``error_code`` on the result before using it."""
    return _parser_for(options).parse(url)


def parse_strict(url: str, options: Optional[ParserOptions] = None) -> ParseResult:
    """Parse a URL, raising a UrlParseError subclass if it is malformed."""
    return _parser_for(options).parse_strict(url)
