"""src/scanurl/parser/__init__.py

URL parsing stages and entry points.
"""

from .query import parse_query
from .url_parser import UrlParser, parse, parse_strict

__all__ = ["UrlParser", "parse", "parse_strict", "parse_query"]
