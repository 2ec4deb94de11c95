"""utils/serialization.py

Serialization utilities for Scanurl (URL text, JSON).
"""

import json

from scanurl.url import ParseResult


def to_url(result: ParseResult) -> str:
    """Reassemble a URL string from a parse result."""
    return result.geturl()


def to_json(result: ParseResult) -> str:
    """Serializes a parse result to a JSON string."""
    return json.dumps(result.to_dict())
