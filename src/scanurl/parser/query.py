"""src/scanurl/parser/query.py

Query string decomposition into parameters.
"""

from typing import Dict, Optional

from scanurl.options import DEFAULT_OPTIONS, ParserOptions
from scanurl.utils.encoding import decode_value


def parse_query(query: str, options: Optional[ParserOptions] = None) -> Dict[str, str]:
    """
    Split a query string into a key -> value dictionary.

    - Segments are separated by '&'. An empty segment between two '&' gives
      an entry with empty key and value; the empty tail after a trailing '&'
      (or an empty query) gives nothing.
    - Key and value are split on the first '='; no '=' means empty value.
    - Values are decoded ('+' and '%XY'), keys are kept as written.
    - Duplicate keys: the last one wins.

    Raises:
        InvalidUrlEncodingError: If a value holds a malformed '%' escape.
    """
    options = options or DEFAULT_OPTIONS
    parameters: Dict[str, str] = {}

    segments = query.split("&")
    if segments[-1] == "":
        segments.pop()

    for segment in segments:
        key, _, value = segment.partition("=")
        if options.decode_parameters:
            value = decode_value(value, options.encoding, options.errors)
        parameters[key] = value

    return parameters
