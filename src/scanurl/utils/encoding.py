"""utils/encoding.py

Percent and plus decoding of query values.
"""

from scanurl.exceptions import InvalidUrlEncodingError
from scanurl.utils.validators import is_hex_pair


def _flush(pending: bytearray, encoding: str, errors: str, value: str) -> str:
    try:
        return pending.decode(encoding, errors)
    except UnicodeDecodeError as exc:
        raise InvalidUrlEncodingError(
            f"Escaped bytes in {value!r} are not valid {encoding}: {exc.reason}"
        ) from exc


def decode_value(value: str, encoding: str = "utf-8", errors: str = "replace") -> str:
    """
    Decode a query value: '+' becomes a space and '%XY' the byte 0xXY.

    Characters that are not escapes pass through unchanged. Runs of escaped
    bytes are decoded together so multi-byte sequences survive.

    Raises:
        InvalidUrlEncodingError: If a '%' is not followed by two hex digits,
            or the escaped bytes cannot be decoded with errors="strict".
    """
    if "%" not in value and "+" not in value:
        return value

    parts = []
    pending = bytearray()
    i = 0

    while i < len(value):
        char = value[i]
        if char == "%":
            pair = value[i + 1 : i + 3]
            if not is_hex_pair(pair):
                raise InvalidUrlEncodingError(
                    f"Invalid URL encoding {value[i:i + 3]!r} in {value!r}",
                    position=i,
                )
            pending.append(int(pair, 16))
            i += 3
            continue

        if pending:
            parts.append(_flush(pending, encoding, errors, value))
            pending.clear()
        parts.append(" " if char == "+" else char)
        i += 1

    if pending:
        parts.append(_flush(pending, encoding, errors, value))

    return "".join(parts)
