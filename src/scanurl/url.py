"""src/scanurl/url.py

Parsed URL value object for Scanurl.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from scanurl.exceptions import ErrorCode, error_for_code

__all__ = ["ParseResult", "MIN_PORT", "MAX_PORT"]

MIN_PORT = 1
MAX_PORT = 65535

# Same tolerance as C atoi(): optional blanks and sign, then digits.
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class ParseResult:
    """
    Components of a parsed URL.

    Fields are empty strings when the component is absent. Whether a
    delimiter was present is tracked separately by the ``has_*`` flags, so
    "http://host/" (empty path) and "http://host" (no path) differ.

    Callers must check ``error_code`` (or ``is_valid``) before trusting any
    other field; failed results carry no component data.
    """

    # pylint: disable=too-many-instance-attributes
    scheme: str = ""
    user_name: str = ""
    password: str = ""
    host: str = ""
    port: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""
    parameters: Mapping[str, str] = field(default_factory=dict, hash=False)
    error_code: ErrorCode = ErrorCode.OK
    has_userinfo: bool = False
    has_port: bool = False
    has_path: bool = False
    has_query: bool = False
    has_fragment: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.parameters, MappingProxyType):
            object.__setattr__(
                self, "parameters", MappingProxyType(dict(self.parameters))
            )

    @classmethod
    def failure(cls, code: ErrorCode) -> "ParseResult":
        """Build a result that only reports an error code."""
        if code is ErrorCode.OK:
            raise ValueError("A failed result needs a non-OK error code")
        return cls(error_code=code)

    @property
    def is_valid(self) -> bool:
        """Whether the URL was parsed successfully."""
        return self.error_code is ErrorCode.OK

    @property
    def is_ipv6(self) -> bool:
        """Whether the host is a bracketed IP literal such as "[::1]"."""
        return self.host.startswith("[") and self.host.endswith("]")

    @property
    def hostname(self) -> str:
        """Host with IP literal brackets removed."""
        if self.is_ipv6:
            return self.host[1:-1]
        return self.host

    @property
    def userinfo(self) -> str:
        """The "user[:password]" part as written, empty when absent."""
        if not self.has_userinfo:
            return ""
        if self.password:
            return f"{self.user_name}:{self.password}"
        return self.user_name

    def get_port(self) -> Optional[int]:
        """
        Return the port as an integer.

        Conversion reads leading digits and treats anything else as 0.

        Returns:
            The port when the result is valid and the value lies in
            [1, 65535], otherwise None.
        """
        if not self.is_valid:
            return None

        port = _leading_int(self.port)
        if port < MIN_PORT or port > MAX_PORT:
            return None

        return port

    def raise_for_error(self) -> None:
        """
        Raise the exception matching error_code.

        Raises:
            UrlParseError: Subclass matching error_code, if not OK.
        """
        if not self.is_valid:
            raise error_for_code(self.error_code)()

    def geturl(self) -> str:
        """Reassemble the URL from its components."""
        if not self.is_valid:
            return ""

        parts = [self.scheme, "://"]
        if self.has_userinfo:
            parts.append(self.userinfo)
            parts.append("@")
        parts.append(self.host)
        if self.has_port:
            parts.append(f":{self.port}")
        if self.has_path:
            parts.append(f"/{self.path}")
        if self.has_query:
            parts.append(f"?{self.query}")
        if self.has_fragment:
            parts.append(f"#{self.fragment}")

        return "".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view, with the error code given by name."""
        return {
            "scheme": self.scheme,
            "user_name": self.user_name,
            "password": self.password,
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "query": self.query,
            "fragment": self.fragment,
            "parameters": dict(self.parameters),
            "error_code": self.error_code.value,
        }
