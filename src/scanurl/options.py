"""src/scanurl/options.py

Parser configuration.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ParserOptions:
    """
    Parser configuration.

    Attributes:
        allow_empty_scheme: Accept "://host" style input with an empty scheme.
        decode_parameters: Percent/plus decode query parameter values.
        encoding: Codec used to turn percent-decoded bytes into text.
        errors: Error handler passed to the codec.
        max_length: Reject inputs longer than this many characters.
    """

    allow_empty_scheme: bool = False
    decode_parameters: bool = True
    encoding: str = "utf-8"
    errors: str = "replace"
    max_length: Optional[int] = None

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "ParserOptions":
        """Create options from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise TypeError(f"Unknown parser options: {', '.join(unknown)}")
        return cls(**dict(values))


DEFAULT_OPTIONS = ParserOptions()
