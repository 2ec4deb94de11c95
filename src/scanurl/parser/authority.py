"""src/scanurl/parser/authority.py

Authority stage: "//[user[:password]@]host[:port]".
"""

from typing import NamedTuple, Tuple

from scanurl.exceptions import NoAtSignError, NoDoubleSlashError
from scanurl.parser.cursor import peek, scan_until

_USER_STOPS = frozenset(":@")
_PASSWORD_STOPS = frozenset("@")
_HOST_STOPS = frozenset(":/")
_PORT_STOPS = frozenset("/")
_USERINFO_LOOKAHEAD = frozenset("@/")


class Authority(NamedTuple):
    """Pieces of the authority component, as scanned."""

    user_name: str = ""
    password: str = ""
    host: str = ""
    port: str = ""
    has_userinfo: bool = False
    has_port: bool = False


def skip_double_slash(text: str, pos: int) -> int:
    """Consume the "//" that opens the authority."""
    for offset in range(2):
        if peek(text, pos + offset) != "/":
            raise NoDoubleSlashError(position=pos + offset)
    return pos + 2


def has_userinfo(text: str, pos: int) -> bool:
    """Lookahead: is there an '@' before the next '/' (or the end)?"""
    end = scan_until(text, pos, _USERINFO_LOOKAHEAD)
    return peek(text, end) == "@"


def read_userinfo(text: str, pos: int) -> Tuple[str, str, int]:
    """
    Read "user[:password]@".

    Returns:
        Tuple of (user_name, password, position after '@').

    Raises:
        NoAtSignError: If the userinfo is not terminated by '@'.
    """
    end = scan_until(text, pos, _USER_STOPS)
    user_name = text[pos:end]
    password = ""
    pos = end

    if peek(text, pos) == ":":
        pos += 1
        end = scan_until(text, pos, _PASSWORD_STOPS)
        password = text[pos:end]
        pos = end

    if peek(text, pos) != "@":
        raise NoAtSignError(position=pos)

    return user_name, password, pos + 1


def read_host(text: str, pos: int) -> Tuple[str, int]:
    """
    Read the host, keeping IP literal brackets.

    A host opening with '[' runs through the next ']' (or to the end when
    unclosed). Any other host runs to ':', '/' or the end.
    """
    if peek(text, pos) == "[":
        end = text.find("]", pos)
        end = len(text) if end == -1 else end + 1
    else:
        end = scan_until(text, pos, _HOST_STOPS)

    return text[pos:end], end


def read_port(text: str, pos: int) -> Tuple[str, int]:
    """Read the raw port after ':' (no numeric check), up to '/' or the end."""
    end = scan_until(text, pos, _PORT_STOPS)
    return text[pos:end], end


def read_authority(text: str, pos: int) -> Tuple[Authority, int]:
    """
    Run the authority stage from pos, just after the scheme terminator.

    Returns:
        Tuple of (Authority, resume_position).

    Raises:
        NoDoubleSlashError: If the authority does not start with "//".
        NoAtSignError: If the userinfo is not terminated by '@'.
    """
    pos = skip_double_slash(text, pos)

    user_name = password = port = ""
    with_userinfo = has_userinfo(text, pos)
    if with_userinfo:
        user_name, password, pos = read_userinfo(text, pos)

    host, pos = read_host(text, pos)

    with_port = peek(text, pos) == ":"
    if with_port:
        port, pos = read_port(text, pos + 1)

    authority = Authority(
        user_name=user_name,
        password=password,
        host=host,
        port=port,
        has_userinfo=with_userinfo,
        has_port=with_port,
    )
    return authority, pos
