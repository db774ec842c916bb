"""Percent-encoding, decoding and splitting of URI components."""

from __future__ import annotations

import enum
from typing import Callable

from doclientkit.uri_parse import (
    UriError,
    is_fragment_character,
    is_path_character,
    is_query_character,
    is_reserved,
    is_unreserved,
    is_user_info_character,
)

__all__ = [
    "Component",
    "encode_uri",
    "encode_data_string",
    "encode_query",
    "decode",
    "split_path",
    "split_query",
]

_HEX = "0123456789ABCDEF"


class Component(enum.Enum):
    """The URI component a string is encoded for."""

    USER_INFO = "user_info"
    HOST = "host"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"
    FULL_URI = "full_uri"


def _encode(raw: str, should_encode: Callable[[int], bool]) -> str:
    out: list[str] = []
    for byte in raw.encode("utf-8", "surrogateescape"):
        if should_encode(byte):
            out.append(f"%{_HEX[byte >> 4]}{_HEX[byte & 0xF]}")
        else:
            out.append(chr(byte))
    return "".join(out)


def _plus_or_percent(byte: int) -> bool:
    return byte in (ord("%"), ord("+"))


_COMPONENT_RULES: dict[Component, Callable[[int], bool]] = {
    Component.USER_INFO: lambda b: not is_user_info_character(chr(b)) or _plus_or_percent(b),
    Component.HOST: lambda b: b > 127,
    Component.PATH: lambda b: not is_path_character(chr(b)) or _plus_or_percent(b),
    Component.QUERY: lambda b: not is_query_character(chr(b)) or _plus_or_percent(b),
    Component.FRAGMENT: lambda b: not is_fragment_character(chr(b)) or _plus_or_percent(b),
    Component.FULL_URI: lambda b: not is_unreserved(chr(b)) and not is_reserved(chr(b)),
}

_QUERY_DELIMS = frozenset(map(ord, "&;=%+"))


def encode_uri(raw: str, component: Component = Component.FULL_URI) -> str:
    """Encode a string for the given URI component.

    For a full URI every character outside the unreserved and reserved sets is
    escaped. Components other than the host also escape ``%`` and ``+``.
    """
    return _encode(raw, _COMPONENT_RULES[component])


def encode_data_string(data: str) -> str:
    """Escape every character that is not RFC 3986 unreserved."""
    return _encode(data, lambda b: not is_unreserved(chr(b)))


def encode_query(raw: str) -> str:
    """Encode one side of a query key/value pair, escaping its delimiters too."""
    return _encode(raw, lambda b: b in _QUERY_DELIMS or not is_query_character(chr(b)))


def _hex_value(c: str) -> int:
    if c.isascii() and c in _HEX_DIGITS:
        return int(c, 16)
    raise UriError("Invalid hexadecimal digit")


_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode(encoded: str) -> str:
    """Decode a percent-encoded, ASCII-only string."""
    raw = bytearray()
    chars = iter(encoded)
    missing = "Invalid URI string, two hexadecimal digits must follow '%'"
    for c in chars:
        if c == "%":
            high = next(chars, None)
            if high is None:
                raise UriError(missing)
            value = _hex_value(high) << 4
            low = next(chars, None)
            if low is None:
                raise UriError(missing)
            raw.append(value + _hex_value(low))
        elif not c.isascii():
            raise UriError("Invalid encoded URI string, must be entirely ascii")
        else:
            raw.append(ord(c))
    return raw.decode("utf-8", "surrogateescape")


def split_path(path: str) -> list[str]:
    """Split a path into its non-empty segments."""
    return [segment for segment in path.split("/") if segment]


def split_query(query: str) -> dict[str, str]:
    """Split a query into key/value pairs, ordered by key.

    Pairs are separated by ``&``; ``;`` serves as the separator only where no
    further ``&`` follows. Pairs without ``=`` are skipped.
    """
    results: dict[str, str] = {}
    start: int | None = 0
    while start is not None:
        sep_index = query.find("&", start)
        if sep_index == -1:
            sep_index = query.find(";", start)
        if sep_index == -1:
            pair = query[start:]
            start = None
        else:
            pair = query[start:sep_index]
            start = sep_index + 1

        key, equals, value = pair.partition("=")
        if equals:
            results[key] = value
    return dict(sorted(results.items()))