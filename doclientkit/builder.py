"""Incremental construction of URIs."""

from __future__ import annotations

import dataclasses
import re

from doclientkit.encoding import Component, encode_query, encode_uri
from doclientkit.uri import Uri, validate
from doclientkit.uri_parse import UriComponents

__all__ = ["UriBuilder"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_PORT_PATTERN = re.compile(r"\s*([+-]?\d+)")


def _parse_port(text: str) -> int:
    match = _PORT_PATTERN.match(text)
    if match is None:
        raise ValueError(
            "invalid port argument, must be non empty string containing integer value"
        )
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(
            "invalid port argument, must be non empty string containing integer value"
        )
    return value


class UriBuilder:
    """Builds a URI piece by piece; every setter returns the builder for chaining."""

    __slots__ = ("_parts",)

    def __init__(self, uri: Uri | None = None) -> None:
        self._parts = uri.components if uri is not None else UriComponents()

    @property
    def scheme(self) -> str:
        return self._parts.scheme

    @property
    def user_info(self) -> str:
        return self._parts.user_info

    @property
    def host(self) -> str:
        return self._parts.host

    @property
    def port(self) -> int:
        return self._parts.port

    @property
    def path(self) -> str:
        return self._parts.path

    @property
    def query(self) -> str:
        return self._parts.query

    @property
    def fragment(self) -> str:
        return self._parts.fragment

    def set_scheme(self, scheme: str) -> UriBuilder:
        self._parts.scheme = scheme
        return self

    def set_user_info(self, user_info: str, encode: bool = False) -> UriBuilder:
        self._parts.user_info = (
            encode_uri(user_info, Component.USER_INFO) if encode else user_info
        )
        return self

    def set_host(self, host: str, encode: bool = False) -> UriBuilder:
        self._parts.host = encode_uri(host, Component.HOST) if encode else host
        return self

    def set_port(self, port: int | str) -> UriBuilder:
        """Set the port from an integer or from a string holding one.

        Raises ValueError if a string does not start with an integer.
        """
        self._parts.port = _parse_port(port) if isinstance(port, str) else int(port)
        return self

    def set_path(self, path: str, encode: bool = False) -> UriBuilder:
        self._parts.path = encode_uri(path, Component.PATH) if encode else path
        return self

    def set_query(self, query: str, encode: bool = False) -> UriBuilder:
        self._parts.query = encode_uri(query, Component.QUERY) if encode else query
        return self

    def set_fragment(self, fragment: str, encode: bool = False) -> UriBuilder:
        self._parts.fragment = (
            encode_uri(fragment, Component.FRAGMENT) if encode else fragment
        )
        return self

    def clear(self) -> None:
        """Reset every component to that of an empty URI."""
        self._parts = UriComponents()

    def append_path(self, path: str, encode: bool = False) -> UriBuilder:
        """Append a path, keeping exactly one '/' between the two parts."""
        if not path or path == "/":
            return self
        current = self._parts.path
        if current in ("", "/"):
            current = "" if path.startswith("/") else "/"
        elif current.endswith("/") and path.startswith("/"):
            current = current[:-1]
        elif not current.endswith("/") and not path.startswith("/"):
            current += "/"
        self._parts.path = current + (encode_uri(path, Component.PATH) if encode else path)
        return self

    def append_path_raw(self, path: str, encode: bool = False) -> UriBuilder:
        """Append a path after a '/' separator, without removing duplicate slashes."""
        if not path:
            return self
        current = self._parts.path
        if current != "/":
            current += "/"
        self._parts.path = current + (encode_uri(path, Component.PATH) if encode else path)
        return self

    def append_query(self, query: str, encode: bool = False) -> UriBuilder:
        """Append a query, keeping exactly one '&' between the two parts."""
        if not query:
            return self
        current = self._parts.query
        if current:
            if current.endswith("&") and query.startswith("&"):
                current = current[:-1]
            elif not current.endswith("&") and not query.startswith("&"):
                current += "&"
        self._parts.query = current + (
            encode_uri(query, Component.QUERY) if encode else query
        )
        return self

    def append_query_param(self, name: str, value: object, encode: bool = True) -> UriBuilder:
        """Append a ``name=value`` pair to the query, encoding both sides by default."""
        text = str(value)
        if encode:
            pair = f"{encode_query(name)}={encode_query(text)}"
        else:
            pair = f"{name}={text}"
        return self.append_query(pair, False)

    def append(self, relative_uri: Uri) -> UriBuilder:
        """Append the path, query and fragment of a relative URI."""
        self.append_path(relative_uri.path)
        self.append_query(relative_uri.query)
        self.set_fragment(self.fragment + relative_uri.fragment)
        return self

    def to_string(self) -> str:
        """The combined URI string; raises UriError if it is invalid."""
        return str(self.to_uri())

    def to_uri(self) -> Uri:
        """The combined URI; raises UriError if it is invalid."""
        return Uri.from_components(self._parts)

    def is_valid(self) -> bool:
        """Whether the components combine into a valid URI."""
        return validate(dataclasses.replace(self._parts).join())

    def __str__(self) -> str:
        return self.to_string()