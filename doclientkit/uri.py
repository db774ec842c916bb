"""An immutable, protocol-independent URI value."""

from __future__ import annotations

import dataclasses

from doclientkit.encoding import decode
from doclientkit.uri_parse import UriComponents, UriError, parse_components

__all__ = ["Uri", "validate"]


def validate(uri_string: str) -> bool:
    """Return True if the string is a valid URI or relative reference."""
    try:
        parse_components(uri_string)
    except UriError:
        return False
    return True


def _decoded_or_raw(text: str) -> str:
    try:
        return decode(text)
    except UriError:
        return text


class Uri:
    """A parsed, canonicalized URI.

    Accepts both absolute URIs and relative references. Querying an empty URI
    yields empty strings and false predicates.
    """

    __slots__ = ("_text", "_components")

    def __init__(self, text: str | None = None) -> None:
        if text is None:
            self._components = UriComponents()
            self._text = "/"
            return
        self._components = parse_components(text)
        self._text = self._components.join()

    @classmethod
    def from_components(cls, components: UriComponents) -> Uri:
        """Build a URI from separate components, raising UriError if it is invalid."""
        parts = dataclasses.replace(components)
        text = parts.join()
        if not validate(text):
            raise UriError(f"provided uri is invalid: {text}")
        instance = cls.__new__(cls)
        instance._components = parts
        instance._text = text
        return instance

    @property
    def components(self) -> UriComponents:
        """A copy of the URI's components."""
        return dataclasses.replace(self._components)

    @property
    def scheme(self) -> str:
        return self._components.scheme

    @property
    def user_info(self) -> str:
        return self._components.user_info

    @property
    def host(self) -> str:
        return self._components.host

    @property
    def port(self) -> int:
        return self._components.port

    @property
    def path(self) -> str:
        return self._components.path

    @property
    def query(self) -> str:
        return self._components.query

    @property
    def fragment(self) -> str:
        return self._components.fragment

    def authority(self) -> Uri:
        """A URI with this one's scheme, user info, host and port only."""
        return Uri.from_components(
            UriComponents(
                scheme=self.scheme,
                host=self.host,
                user_info=self.user_info,
                port=self.port,
            )
        )

    def resource(self) -> Uri:
        """A URI with this one's path, query and fragment only."""
        return Uri.from_components(
            UriComponents(path=self.path, query=self.query, fragment=self.fragment)
        )

    def is_empty(self) -> bool:
        return self._text in ("", "/")

    def is_host_loopback(self) -> bool:
        host = self.host
        return not self.is_empty() and (
            host == "localhost" or (len(host) > 4 and host.startswith("127."))
        )

    def is_host_wildcard(self) -> bool:
        return not self.is_empty() and self.host in ("*", "+")

    def is_host_portable(self) -> bool:
        return not (self.is_empty() or self.is_host_loopback() or self.is_host_wildcard())

    def is_port_default(self) -> bool:
        return not self.is_empty() and self.port == 0

    def is_authority(self) -> bool:
        return (
            not self.is_empty()
            and self.is_path_empty()
            and not self.query
            and not self.fragment
        )

    def has_same_authority(self, other: Uri) -> bool:
        return not self.is_empty() and self.authority() == other.authority()

    def is_path_empty(self) -> bool:
        return self.path in ("", "/")

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Uri({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uri):
            return NotImplemented
        if self.is_empty() and other.is_empty():
            return True
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.scheme == other.scheme
            and decode(self.user_info) == decode(other.user_info)
            and decode(self.host) == decode(other.host)
            and self.port == other.port
            and decode(self.path) == decode(other.path)
            and decode(self.query) == decode(other.query)
            and decode(self.fragment) == decode(other.fragment)
        )

    def __lt__(self, other: Uri) -> bool:
        if not isinstance(other, Uri):
            return NotImplemented
        return self._text < other._text

    def __hash__(self) -> int:
        if self.is_empty():
            return hash(("", "/"))
        return hash(
            (
                self.scheme,
                _decoded_or_raw(self.user_info),
                _decoded_or_raw(self.host),
                self.port,
                _decoded_or_raw(self.path),
                _decoded_or_raw(self.query),
                _decoded_or_raw(self.fragment),
            )
        )