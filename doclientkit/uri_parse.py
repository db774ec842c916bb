"""Character classes, component parsing and joining for URIs (RFC 3986)."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "UriError",
    "UriComponents",
    "to_lower_ascii",
    "is_unreserved",
    "is_gen_delim",
    "is_sub_delim",
    "is_reserved",
    "is_scheme_character",
    "is_user_info_character",
    "is_authority_character",
    "is_path_character",
    "is_query_character",
    "is_fragment_character",
    "parse_components",
]

_INT_MAX = 2**31 - 1

_GEN_DELIMS = frozenset(":/?#[]@")
_SUB_DELIMS = frozenset("!$&'()*+,;=")
_UNRESERVED_EXTRA = frozenset("-._~")
_SCHEME_EXTRA = frozenset("+-.")

_LOWER_TABLE = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class UriError(ValueError):
    """Raised for errors in parsing, encoding or decoding URIs."""


def to_lower_ascii(text: str) -> str:
    """Lower-case the ASCII letters A-Z only, leaving everything else as is."""
    return text.translate(_LOWER_TABLE)


def _is_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


def is_unreserved(c: str) -> bool:
    """ASCII letters, digits and ``-._~``."""
    return _is_alnum(c) or c in _UNRESERVED_EXTRA


def is_gen_delim(c: str) -> bool:
    """General delimiters: ``:/?#[]@``."""
    return c in _GEN_DELIMS


def is_sub_delim(c: str) -> bool:
    """Sub-delimiters: ``!$&'()*+,;=``."""
    return c in _SUB_DELIMS


def is_reserved(c: str) -> bool:
    """General delimiters and sub-delimiters."""
    return is_gen_delim(c) or is_sub_delim(c)


def is_scheme_character(c: str) -> bool:
    """ASCII letters, digits and ``+-.``."""
    return _is_alnum(c) or c in _SCHEME_EXTRA


def is_user_info_character(c: str) -> bool:
    """Unreserved, sub-delimiters, ``%`` and ``:``."""
    return is_unreserved(c) or is_sub_delim(c) or c in ("%", ":")


def is_authority_character(c: str) -> bool:
    """Unreserved, sub-delimiters, ``%``, ``@``, ``:`` and the IPv6 brackets."""
    return is_unreserved(c) or is_sub_delim(c) or c in ("%", "@", ":", "[", "]")


def is_path_character(c: str) -> bool:
    """Unreserved, sub-delimiters, ``%``, ``/``, ``:`` and ``@``."""
    return is_unreserved(c) or is_sub_delim(c) or c in ("%", "/", ":", "@")


def is_query_character(c: str) -> bool:
    """Any path character or ``?``."""
    return is_path_character(c) or c == "?"


def is_fragment_character(c: str) -> bool:
    """Same set as the query characters."""
    return is_query_character(c)


@dataclass
class UriComponents:
    """The separate, encoded parts of a URI."""

    scheme: str = ""
    host: str = ""
    user_info: str = ""
    path: str = "/"
    query: str = ""
    fragment: str = ""
    port: int = -1

    def join(self) -> str:
        """Canonicalize the components in place and combine them into a URI string."""
        self.scheme = to_lower_ascii(self.scheme)
        self.host = to_lower_ascii(self.host)

        if self.host and not self.path:
            self.path = "/"
        elif self.host and not self.path.startswith("/"):
            self.path = "/" + self.path

        parts: list[str] = []
        if self.scheme:
            parts.append(f"{self.scheme}:")
        if self.host:
            parts.append("//")
            if self.user_info:
                parts.append(f"{self.user_info}@")
            parts.append(self.host)
            if self.port > 0:
                parts.append(f":{self.port}")
        if self.path:
            parts.append(self.path)
        if self.query:
            parts.append(f"?{self.query}")
        if self.fragment:
            parts.append(f"#{self.fragment}")
        return "".join(parts)


def _parse_port(digits: str) -> int:
    if not digits:
        return 0
    return min(int(digits), _INT_MAX)


def parse_components(text: str) -> UriComponents:
    """Parse an encoded URI or relative reference into its components.

    Raises UriError if the text is not a valid URI.
    """
    text = text.split("\0", 1)[0]
    n = len(text)

    def at(i: int) -> str:
        return text[i] if i < n else ""

    def invalid() -> UriError:
        return UriError(f"provided uri is invalid: {text}")

    is_relative_reference = True
    for c in text:
        if c == "/":
            break
        if c == ":":
            is_relative_reference = False
            break

    p = 0
    scheme = None
    if not is_relative_reference:
        if not _is_alpha(at(0)):
            raise invalid()
        p = 1
        while at(p) != ":":
            if not is_scheme_character(at(p)):
                raise invalid()
            p += 1
        scheme = text[:p]
        p += 1

    user_info = None
    host = None
    port = 0
    if at(p) == "/" and at(p + 1) == "/":
        p += 2
        authority_begin = p
        while at(p) not in ("/", "?", "#", ""):
            if not is_authority_character(at(p)):
                raise invalid()
            p += 1
        authority_end = p

        if authority_begin != authority_end:
            port_begin = authority_end - 1
            while _is_digit(at(port_begin)) and port_begin != authority_begin:
                port_begin -= 1

            if at(port_begin) == ":":
                host_begin, host_end = authority_begin, port_begin
                port = _parse_port(text[port_begin + 1 : authority_end])
            else:
                host_begin, host_end = authority_begin, authority_end

            u_end = host_begin
            while is_user_info_character(at(u_end)) and u_end != host_end:
                u_end += 1
            if at(u_end) == "@":
                user_info = text[authority_begin:u_end]
                host_begin = u_end + 1

            host = text[host_begin:host_end]

    path = None
    if at(p) == "/" or is_path_character(at(p)):
        path_begin = p
        while at(p) not in ("?", "#", ""):
            if not is_path_character(at(p)):
                raise invalid()
            p += 1
        path = text[path_begin:p]

    query = None
    if at(p) == "?":
        p += 1
        query_begin = p
        while at(p) not in ("#", ""):
            if not is_query_character(at(p)):
                raise invalid()
            p += 1
        query = text[query_begin:p]

    fragment = None
    if at(p) == "#":
        p += 1
        fragment_begin = p
        while at(p) != "":
            if not is_fragment_character(at(p)):
                raise invalid()
            p += 1
        fragment = text[fragment_begin:p]

    return UriComponents(
        scheme=to_lower_ascii(scheme) if scheme is not None else "",
        host=to_lower_ascii(host) if host is not None else "",
        user_info=user_info if user_info is not None else "",
        path=path if path is not None else "/",
        query=query if query is not None else "",
        fragment=fragment if fragment is not None else "",
        port=port,
    )