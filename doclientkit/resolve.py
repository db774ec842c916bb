"""Resolution of relative references against a base URI (RFC 3986, section 5)."""

from __future__ import annotations

from doclientkit.builder import UriBuilder
from doclientkit.encoding import split_path
from doclientkit.uri import Uri

__all__ = ["merge_paths", "remove_dot_segments", "resolve_uri"]

_DOT = "."
_DOT_DOT = ".."


def merge_paths(base: str, relative: str) -> str:
    """Merge a relative path onto a base path (RFC 3986, 5.2.3)."""
    last_slash = base.rfind("/")
    if last_slash == -1:
        return f"{base}/{relative}"
    if last_slash == len(base) - 1:
        return base + relative
    return base[: last_slash + 1] + relative


def remove_dot_segments(builder: UriBuilder) -> None:
    """Remove '.' and '..' segments from the builder's path in place (RFC 3986, 5.2.4)."""
    original = builder.path
    if _DOT not in original:
        return

    segments = split_path(original)
    result: list[str] = []
    for segment in segments:
        if segment == _DOT:
            continue
        if segment != _DOT_DOT:
            result.append(segment)
        elif result:
            result.pop()

    if not result:
        builder.set_path("")
        return

    path = "/".join(result)
    if segments[-1] in (_DOT, _DOT_DOT) or original.endswith("/"):
        path += "/"
    builder.set_path(path)


def resolve_uri(base: Uri | str, relative_uri: str) -> str:
    """Resolve a reference against a base URI and return the resulting URI string."""
    if isinstance(base, str):
        base = Uri(base)

    if not relative_uri:
        return str(base)

    if relative_uri.startswith("/"):
        if relative_uri.startswith("//"):
            return f"{base.scheme}:{relative_uri}"
        builder = UriBuilder(base.authority())
        builder.append(Uri(relative_uri))
        remove_dot_segments(builder)
        return builder.to_string()

    url = Uri(relative_uri)
    if url.scheme:
        return relative_uri

    if not url.authority().is_empty():
        return UriBuilder(url).set_scheme(base.scheme).to_string()

    builder = UriBuilder(base)
    if url.path in ("/", ""):
        if url.query:
            builder.set_query(url.query)
    elif base.path:
        builder.set_path(merge_paths(base.path, url.path))
        remove_dot_segments(builder)
        builder.set_query(url.query)

    return builder.set_fragment(url.fragment).to_string()