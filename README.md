# doclientkit

A small, dependency-free toolkit for download clients:

- **URIs**: a strict, protocol-independent URI parser (`Uri`), a fluent
  builder (`UriBuilder`), RFC 3986 percent-encoding helpers and
  reference resolution (`resolve_uri`).
- **HTTP**: a deliberately limited, incremental HTTP/1.1 message parser
  (`HttpParser`). It reads a request or status line, the `Content-Length`
  header and a body.
- **Version strings**: formatting of component version strings and handling
  of `--version` style options.
- **Test helpers**: scope-exit guards, running shell commands and DNS lookups.

It needs only the Python standard library and Python 3.10 or later.

## URIs

```python
from doclientkit.uri import Uri, validate
from doclientkit.resolve import resolve_uri

uri = Uri("http://Example.com/a/b/c")
str(uri)                         # 'http://example.com/a/b/c'  (scheme and host lower-cased)
uri.is_host_loopback()           # False
Uri("http://localhost:8080/").is_host_loopback()   # True

validate("http://example.com/path?q=1#frag")       # True
validate("http://exa mple.com/")                   # False

resolve_uri(uri, "../d")         # 'http://example.com/a/d'
```

`Uri` exposes `scheme`, `user_info`, `host`, `port`, `path`, `query` and
`fragment` as read-only properties. It also provides `authority()`,
`resource()` and the predicates `is_empty()`, `is_host_loopback()`,
`is_host_wildcard()`, `is_host_portable()`, `is_port_default()`,
`is_authority()`, `is_path_empty()` and `has_same_authority(other)`.

Passing invalid input to `Uri(...)` raises `doclientkit.uri_parse.UriError`,
which is a subclass of `ValueError`. `Uri.from_components(...)` builds a URI
from a `UriComponents` record and validates the result the same way.

Two URIs are equal when their components match after percent-decoding.
Ordering with `<` compares the encoded strings.

The module `doclientkit.uri_parse` also exports the RFC 3986 character-class
predicates (`is_unreserved`, `is_path_character`, and the rest),
`to_lower_ascii` and `parse_components`.

## Building URIs

```python
from doclientkit.builder import UriBuilder
from doclientkit.uri import Uri

builder = UriBuilder(Uri("http://example.com"))
builder.append_path("docs").append_query_param("page", "2")
builder.to_string()              # 'http://example.com/docs?page=2'
```

Every `set_*` and `append*` method returns the builder, so calls can be
chained. The methods behave as follows:

- `append_path` keeps exactly one `/` between the old and new parts.
- `append_path_raw` always inserts a `/` and does not merge duplicates.
- `append_query` keeps exactly one `&` between the old and new parts.
- `set_port` takes an integer, or a string that begins with one. For any
  other string it raises `ValueError`.

`to_uri()` and `to_string()` validate the combined components and raise
`UriError` if they are invalid. `is_valid()` runs the same check without
raising.

## Encoding

```python
from doclientkit.encoding import encode_data_string, decode, split_path, split_query

encode_data_string("a b&c")      # 'a%20b%26c'
decode("a%20b")                  # 'a b'
split_path("/a//b/")             # ['a', 'b']
split_query("x=1&y=2")           # {'x': '1', 'y': '2'}
```

`encode_uri(raw, component)` encodes text for one part of a URI, chosen by a
`Component` member. Characters that are legal in that part stay unchanged.
Every component except the host also escapes `%` and `+`.

`encode_query(raw)` encodes one side of a `key=value` pair and also escapes
`&`, `;` and `=`.

`decode` raises `UriError` in two cases: a `%` not followed by two hex
digits, and input that is not ASCII.

## HTTP parsing

```python
from doclientkit.http import HttpParser, HttpStatus

parser = HttpParser()
parser.feed(b"HTTP/1.1 200 OK\r\nContent-Length: 2\r\n\r\n")
parser.feed(b"{}")
parser.done                              # True
parser.status_code == HttpStatus.OK      # True
parser.body                              # b'{}'
```

`feed(data)` accepts the bytes of a single request or response in any number
of chunks. The parser exposes `method`, `url` (a `Uri`), `status_code`,
`body` and the complete `parsed_data` (`HttpPacket`). It raises
`HttpParseError` in these cases:

- the first line is malformed;
- a CR is not followed by LF;
- a `Content-Length` header is malformed;
- the message exceeds 2048 bytes.

Call `reset()` before parsing the next message. `HttpMethod` and `HttpStatus`
name the supported methods and status codes.

## Version strings

`doclientkit.version.component_version(include_extras, info)` formats a
`BuildInfo` record as

```
<builder>;<name>/v<version>+<build time>.<git revision> (<git head name>)
```

Empty parts are left out. When there is no build time, the revision follows
a `+` instead of a `.`. `simple_version(info)` returns only the version.

`output_version_if_needed(argv, info, stream)` prints the version string when
the arguments are exactly one of `--version`, `-v` or `--version-extra`, and
returns whether it printed anything. Only `--version-extra` includes the git
head name.

## Test helpers

`doclientkit.testutil` provides the following:

- `scope_exit(callback)` returns a `ScopeExit` guard. The guard runs the
  callback once when its `with` block ends. Call `release()` to cancel it, or
  `reset()` to run it early.
- `execute_system_command(command)` runs a command through the shell and
  raises `CommandError` unless the command exits with status 0.
- `resolve_dns_query(host, service, timeout)` returns the last TCP socket
  address found for the host, or `None` on failure or timeout.

## What this package does not do

- It has no command-line program.
- It does not send or receive anything over HTTP. `HttpParser` only parses
  bytes that you give it, and `Uri` and `UriBuilder` only handle text.
- It has no download worker, file hashing or log-file support.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.