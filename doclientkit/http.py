"""Minimal HTTP/1.1 request and response parsing."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

from doclientkit.uri import Uri

__all__ = ["HttpMethod", "HttpStatus", "HttpPacket", "HttpParseError", "HttpParser"]

_MAX_MESSAGE_SIZE = 2048

_REQUEST_LINE = re.compile(
    r"([a-zA-Z]+) ([a-zA-Z0-9\-_\.!~\*'\(\)%:@&=\+$,/?]+) [hHtTpP/1\.]+", re.ASCII
)
_STATUS_LINE = re.compile(r"[hHtTpP/1\.]+ (\d+) [a-zA-Z0-9 ]+", re.ASCII)
_CONTENT_LENGTH = re.compile(r".*:[ ]*(\d+).*", re.ASCII)


class HttpMethod(str, enum.Enum):
    """Request methods used between the client and the agent."""

    GET = "GET"
    POST = "POST"


class HttpStatus(enum.IntEnum):
    """HTTP status codes."""

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTH_INFO = 203
    NO_CONTENT = 204
    PARTIAL_CONTENT = 206

    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    USE_PROXY = 305

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTH_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    REQUEST_ENTITY_TOO_LARGE = 413
    REQUEST_URI_TOO_LARGE = 414
    UNSUPPORTED_MEDIA_TYPE = 415

    INTERNAL_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505


@dataclass
class HttpPacket:
    """A parsed request or response."""

    method: str = ""
    url: Uri = field(default_factory=Uri)
    status_code: int = 0
    content_length: int = 0
    body: bytes = b""


class HttpParseError(ValueError):
    """Raised when incoming data is malformed or too large."""


class _State(enum.Enum):
    FIRST_LINE = enum.auto()
    FIELDS = enum.auto()
    BODY = enum.auto()
    COMPLETE = enum.auto()


class HttpParser:
    """Incremental parser for the small messages exchanged with the agent.

    Only the first line, the Content-Length field and the body are extracted.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._parse_from = 0
        self._state = _State.FIRST_LINE
        self._packet = HttpPacket()

    def reset(self) -> None:
        """Discard all data and start parsing a new message."""
        self._buffer = bytearray()
        self._parse_from = 0
        self._state = _State.FIRST_LINE
        self._packet = HttpPacket()

    def feed(self, data: bytes) -> None:
        """Add received bytes and parse as far as possible."""
        if len(self._buffer) + len(data) > _MAX_MESSAGE_SIZE:
            raise HttpParseError("HttpParser receiving too much data")
        self._buffer.extend(data)
        while self._parse_buffer():
            pass

    @property
    def done(self) -> bool:
        return self._state is _State.COMPLETE

    @property
    def method(self) -> str:
        return self._packet.method

    @property
    def url(self) -> Uri:
        return self._packet.url

    @property
    def status_code(self) -> int:
        return self._packet.status_code

    @property
    def body(self) -> bytes:
        return self._packet.body

    @property
    def parsed_data(self) -> HttpPacket:
        return self._packet

    def _parse_buffer(self) -> bool:
        """Advance the state machine; True if the state changed."""
        old_state = self._state
        if self._state is _State.FIRST_LINE:
            self._parse_first_line()
        elif self._state is _State.FIELDS:
            while self._parse_next_field():
                pass
        elif self._state is _State.BODY:
            self._parse_body()
        return old_state is not self._state

    def _parse_first_line(self) -> None:
        cr = self._find_crlf(0)
        if cr is None:
            return
        first_line = self._buffer[:cr].decode("latin-1")
        status = _STATUS_LINE.fullmatch(first_line)
        if status is not None:
            self._packet.status_code = int(status.group(1))
        else:
            request = _REQUEST_LINE.fullmatch(first_line)
            if request is None:
                raise HttpParseError("HttpParser received malformed first line")
            self._packet.method = request.group(1)
            self._packet.url = Uri(request.group(2))
        self._state = _State.FIELDS
        self._parse_from = cr + 2

    def _parse_next_field(self) -> bool:
        cr = self._find_crlf(self._parse_from)
        if cr is None:
            return False
        if cr == self._parse_from:
            self._state = _State.BODY
            self._parse_from = cr + 2
            return False

        line = self._buffer[self._parse_from : cr].decode("latin-1")
        if "Content-Length" in line:
            match = _CONTENT_LENGTH.fullmatch(line)
            if match is None:
                raise HttpParseError("HttpParser received malformed Content-Length")
            self._packet.content_length = int(match.group(1))
        self._parse_from = cr + 2
        return True

    def _parse_body(self) -> None:
        expected = self._packet.content_length
        if expected == 0:
            self._state = _State.COMPLETE
            return
        available = len(self._buffer) - self._parse_from
        if available == expected:
            self._packet.body = bytes(self._buffer[self._parse_from :])
            self._state = _State.COMPLETE
            self._parse_from = len(self._buffer)

    def _find_crlf(self, start: int) -> int | None:
        cr = self._buffer.find(b"\r", start)
        if cr == -1 or cr + 1 == len(self._buffer):
            return None
        if self._buffer[cr + 1] != ord("\n"):
            raise HttpParseError("HttpParser received malformed message (CRLF)")
        return cr