import pytest

from doclientkit.http import HttpMethod, HttpParseError, HttpParser, HttpStatus

RESPONSE = b"HTTP/1.1 200 OK\r\nContent-Type: application/json\r\nContent-Length: 5\r\n\r\nhello"
REQUEST_PATH = "/download/start?id=1"
REQUEST = b"GET " + REQUEST_PATH.encode() + b" HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n"


def test_parses_response():
    parser = HttpParser()
    parser.feed(RESPONSE)
    assert parser.done
    assert parser.status_code == HttpStatus.OK
    assert parser.body == b"hello"
    assert parser.parsed_data.content_length == len(b"hello")


def test_parses_request():
    parser = HttpParser()
    parser.feed(REQUEST)
    assert parser.done
    assert parser.method == HttpMethod.GET
    assert str(parser.url) == REQUEST_PATH
    assert parser.url.query == "id=1"
    assert parser.body == b""


def test_byte_by_byte_matches_whole():
    parser = HttpParser()
    for i in range(len(RESPONSE)):
        assert not parser.done
        parser.feed(RESPONSE[i : i + 1])
    assert parser.done
    assert parser.body == b"hello"


def test_not_found_status():
    parser = HttpParser()
    parser.feed(b"HTTP/1.1 404 Not Found\r\n\r\n")
    assert parser.done
    assert parser.status_code == HttpStatus.NOT_FOUND


def test_incomplete_body_not_done():
    parser = HttpParser()
    parser.feed(RESPONSE[:-2])
    assert not parser.done
    assert parser.body == b""


def test_extra_body_bytes_never_complete():
    parser = HttpParser()
    parser.feed(RESPONSE + b"!")
    assert not parser.done


def test_malformed_first_line():
    parser = HttpParser()
    with pytest.raises(HttpParseError):
        parser.feed(b"nonsense line here\r\n")


def test_malformed_crlf():
    parser = HttpParser()
    with pytest.raises(HttpParseError):
        parser.feed(b"HTTP/1.1 200 OK\rX")


def test_malformed_content_length():
    parser = HttpParser()
    with pytest.raises(HttpParseError):
        parser.feed(b"HTTP/1.1 200 OK\r\nContent-Length: abc\r\n\r\n")


def test_too_much_data():
    parser = HttpParser()
    with pytest.raises(HttpParseError):
        parser.feed(b"x" * 2049)


def test_size_limit_is_cumulative():
    parser = HttpParser()
    parser.feed(b"x" * 2048)
    with pytest.raises(HttpParseError):
        parser.feed(b"y")


def test_reset_allows_new_message():
    parser = HttpParser()
    parser.feed(RESPONSE)
    parser.reset()
    assert not parser.done
    assert parser.status_code == 0
    parser.feed(REQUEST)
    assert parser.done
    assert parser.method == "GET"


def test_method_enum_matches_wire_text():
    parser = HttpParser()
    parser.feed(b"POST /x HTTP/1.1\r\n\r\n")
    assert parser.method == HttpMethod.POST.value