import pytest

from doclientkit.uri_parse import (
    UriComponents,
    UriError,
    is_authority_character,
    is_fragment_character,
    is_gen_delim,
    is_path_character,
    is_query_character,
    is_reserved,
    is_scheme_character,
    is_sub_delim,
    is_unreserved,
    is_user_info_character,
    parse_components,
    to_lower_ascii,
)

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("c", list("Az09-._~"))
def test_unreserved_characters(c):
    assert is_unreserved(c) is True


@pytest.mark.parametrize("c", list("!%/ é"))
def test_not_unreserved_characters(c):
    assert is_unreserved(c) is False


@pytest.mark.parametrize("c", list(":/?#[]@"))
def test_gen_delims(c):
    assert is_gen_delim(c) is True
    assert is_sub_delim(c) is False


@pytest.mark.parametrize("c", list("!$&'()*+,;="))
def test_sub_delims(c):
    assert is_sub_delim(c) is True
    assert is_gen_delim(c) is False


def test_reserved_is_union_of_delimiters():
    for c in ASCII:
        assert is_reserved(c) == (is_gen_delim(c) or is_sub_delim(c))


def test_query_and_fragment_character_sets():
    for c in ASCII:
        assert is_query_character(c) == (is_path_character(c) or c == "?")
        assert is_fragment_character(c) == is_query_character(c)


def test_scheme_characters():
    assert all(is_scheme_character(c) for c in "aZ9+-.")
    assert not any(is_scheme_character(c) for c in ":/_~")


def test_user_info_and_authority_characters():
    assert is_user_info_character(":")
    assert not is_user_info_character("@")
    assert all(is_authority_character(c) for c in "@:[]%")
    assert not is_authority_character("/")


def test_empty_string_is_in_no_class():
    assert not is_unreserved("")
    assert not is_path_character("")
    assert not is_reserved("")


def test_to_lower_ascii():
    assert to_lower_ascii("HeLLo-World") == "hello-world"
    assert to_lower_ascii("ÀB") == "Àb"


def test_parse_full_uri():
    c = parse_components("http://user@example.com:8080/path/x?q=1#frag")
    assert c.scheme == "http"
    assert c.user_info == "user"
    assert c.host == "example.com"
    assert c.port == 8080
    assert c.path == "/path/x"
    assert c.query == "q=1"
    assert c.fragment == "frag"


def test_scheme_and_host_lowered_but_not_path():
    c = parse_components("HTTP://Example.COM/Path")
    assert c.scheme == "http"
    assert c.host == "example.com"
    assert c.path == "/Path"


def test_relative_reference():
    c = parse_components("/path1/path2?query#frag")
    assert c.scheme == ""
    assert c.host == ""
    assert c.path == "/path1/path2"
    assert c.query == "query"
    assert c.fragment == "frag"
    assert c.port == 0


def test_no_path_defaults_to_slash():
    c = parse_components("http://host")
    assert c.path == "/"
    assert c.port == 0


def test_scheme_without_authority():
    c = parse_components("mailto:someone")
    assert c.scheme == "mailto"
    assert c.host == ""
    assert c.path == "someone"


def test_empty_port():
    c = parse_components("http://host:/")
    assert c.host == "host"
    assert c.port == 0


@pytest.mark.parametrize(
    "text",
    ["1http://x", "://x", "http://ho st/", "/pa th", "/p?q q", "http://h/#f#", "ht_tp://x"],
)
def test_invalid_uris_raise(text):
    with pytest.raises(UriError):
        parse_components(text)


@pytest.mark.parametrize(
    "text",
    [
        "http://example.com/",
        "http://user@example.com:8080/a/b?x=y#z",
        "/path?query#frag",
        "https://[::1]:443/x",
    ],
)
def test_parse_join_round_trip(text):
    assert parse_components(text).join() == text


def test_default_components_join():
    assert UriComponents().join() == "/"


def test_join_canonicalizes_in_place():
    c = UriComponents(scheme="HTTP", host="Example.com", path="a", port=8080)
    text = c.join()
    assert c.scheme == "http"
    assert c.host == "example.com"
    assert c.path == "/a"
    assert text == "http://example.com:8080/a"


def test_join_omits_non_positive_port():
    c = UriComponents(scheme="http", host="h", port=0)
    assert ":0" not in c.join()
    assert c.path == "/"