"""Tests for query encoding and search URL construction."""

import pytest

from hunt.engines.base import SearchEngine, build_search_url, encode_query


@pytest.mark.parametrize(
    ("term", "delimiter", "expected"),
    [
        ("hello world", "+", "hello+world"),
        ("hello world", "%20", "hello%20world"),
        ("hello world", "", "hello+world"),
        ("C++ programming", "+", "C%2B%2B+programming"),
        ("C++ programming", "%20", "C%2B%2B%20programming"),
        ("test & query", "+", "test+%26+query"),
        ("café", "+", "caf%C3%A9"),
        ("café résumé", "+", "caf%C3%A9+r%C3%A9sum%C3%A9"),
        ("hello   world", "+", "hello+++world"),
        ("helloworld", "+", "helloworld"),
        ("python 3.10", "+", "python+3.10"),
        ("a-b_c.d~e", "+", "a-b_c.d~e"),
        ("100% sure?", "+", "100%25+sure%3F"),
        ("", "+", ""),
    ],
)
def test_encode_query(term, delimiter, expected):
    assert encode_query(term, delimiter) == expected


def test_encode_query_custom_delimiter_only_replaces_spaces():
    assert encode_query("a+b c", "-") == "a%2Bb-c"


def test_encode_query_leaves_already_escaped_text_escaped_again():
    assert encode_query("a%20b", "+") == "a%2520b"


def test_build_search_url_concatenates_prefix():
    engine = SearchEngine(name="X", url="https://x.com/s?q=", space_delimiter="+")
    assert build_search_url(engine, "a b") == "https://x.com/s?q=a+b"


def test_build_search_url_uses_engine_delimiter():
    engine = SearchEngine(name="DuckDuckGo", url="https://duckduckgo.com/?q=", space_delimiter="%20")
    assert engine.build_search_url("machine learning") == "https://duckduckgo.com/?q=machine%20learning"


def test_engine_defaults_empty_delimiter_to_plus():
    engine = SearchEngine(name="X", url="https://x.com/s?q=", space_delimiter="")
    assert engine.space_delimiter == "+"
    assert engine.build_search_url("a b") == "https://x.com/s?q=a+b"


def test_engine_is_immutable():
    engine = SearchEngine(name="X", url="https://x.com/s?q=")
    with pytest.raises(AttributeError):
        engine.name = "Y"


def test_encode_query_escapes_undecodable_bytes():
    # b"caf\xe9" decoded with surrogateescape, as os.fsdecode does for argv
    assert encode_query("caf\udce9", "+") == "caf%E9"
    assert encode_query("caf\udce9 bar", "%20") == "caf%E9%20bar"
