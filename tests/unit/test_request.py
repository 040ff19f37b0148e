"""
Unit tests for request line and query string parsing.
"""

import pytest

from wordserver.http.request import (
    HTTPRequest,
    RequestError,
    RequestLineError,
    MissingParameterError,
    parse_query,
    parse_request_line,
)


class TestParseQuery:
    """Tests for parse_query()."""

    def test_path_and_params(self):
        """Test splitting a URL with a query string."""
        assert parse_query("a/b?x=1&y=2") == ("a/b", {"x": "1", "y": "2"})

    def test_no_query(self):
        """Test a URL without "?"."""
        assert parse_query("a/b") == ("a/b", {})

    def test_last_value_wins(self):
        """Test duplicate keys."""
        path, params = parse_query("a?x=1&x=2")
        assert path == "a"
        assert params == {"x": "2"}

    def test_missing_equals_gives_empty_value(self):
        """Test a key with no "="."""
        assert parse_query("/echo?word") == ("/echo", {"word": ""})

    def test_empty_value(self):
        """Test a key with "=" but nothing after it."""
        assert parse_query("/echo?word=") == ("/echo", {"word": ""})

    def test_splits_on_first_equals(self):
        """Test that the value keeps any further "=" characters."""
        assert parse_query("/echo?word=a=b") == ("/echo", {"word": "a=b"})

    def test_splits_on_first_question_mark(self):
        """Test that later "?" characters stay in the query value."""
        assert parse_query("/echo?word=why?") == ("/echo", {"word": "why?"})

    def test_no_percent_decoding(self):
        """Test that values are taken literally."""
        assert parse_query("/echo?word=a%20b+c") == ("/echo", {"word": "a%20b+c"})

    def test_empty_tokens_skipped(self):
        """Test "&&", a trailing "&" and a bare "?"."""
        assert parse_query("/x?a=1&&b=2&") == ("/x", {"a": "1", "b": "2"})
        assert parse_query("/x?") == ("/x", {})


class TestParseRequestLine:
    """Tests for parse_request_line()."""

    def test_simple_get(self):
        """Test a typical browser request line."""
        request = parse_request_line(b"GET /reverse?word=banana HTTP/1.1\r\n", ("127.0.0.1", 5555))

        assert request.method == "GET"
        assert request.target == "/reverse?word=banana"
        assert request.path == "/reverse"
        assert request.query_params == {"word": "banana"}
        assert request.version == "HTTP/1.1"
        assert request.client_address == ("127.0.0.1", 5555)

    def test_method_case_insensitive(self):
        """Test that "get" and "Get" are accepted."""
        assert parse_request_line(b"get /echo?word=hi\n").path == "/echo"
        assert parse_request_line(b"Get /\r\n").path == "/"

    def test_version_optional(self):
        """Test an HTTP/0.9 style line with only method and target."""
        request = parse_request_line(b"GET /\r\n")
        assert request.version == ""

    def test_extra_whitespace(self):
        """Test tabs and repeated spaces between tokens."""
        request = parse_request_line(b"GET \t /palindrome?word=abba   HTTP/1.0\r\n")
        assert request.path == "/palindrome"
        assert request.query_params == {"word": "abba"}

    def test_form_feed_separates_tokens(self):
        """Test that a form feed counts as a separator."""
        request = parse_request_line(b"GET\f/echo?word=x\fHTTP/1.0\r\n")
        assert request.path == "/echo"
        assert request.version == "HTTP/1.0"

    @pytest.mark.parametrize("word", [
        "a\u2003b",   # em space
        "a\u00a0b",   # no-break space
        "a\x1fb",     # unit separator
        "a\x1cb",     # file separator
        "a\x0bb",     # vertical tab
    ])
    def test_non_ascii_whitespace_stays_in_word(self, word):
        """Test that only ASCII space, tab, CR, LF and FF split the line."""
        request = parse_request_line(f"GET /echo?word={word} HTTP/1.0\r\n".encode("utf-8"))

        assert request.query_params == {"word": word}
        assert request.version == "HTTP/1.0"

    def test_path_kept_verbatim(self):
        """Test that the path is not normalized."""
        assert parse_request_line(b"GET echo\r\n").path == "echo"
        assert parse_request_line(b"GET /echo/\r\n").path == "/echo/"

    @pytest.mark.parametrize("line", [
        b"",
        b"\r\n",
        b"   \r\n",
        b"GET\r\n",
        b"POST /echo?word=x HTTP/1.0\r\n",
        b"HEAD / HTTP/1.0\r\n",
        b"GETX / HTTP/1.0\r\n",
    ])
    def test_invalid_lines(self, line):
        """Test that malformed or non-GET lines are rejected."""
        with pytest.raises(RequestLineError):
            parse_request_line(line)

    def test_undecodable_bytes_replaced(self):
        """Test that invalid UTF-8 does not raise."""
        request = parse_request_line(b"GET /echo?word=\xff\r\n")
        assert request.get_query("word") == "\ufffd"


class TestHTTPRequest:
    """Tests for HTTPRequest query access."""

    def test_get_query_default(self):
        """Test get_query with and without a default."""
        request = HTTPRequest(method="GET", path="/echo", query_params={"word": "cat"})

        assert request.get_query("word") == "cat"
        assert request.get_query("missing") is None
        assert request.get_query("missing", "default") == "default"

    def test_require_query_present(self):
        """Test that an empty value counts as present."""
        request = HTTPRequest(method="GET", path="/echo", query_params={"word": ""})
        assert request.require_query("word") == ""

    def test_require_query_missing(self):
        """Test the error for a missing parameter."""
        request = HTTPRequest(method="GET", path="/reverse")

        with pytest.raises(MissingParameterError) as exc_info:
            request.require_query("word")

        assert exc_info.value.name == "word"
        assert exc_info.value.path == "/reverse"
        assert "word" in str(exc_info.value)

    def test_error_hierarchy(self):
        """Test that both request errors share one base class."""
        assert issubclass(RequestLineError, RequestError)
        assert issubclass(MissingParameterError, RequestError)
