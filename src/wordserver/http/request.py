"""
=============================================================================
HTTP REQUEST PARSING
=============================================================================

This module turns the FIRST LINE of a connection into an HTTPRequest.

Nothing after the request line is read or parsed: no headers, no body.
The server speaks a deliberately small HTTP/1.0 dialect where the
request line carries everything a route needs.

=============================================================================
REQUEST LINE ANATOMY
=============================================================================

    GET /palindrome?word=racecar HTTP/1.0\r\n
    ─┬─ ────────────┬─────────── ───┬────
     │              │               │
   Method    Request target      Version (optional, ignored)
             ─────┬──── ────┬────
                  │         │
                Path    Query string

Validation rules:

    1. The line is split on runs of ASCII space, tab, CR, LF and FF.
    2. The first token must be "GET" (any case: "get", "Get" are fine).
    3. A second token (the request target) must be present.

Everything else is a RequestLineError. There is NO error response for
a bad request line - the connection is logged and closed.

=============================================================================
QUERY STRINGS
=============================================================================

    /echo?word=cat&x=1&x=2&flag
          ───┬──── ─┬─ ─┬─ ──┬─
             │      │   │    │
             │      │   │    └── no "=" → value is ""
             │      │   └─────── later value wins → x = "2"
             │      └─────────── overwritten
             └────────────────── word = "cat"

    Result: {"word": "cat", "x": "2", "flag": ""}

Values are taken literally. "%20" stays "%20" - there is no URL decoding.

=============================================================================
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Dict, Tuple


# Request line separators: ASCII space, tab, newline, carriage return and
# form feed only. Other Unicode whitespace stays inside the token.
_TOKEN_SEPARATOR = re.compile(r"[ \t\n\r\f]+")


class RequestError(Exception):
    """
    Base class for per-connection request failures.

    Any RequestError raised while handling a connection ends that
    connection without a response. It never reaches the accept loop.
    """


class RequestLineError(RequestError):
    """Raised when the request line is missing, empty or not a GET."""


class MissingParameterError(RequestError):
    """
    Raised when a route needs a query parameter the request did not send.

    Example: "GET /reverse" without "?word=...".
    """

    def __init__(self, name: str, path: str):
        super().__init__(f"Missing query parameter '{name}' for {path}")
        self.name = name
        self.path = path


@dataclass
class HTTPRequest:
    """
    A parsed request line.

    Lives only as long as its connection.

    Attributes:
        method:         Request method as sent ("GET", "get", ...)
        target:         Raw request target ("/echo?word=hi")
        path:           Target up to the first "?" ("/echo")
        query_params:   Query parameters, one value per key
        version:        Third token of the request line, "" if absent
        client_address: (ip, port) of the client, for logging
    """

    method: str
    path: str
    target: str = ""
    query_params: Dict[str, str] = field(default_factory=dict)
    version: str = ""
    client_address: Tuple[str, int] = ("", 0)

    def get_query(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a query parameter, or `default` if it was not sent.

        Example:
            # URL: /echo?word=cat
            request.get_query("word")     # Returns "cat"
            request.get_query("other")    # Returns None
        """
        return self.query_params.get(name, default)

    def require_query(self, name: str) -> str:
        """
        Get a query parameter that the route cannot do without.

        An empty value ("?word=" or "?word") counts as present.

        Raises:
            MissingParameterError: If the parameter was not sent at all.
        """
        if name not in self.query_params:
            raise MissingParameterError(name, self.path)
        return self.query_params[name]


def parse_query(url: str) -> Tuple[str, Dict[str, str]]:
    """
    Split a URL into its path and query parameters.

    =========================================================================
    RULES
    =========================================================================

    1. Split on the FIRST "?" only. No "?" → the whole URL is the path.
    2. Split the query on "&". Empty pieces ("a&&b", trailing "&")
       are skipped.
    3. Split each piece on the FIRST "=". No "=" → value is "".
    4. Duplicate keys: last one wins.
    5. No percent-decoding.

    =========================================================================

    Examples:
        parse_query("a/b?x=1&y=2")  → ("a/b", {"x": "1", "y": "2"})
        parse_query("a/b")          → ("a/b", {})
        parse_query("a?x=1&x=2")    → ("a", {"x": "2"})
        parse_query("a?eq=b=c")     → ("a", {"eq": "b=c"})
    """
    path, sep, query = url.partition("?")
    params: Dict[str, str] = {}

    if not sep:
        return path, params

    for token in query.split("&"):
        if not token:
            continue

        key, _, value = token.partition("=")
        params[key] = value

    return path, params


def parse_request_line(
    data: bytes,
    client_address: Tuple[str, int] = ("", 0),
) -> HTTPRequest:
    """
    Parse raw request line bytes into an HTTPRequest.

    Args:
        data: One line from the socket, with or without its line ending.
        client_address: Client's (ip, port) tuple for logging.

    Returns:
        Parsed HTTPRequest.

    Raises:
        RequestLineError: If the line is empty, the method is not GET,
                          or the request target is missing.
    """
    line = data.decode("utf-8", errors="replace").rstrip("\r\n")

    # ─────────────────────────────────────────────────────────────────
    # TOKENIZE
    # ─────────────────────────────────────────────────────────────────
    # Runs of separators collapse and empty tokens are dropped, so
    # "GET   /  HTTP/1.0" still has 3 tokens. A word holding U+2003 or
    # a no-break space is not cut short.
    tokens = [token for token in _TOKEN_SEPARATOR.split(line) if token]

    if not tokens:
        raise RequestLineError("Empty request line")

    method = tokens[0]
    if method.upper() != "GET":
        raise RequestLineError(f"Unsupported method: {method}")

    if len(tokens) < 2:
        raise RequestLineError(f"Missing request target: {line}")

    target = tokens[1]
    version = tokens[2] if len(tokens) > 2 else ""

    path, query_params = parse_query(target)

    return HTTPRequest(
        method=method,
        path=path,
        target=target,
        query_params=query_params,
        version=version,
        client_address=client_address,
    )
