"""
=============================================================================
HTTP RESPONSE WRITING
=============================================================================

Every response this server sends has exactly the same shape:

    HTTP/1.0 200 OK\r\n                           ← Status line
    Content-Type: text/plain; charset=utf-8\r\n   ← The ONLY header
    \r\n                                          ← Blank line
    ananab                                        ← Body bytes

=============================================================================
WHY NO CONTENT-LENGTH?
=============================================================================

HTTP/1.0 lets the server mark the end of the body by closing the
connection. We always close after one response, so the client knows the
body is complete when recv() returns b"".

    Server                               Client
      │  status line + header + body  ──►  │
      │  FIN  ──────────────────────────►  │  recv() → b""  (body done)

=============================================================================
THE THREE RESPONSES
=============================================================================

    plaintext("yes")          200  text/plain   "yes"
    html_file("index.html")   200  text/html    <file bytes, verbatim>
    not_found()               404  text/html    fixed 404 page

=============================================================================
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .status_codes import HTTPStatus


TEXT_PLAIN = "text/plain; charset=utf-8"
TEXT_HTML = "text/html; charset=utf-8"

NOT_FOUND_BODY = "<html><body><h2>404 Not Found</h2></body></html>"


@dataclass
class HTTPResponse:
    """
    Represents an HTTP response to be sent to the client.

    =========================================================================
    RESPONSE LIFECYCLE
    =========================================================================

        Handler returns          to_bytes()              Connection sends
        HTTPResponse    ─────►   serializes    ─────►    raw bytes
            │                       │                        │
        HTTPResponse(            b"HTTP/1.0 200 OK\r\n   socket.sendall(
          status=200,              Content-Type: ...\r\n     response_bytes
          content_type=...,        \r\n                    )
          body=b"yes"              yes"
        )

    =========================================================================
    """

    status: HTTPStatus = HTTPStatus.OK
    content_type: str = TEXT_PLAIN
    body: bytes = b""
    version: str = "HTTP/1.0"

    @property
    def status_line(self) -> str:
        """
        Get the HTTP status line.

        Format: HTTP-VERSION SP STATUS-CODE SP REASON-PHRASE
        Example: "HTTP/1.0 404 Not Found"
        """
        return f"{self.version} {int(self.status)} {self.status.phrase}"

    def set_body(self, body: Union[str, bytes]) -> "HTTPResponse":
        """
        Set the response body.

        Strings are encoded to UTF-8, matching the charset we advertise.

        Returns:
            Self for method chaining
        """
        if isinstance(body, str):
            self.body = body.encode("utf-8")
        else:
            self.body = body
        return self

    def to_bytes(self) -> bytes:
        """
        Serialize the response to bytes for sending over the socket.

        The header block is the status line plus ONE header, followed
        by a single empty line. Nothing is added automatically.
        """
        head = (
            f"{self.status_line}\r\n"
            f"Content-Type: {self.content_type}\r\n"
            f"\r\n"
        )
        return head.encode("utf-8") + self.body


# =============================================================================
# RESPONSE FACTORIES
# =============================================================================

def plaintext(body: str) -> HTTPResponse:
    """Create a 200 OK text/plain response."""
    return HTTPResponse(status=HTTPStatus.OK, content_type=TEXT_PLAIN).set_body(body)


def html_file(path: Union[str, Path]) -> HTTPResponse:
    """
    Create a 200 OK text/html response from a file on disk.

    The whole file is read BEFORE the response exists, so nothing can be
    half-sent if the file is missing.

    Args:
        path: File to serve. Its bytes are sent verbatim.

    Raises:
        OSError: If the file cannot be opened or read. This is NOT turned
                 into a 404; the caller treats it as a failed connection.
    """
    with open(path, "rb") as f:
        content = f.read()

    return HTTPResponse(status=HTTPStatus.OK, content_type=TEXT_HTML, body=content)


def not_found() -> HTTPResponse:
    """Create the fixed 404 Not Found page."""
    return HTTPResponse(status=HTTPStatus.NOT_FOUND, content_type=TEXT_HTML).set_body(NOT_FOUND_BODY)
