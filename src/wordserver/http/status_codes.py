"""
=============================================================================
HTTP STATUS CODES
=============================================================================

The server only ever answers with two status codes:

    ┌──────┬───────────────┬──────────────────────────────────────────┐
    │ Code │ Phrase        │ When                                     │
    ├──────┼───────────────┼──────────────────────────────────────────┤
    │ 200  │ OK            │ A known route produced a body            │
    │ 404  │ Not Found     │ The path matched none of the fixed routes│
    └──────┴───────────────┴──────────────────────────────────────────┘

Malformed requests get NO status code at all: the connection is simply
closed (see server.py).

=============================================================================
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes with their reason phrases.

    IntEnum, so members compare equal to plain integers:

        >>> HTTPStatus.OK == 200
        True
        >>> HTTPStatus.NOT_FOUND.phrase
        'Not Found'
    """

    OK = 200                    # Route handled, body follows
    NOT_FOUND = 404             # No route for this path

    @property
    def phrase(self) -> str:
        """
        Get the reason phrase for this status code.

            HTTP/1.0 404 Not Found
                     ─── ─────────
                      │      │
                      │      └── Reason phrase
                      └───────── Status code
        """
        return _STATUS_PHRASES.get(self, "Unknown")


_STATUS_PHRASES = {
    HTTPStatus.OK: "OK",
    HTTPStatus.NOT_FOUND: "Not Found",
}
