"""
=============================================================================
HTTP PROTOCOL COMPONENTS
=============================================================================

    request.py       Request line parsing, query strings, request errors
    response.py      The three response shapes and their serialization
    status_codes.py  200 OK and 404 Not Found
    router.py        Fixed route table (import from wordserver.http.router)

The router is not re-exported here because it depends on the handlers
package, which itself imports from this package.

=============================================================================
"""

from .status_codes import HTTPStatus
from .request import (
    HTTPRequest,
    RequestError,
    RequestLineError,
    MissingParameterError,
    parse_query,
    parse_request_line,
)
from .response import (
    HTTPResponse,
    plaintext,
    html_file,
    not_found,
    NOT_FOUND_BODY,
    TEXT_PLAIN,
    TEXT_HTML,
)

__all__ = [
    "HTTPStatus",
    "HTTPRequest",
    "RequestError",
    "RequestLineError",
    "MissingParameterError",
    "parse_query",
    "parse_request_line",
    "HTTPResponse",
    "plaintext",
    "html_file",
    "not_found",
    "NOT_FOUND_BODY",
    "TEXT_PLAIN",
    "TEXT_HTML",
]
