"""
=============================================================================
URL ROUTER
=============================================================================

Maps a request path to one of six fixed handlers.

    ┌────────────────┬───────────────────────────┬────────────┐
    │ Path           │ Handler                   │ Response   │
    ├────────────────┼───────────────────────────┼────────────┤
    │ /              │ HTMLFileHandler(index)    │ text/html  │
    │ /words.html    │ HTMLFileHandler(words)    │ text/html  │
    │ /echo          │ words.echo                │ text/plain │
    │ /palindrome    │ words.palindrome          │ text/plain │
    │ /duplicates    │ words.duplicates          │ text/plain │
    │ /reverse       │ words.reverse             │ text/plain │
    │ anything else  │ (none)                    │ 404 page   │
    └────────────────┴───────────────────────────┴────────────┘

=============================================================================
EXACT MATCHING
=============================================================================

Paths are compared as plain strings. There are no patterns, no
parameters in the path, and no normalization:

    "/echo"     → echo
    "/echo/"    → 404
    "echo"      → 404
    "/ECHO"     → 404

The table is built once in __init__ and never changes, so a dict
lookup is all the matching we need.

=============================================================================
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from .request import HTTPRequest
from .response import HTTPResponse, not_found
from ..handlers import HTMLFileHandler, echo, palindrome, duplicates, reverse


logger = logging.getLogger(__name__)


# Type alias for handler functions
Handler = Callable[[HTTPRequest], HTTPResponse]


@dataclass(frozen=True)
class Route:
    """
    A fixed path bound to its handler.

    Example:
        Route(path="/reverse", handler=reverse, name="reverse")
    """

    path: str                        # Exact path to match
    handler: Handler                 # Function called with the request
    name: str                        # Short name for logs and the banner


class Router:
    """
    Dispatches requests to the fixed route table.

    Usage:
        router = Router(document_root=".")
        response = router.handle(request)   # 200 from a handler, or 404

    Handler exceptions (missing parameter, unreadable file) are NOT
    caught here; they belong to the connection, not to the router.
    """

    def __init__(
        self,
        document_root: Union[str, Path] = ".",
        index_file: str = "index.html",
        words_file: str = "words.html",
    ):
        """
        Build the route table.

        Args:
            document_root: Directory holding the two HTML files.
            index_file: File served at "/".
            words_file: File served at "/words.html".
        """
        index = HTMLFileHandler(document_root, index_file)
        words_page = HTMLFileHandler(document_root, words_file)

        routes = [
            Route("/", index.handle, "index"),
            Route("/words.html", words_page.handle, "words"),
            Route("/echo", echo, "echo"),
            Route("/palindrome", palindrome, "palindrome"),
            Route("/duplicates", duplicates, "duplicates"),
            Route("/reverse", reverse, "reverse"),
        ]

        self._routes: Dict[str, Route] = {route.path: route for route in routes}

    def match(self, path: str) -> Optional[Route]:
        """
        Find the route for an exact path.

        Returns:
            The Route, or None if the path is not one of the fixed six.
        """
        return self._routes.get(path)

    def handle(self, request: HTTPRequest) -> HTTPResponse:
        """
        Route a request to its handler.

        Returns:
            The handler's response, or the 404 page if nothing matched.
        """
        route = self.match(request.path)

        if route is None:
            logger.debug(f"No route for {request.path}")
            return not_found()

        return route.handler(request)

    def print_routes(self) -> None:
        """Print the route table (used by the startup banner)."""
        print("Routes:")
        for route in self._routes.values():
            print(f"  GET  {route.path:<14} → {route.name}")
        print()
