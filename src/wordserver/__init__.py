"""
=============================================================================
WORDSERVER - A Tiny HTTP/1.0 Word Utility Server
=============================================================================

A single-process HTTP server built on raw Python sockets. It answers a
fixed set of GET routes with small string utilities and serves two
static HTML pages.

=============================================================================
ROUTES
=============================================================================

    GET /                      index.html
    GET /words.html            words.html
    GET /echo?word=cat         cat
    GET /palindrome?word=abba  yes
    GET /duplicates?word=code  no
    GET /reverse?word=banana   ananab
    anything else              404 Not Found

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    wordserver/
    ├── __init__.py          # This file - package exports
    ├── __main__.py          # CLI entry point (python -m wordserver)
    ├── server.py            # WordServer: accept → thread → route → reply
    ├── config.py            # ServerConfig dataclass
    ├── words.py             # reverse / palindrome / duplicate checks
    ├── core/                # Low-level components
    │   ├── socket_server.py # Listening socket and accept loop
    │   └── connection.py    # One client socket
    ├── http/                # HTTP protocol components
    │   ├── request.py       # Request line and query string parsing
    │   ├── response.py      # Response serialization
    │   ├── router.py        # Fixed route table
    │   └── status_codes.py  # 200 / 404
    └── handlers/            # Route handlers
        ├── static.py        # HTML file serving
        └── words.py         # Word routes

=============================================================================
QUICK START
=============================================================================

    from wordserver import WordServer, ServerConfig

    server = WordServer(ServerConfig(port=4444, document_root="."))
    server.run()

Or from the shell:

    python -m wordserver --port 4444

=============================================================================
"""

__version__ = "1.0.0"

from .server import WordServer
from .config import ServerConfig

__all__ = ["WordServer", "ServerConfig", "__version__"]
