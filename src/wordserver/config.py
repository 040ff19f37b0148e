"""
=============================================================================
SERVER CONFIGURATION
=============================================================================

Everything the server needs to know at startup, in one dataclass.

The configuration is created once, validated once, and then only read.
It is passed explicitly to the components that need it; there are no
module-level settings.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Command-line arguments                                         │
    │      └── python -m wordserver --port 5000                          │
    │                                                                      │
    │   2. Environment variables (ServerConfig.from_env)                  │
    │      └── WORDSERVER_PORT=5000 python -m wordserver                 │
    │                                                                      │
    │   3. Default values (in this dataclass)                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_PORT = 4444


@dataclass
class ServerConfig:
    """
    Configuration for the word server.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    NETWORK SETTINGS
    - host, port, backlog, buffer_size, max_line_size, timeout

    FILES
    - document_root, index_file, words_file

    LOGGING
    - log_level

    =========================================================================
    """

    # ─────────────────────────────────────────────────────────────────────
    # NETWORK SETTINGS
    # ─────────────────────────────────────────────────────────────────────

    host: str = "127.0.0.1"
    """
    The IP address to bind to.
    - "127.0.0.1" - Localhost only
    - "0.0.0.0" - All network interfaces
    """

    port: int = DEFAULT_PORT
    """
    The port number to listen on. 0 lets the OS pick a free port.
    """

    backlog: int = 128
    """Maximum number of queued connections before the OS refuses more."""

    buffer_size: int = 4096
    """Bytes requested per recv() call while reading the request line."""

    max_line_size: int = 8192
    """
    Longest request line accepted, in bytes.
    A client that sends more without a newline is treated as malformed.
    """

    timeout: Optional[float] = None
    """
    Read timeout for a client connection, in seconds.
    None = block until the client sends a line or disconnects.
    """

    # ─────────────────────────────────────────────────────────────────────
    # FILES
    # ─────────────────────────────────────────────────────────────────────

    document_root: str = "."
    """Directory the HTML files are read from."""

    index_file: str = "index.html"
    """File served at "/"."""

    words_file: str = "words.html"
    """File served at "/words.html"."""

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    DEBUG also logs every accepted and closed connection.
    """

    server_name: str = "WordServer/1.0"
    """Name shown in the startup banner."""

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        WORDSERVER_HOST           Server host (default: 127.0.0.1)
        WORDSERVER_PORT           Server port (default: 4444)
        WORDSERVER_TIMEOUT        Read timeout in seconds (default: none)
        WORDSERVER_DOCUMENT_ROOT  HTML file directory (default: .)
        WORDSERVER_LOG_LEVEL      Logging level (default: INFO)

        =====================================================================
        """
        timeout = os.getenv("WORDSERVER_TIMEOUT")

        return cls(
            host=os.getenv("WORDSERVER_HOST", "127.0.0.1"),
            port=int(os.getenv("WORDSERVER_PORT", str(DEFAULT_PORT))),
            timeout=float(timeout) if timeout else None,
            document_root=os.getenv("WORDSERVER_DOCUMENT_ROOT", "."),
            log_level=os.getenv("WORDSERVER_LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Called by the server at construction time, so a bad value fails
        at startup instead of on the first request.

        Raises:
            ValueError: On the first invalid value found.
        """
        if not 0 <= self.port < 65536:
            raise ValueError(f"Invalid port: {self.port}. Must be 0-65535.")

        if self.backlog < 0:
            raise ValueError("backlog must be >= 0")

        if self.buffer_size < 1:
            raise ValueError("buffer_size must be >= 1")

        if self.max_line_size < 1:
            raise ValueError("max_line_size must be >= 1")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be > 0")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
