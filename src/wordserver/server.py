"""
=============================================================================
WORD SERVER
=============================================================================

The orchestrator that ties the acceptor, the per-connection flow and
the router together.

=============================================================================
ARCHITECTURE OVERVIEW
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      WORD SERVER ARCHITECTURE                       │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │                        ┌─────────────────┐                          │
    │                        │   WordServer    │                          │
    │                        └────────┬────────┘                          │
    │                                 │                                    │
    │            ┌────────────────────┼────────────────────┐              │
    │            ▼                    ▼                    ▼              │
    │    ┌──────────────┐    ┌──────────────┐    ┌──────────────┐        │
    │    │SocketServer  │    │ Thread per   │    │    Router    │        │
    │    │ (accepting)  │    │ connection   │    │ (6 routes)   │        │
    │    └──────┬───────┘    └──────┬───────┘    └──────┬───────┘        │
    │           ▼                   ▼                   ▼                 │
    │    ┌──────────────┐    ┌──────────────┐    ┌──────────────┐        │
    │    │  Connection  │    │ parse line   │    │  Handlers    │        │
    │    └──────────────┘    └──────────────┘    └──────────────┘        │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PER-CONNECTION FLOW
=============================================================================

    AWAIT_REQUEST_LINE ──► MATCH_ROUTE ──┬──► DISPATCH ──► send 200 ──┐
            │                            ├──► SEND_404 ──► send 404 ──┤
            │                            └──► FAIL ───────────────────┤
            └──────────────────────────────► FAIL ───────────────────┤
                                                                       ▼
                                                                    CLOSED

FAIL means: log the reason at ERROR, close the socket, send NOTHING.
It covers:

    - EOF before a request line, empty line, line too long
    - method other than GET, missing request target
    - a word route without its "word" parameter
    - an HTML file that cannot be read

A failure never leaves its own thread: the acceptor and every other
connection carry on.

=============================================================================
CONCURRENCY
=============================================================================

Every accepted connection gets its own daemon thread. The acceptor
starts it and goes straight back to accept(); it never joins or tracks
it. There is no limit on the number of threads and no shared mutable
state between them.

=============================================================================
"""

import logging
import threading
from typing import Optional, Tuple

from .config import ServerConfig
from .core import SocketServer, Connection, ConnectionState
from .http import HTTPRequest, RequestError, RequestLineError, parse_request_line
from .http.router import Router


logger = logging.getLogger(__name__)


class WordServer:
    """
    HTTP/1.0 word utility server.

    =========================================================================
    USAGE
    =========================================================================

        server = WordServer(ServerConfig(port=4444))
        server.run()        # Blocks until Ctrl+C / SIGTERM / shutdown()

    From another thread:

        thread = threading.Thread(target=server.run, daemon=True)
        thread.start()
        server.wait_until_ready(5.0)
        ...
        server.shutdown()

    =========================================================================
    """

    def __init__(self, config: Optional[ServerConfig] = None):
        """
        Initialize the server.

        Args:
            config: Server configuration. Uses defaults if not provided.

        Raises:
            ValueError: If the configuration is invalid.
        """
        self.config = config or ServerConfig()
        self.config.validate()

        self._socket_server = SocketServer(self.config)

        self._router = Router(
            document_root=self.config.document_root,
            index_file=self.config.index_file,
            words_file=self.config.words_file,
        )

    @property
    def router(self) -> Router:
        """The fixed route table."""
        return self._router

    @property
    def address(self) -> Tuple[str, int]:
        """Bound (host, port); the real port once listening."""
        return self._socket_server.address

    # =========================================================================
    # SERVER LIFECYCLE
    # =========================================================================

    def run(self):
        """
        Start the server (blocking).

        Raises:
            OSError: If the listening socket cannot be bound.
        """
        self._setup_logging()

        logger.info(f"Starting {self.config.server_name} on {self.config.host}:{self.config.port}")
        self._print_startup_banner()

        try:
            self._socket_server.start(self._handle_connection)
        except KeyboardInterrupt:
            logger.info("Received keyboard interrupt")

        logger.info("Server stopped")

    def shutdown(self):
        """Stop accepting connections. In-flight connections finish on their own."""
        self._socket_server.shutdown()

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """Block until the server is listening. Returns False on timeout."""
        return self._socket_server.wait_until_ready(timeout)

    def _setup_logging(self):
        """Configure logging based on config."""
        level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        logging.getLogger("wordserver").setLevel(level)

    def _print_startup_banner(self):
        """Print server startup information."""
        print()
        print("╔══════════════════════════════════════════════════════════════╗")
        print(f"  {self.config.server_name} started! ... press Ctrl+C to quit.")
        print(f"  Load http://{self.config.host}:{self.config.port} in your web-browser.")
        print("╚══════════════════════════════════════════════════════════════╝")
        print()

        self._router.print_routes()

    # =========================================================================
    # REQUEST HANDLING
    # =========================================================================

    def _handle_connection(self, conn: Connection):
        """
        Start a thread for a new connection.

        Called by SocketServer on the accept thread, so it must not block.
        """
        thread = threading.Thread(
            target=self._process_connection,
            args=(conn,),
            name=f"conn-{conn.id}",
            daemon=True,
        )
        thread.start()

    def _process_connection(self, conn: Connection):
        """
        Read, route and answer one request (runs in its own thread).

        The connection is always closed on the way out, whether a
        response was sent or not.
        """
        with conn:
            try:
                request = self._read_request(conn)

                conn.state = ConnectionState.PROCESSING
                response = self._router.handle(request)

            except RequestError as e:
                logger.error(f"[{conn.id}] Bad request from {conn.client_ip}: {e}")
                return

            except OSError as e:
                # Unreadable HTML file or a socket read error/timeout
                logger.error(f"[{conn.id}] I/O error: {e}")
                return

            except Exception as e:
                logger.exception(f"[{conn.id}] Connection error: {e}")
                return

            if conn.send_response(response.to_bytes()):
                logger.debug(f"[{conn.id}] {response.status_line}")

    def _read_request(self, conn: Connection) -> HTTPRequest:
        """
        Read and parse the request line.

        Raises:
            RequestLineError: If the client sent nothing, too much, or
                              something that is not a GET request line.
        """
        try:
            raw_line = conn.read_request_line()
        except ValueError as e:
            raise RequestLineError(str(e)) from e

        if raw_line is None:
            raise RequestLineError("Connection closed before a request line arrived")

        logger.info(f"[{conn.id}] {raw_line.decode('utf-8', errors='replace').rstrip()}")

        return parse_request_line(raw_line, conn.address)
