"""
=============================================================================
CONNECTION MANAGEMENT
=============================================================================

This module wraps one accepted client socket with the three operations
the server needs: read ONE request line, send ONE response, close.

=============================================================================
TCP IS A BYTE STREAM, NOT A MESSAGE PROTOCOL!
=============================================================================

TCP does NOT preserve message boundaries. The request line

    GET /reverse?word=banana HTTP/1.0\r\n

might arrive in one recv() or in several:

    First recv():  "GET /rever"
    Second recv(): "se?word=banana HTTP/1.0\r\nHost: ..."

So we buffer received bytes until we see the first "\n". Anything
after it (headers, body) is never looked at.

=============================================================================
ONE REQUEST PER CONNECTION
=============================================================================

    ┌─────────────────────────────────────────────────────────────────┐
    │                         HTTP/1.0 style                           │
    ├─────────────────────────────────────────────────────────────────┤
    │                                                                  │
    │   TCP Connect → read line → send response → TCP Close           │
    │                                                                  │
    │   No keep-alive. The close tells the client the body is done.    │
    │                                                                  │
    └─────────────────────────────────────────────────────────────────┘

=============================================================================
CONNECTION STATE MACHINE
=============================================================================

    NEW ──────► READING ──────► PROCESSING ──────► WRITING
     │             │                 │                 │
     │             ▼                 ▼                 │
     └──────────► CLOSING ◄──────────┴─────────────────┘
                    │
                    ▼
                  CLOSED

A failed request goes straight from READING or PROCESSING to CLOSING
without ever entering WRITING: nothing is sent.

=============================================================================
"""

import socket
import time
import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Tuple
import uuid


logger = logging.getLogger(__name__)

# Upper bounds for draining the client after the response
DRAIN_TIMEOUT = 0.5
DRAIN_MAX_BYTES = 64 * 1024


class ConnectionState(Enum):
    """Connection lifecycle states, tracked for logging."""

    NEW = "new"                # Just accepted, nothing read yet
    READING = "reading"        # Waiting for the request line
    PROCESSING = "processing"  # Request parsed, handler is running
    WRITING = "writing"        # Sending the response
    CLOSING = "closing"        # Shutdown sequence in progress
    CLOSED = "closed"          # Socket released


@dataclass
class Connection:
    """
    Represents a client connection.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    Connection Responsibilities                       │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  1. LINE READING                                                     │
    │     └── Buffer recv() chunks until the first newline                 │
    │     └── Refuse lines longer than max_line_size                       │
    │                                                                      │
    │  2. SENDING                                                          │
    │     └── sendall() the serialized response                            │
    │                                                                      │
    │  3. GRACEFUL CLOSE                                                   │
    │     └── FIN after the response, drain, release the fd               │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

    Attributes:
        socket: The client socket.
        address: Client's (ip, port) tuple.
        id: Short connection identifier (for logging).
        state: Current connection state.
        created_at: Timestamp when connection was accepted.
    """

    socket: socket.socket
    address: Tuple[str, int]

    id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    state: ConnectionState = ConnectionState.NEW
    created_at: float = field(default_factory=time.time)

    buffer_size: int = 4096               # How much to read at once
    timeout: Optional[float] = None       # None = block forever
    max_line_size: int = 8192             # Longest accepted request line

    _buffer: bytes = field(default=b"", repr=False)

    def __post_init__(self):
        """Put the socket in blocking mode with the configured timeout."""
        self.socket.setblocking(True)

        if self.timeout:
            self.socket.settimeout(self.timeout)

    @property
    def client_ip(self) -> str:
        """Get the client IP address."""
        return self.address[0]

    @property
    def age(self) -> float:
        """Get connection age in seconds."""
        return time.time() - self.created_at

    # =========================================================================
    # READING
    # =========================================================================

    def read_request_line(self) -> Optional[bytes]:
        """
        Read the first line sent by the client.

        ┌─────────────────────────────────────────────────────────────────┐
        │                  read_request_line() Flow                        │
        ├─────────────────────────────────────────────────────────────────┤
        │                                                                  │
        │   while no "\n" in buffer:                                       │
        │       recv() → buffer                                            │
        │       client closed?  → stop reading                             │
        │       buffer too big? → ValueError                               │
        │                                                                  │
        │   "\n" found      → return bytes up to and including it          │
        │   closed, partial → return what we have (like readline())        │
        │   closed, nothing → return None                                  │
        │                                                                  │
        └─────────────────────────────────────────────────────────────────┘

        Returns:
            The raw line bytes, or None if the client sent nothing.

        Raises:
            ValueError: If the line exceeds max_line_size.
            TimeoutError: If a timeout is configured and it expires.
        """
        self.state = ConnectionState.READING

        try:
            while b"\n" not in self._buffer:
                if len(self._buffer) > self.max_line_size:
                    raise ValueError(f"Request line too long: more than {self.max_line_size} bytes")

                chunk = self._recv()
                if not chunk:
                    break  # Connection closed by client

                self._buffer += chunk

        except socket.timeout:
            raise TimeoutError("Request line read timeout")

        newline = self._buffer.find(b"\n")

        if newline == -1:
            line, self._buffer = self._buffer, b""
            return line or None

        line = self._buffer[:newline + 1]
        self._buffer = self._buffer[newline + 1:]

        if len(line) > self.max_line_size:
            raise ValueError(f"Request line too long: {len(line)} bytes")

        return line

    def _recv(self) -> bytes:
        """
        Receive data from socket with error handling.

        Returns:
            Received bytes, or empty bytes if the connection was reset.
        """
        try:
            return self.socket.recv(self.buffer_size)
        except (ConnectionResetError, BrokenPipeError):
            return b""

    # =========================================================================
    # WRITING
    # =========================================================================

    def send_response(self, data: bytes) -> bool:
        """
        Send response data to the client.

        Uses sendall() so the whole response goes out, not just the
        part that fit in the kernel buffer.

        Returns:
            True if send succeeded, False if connection lost.
        """
        self.state = ConnectionState.WRITING

        try:
            self.socket.sendall(data)
            return True
        except (ConnectionResetError, BrokenPipeError, OSError) as e:
            logger.warning(f"[{self.id}] Send failed: {e}")
            return False

    # =========================================================================
    # CLOSING
    # =========================================================================

    def close(self):
        """
        Close the connection gracefully.

        1. shutdown(SHUT_WR): send FIN, the client sees end-of-body
        2. Drain: read whatever the client still sends (headers we never
           parsed), so the kernel does not answer with a RST. Stops after
           DRAIN_TIMEOUT seconds or DRAIN_MAX_BYTES bytes in total
        3. close(): release the file descriptor

        Safe to call more than once.
        """
        if self.state == ConnectionState.CLOSED:
            return

        self.state = ConnectionState.CLOSING

        try:
            self.socket.shutdown(socket.SHUT_WR)
        except OSError:
            pass  # Already disconnected

        deadline = time.time() + DRAIN_TIMEOUT
        drained = 0

        try:
            while drained < DRAIN_MAX_BYTES:
                remaining = deadline - time.time()
                if remaining <= 0:
                    break

                self.socket.settimeout(remaining)
                chunk = self.socket.recv(1024)
                if not chunk:
                    break
                drained += len(chunk)
        except (socket.timeout, OSError):
            pass

        try:
            self.socket.close()
        except OSError:
            pass

        self.state = ConnectionState.CLOSED
        logger.debug(f"[{self.id}] Connection closed after {self.age:.3f}s")

    def __enter__(self):
        """
        Context manager entry.

            with conn:
                line = conn.read_request_line()
                conn.send_response(response)
        """
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - ensure connection is closed."""
        self.close()
        return False  # Don't suppress exceptions
