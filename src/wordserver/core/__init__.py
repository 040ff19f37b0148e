"""
=============================================================================
CORE NETWORKING COMPONENTS
=============================================================================

    socket_server.py   Listening socket and accept loop
    connection.py      One client socket: read a line, send, close

=============================================================================
"""

from .connection import Connection, ConnectionState
from .socket_server import SocketServer

__all__ = [
    "Connection",
    "ConnectionState",
    "SocketServer",
]
