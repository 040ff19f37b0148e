"""
pytest configuration and fixtures.
"""

import socket
import threading
from pathlib import Path
from typing import Generator

import pytest

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wordserver import WordServer, ServerConfig


INDEX_HTML = b"<html><body><h1>Index</h1></body></html>"
WORDS_HTML = b"<html><body><h1>Words</h1></body></html>"


@pytest.fixture
def document_root(tmp_path: Path) -> Path:
    """Directory with both HTML pages in it."""
    (tmp_path / "index.html").write_bytes(INDEX_HTML)
    (tmp_path / "words.html").write_bytes(WORDS_HTML)
    return tmp_path


@pytest.fixture
def free_port() -> int:
    """Get a free port for testing."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


class TestServer:
    """Test server helper that runs in a background thread."""

    __test__ = False  # Not a test class, despite the name

    def __init__(self, server: WordServer):
        self.server = server
        self._thread: threading.Thread = None

    @property
    def port(self) -> int:
        return self.server.address[1]

    def start(self):
        """Start server in background thread and wait until it listens."""
        self._thread = threading.Thread(target=self.server.run, daemon=True)
        self._thread.start()

        if not self.server.wait_until_ready(timeout=5.0):
            raise RuntimeError("Server failed to start")

    def stop(self):
        """Stop the server."""
        self.server.shutdown()

        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)

    def request(self, data: bytes, timeout: float = 5.0) -> bytes:
        """Send raw bytes, return everything the server sends back before closing."""
        with socket.create_connection(("127.0.0.1", self.port), timeout=timeout) as sock:
            sock.sendall(data)

            chunks = []
            while True:
                chunk = sock.recv(4096)
                if not chunk:
                    break
                chunks.append(chunk)

        return b"".join(chunks)

    def get(self, target: str) -> bytes:
        """Send a GET request the way a browser would."""
        return self.request(
            f"GET {target} HTTP/1.0\r\n"
            f"Host: localhost\r\n"
            f"\r\n".encode("utf-8")
        )


def make_server(document_root: Path, free_port: int) -> TestServer:
    return TestServer(WordServer(ServerConfig(
        host="127.0.0.1",
        port=free_port,
        document_root=str(document_root),
        log_level="WARNING",
    )))


@pytest.fixture
def test_server(document_root: Path, free_port: int) -> Generator[TestServer, None, None]:
    """A running server with both HTML pages available."""
    test_srv = make_server(document_root, free_port)
    test_srv.start()

    yield test_srv

    test_srv.stop()


@pytest.fixture
def empty_root_server(tmp_path: Path, free_port: int) -> Generator[TestServer, None, None]:
    """A running server whose document root has no HTML files."""
    test_srv = make_server(tmp_path, free_port)
    test_srv.start()

    yield test_srv

    test_srv.stop()
