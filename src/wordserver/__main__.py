"""
=============================================================================
WORD SERVER CLI ENTRY POINT
=============================================================================

    # Run with defaults (127.0.0.1:4444, HTML files from the current dir)
    python -m wordserver

    # Custom port
    python -m wordserver --port 8000

    # Listen on all interfaces
    python -m wordserver --host 0.0.0.0

    # Serve the HTML pages from another directory
    python -m wordserver --root ./site

    # Drop clients that send nothing for 10 seconds
    python -m wordserver --timeout 10

=============================================================================
"""

import argparse
import sys

from . import __version__
from .server import WordServer
from .config import ServerConfig


def main(argv=None):
    """
    Main CLI entry point.

    Defaults come from ServerConfig.from_env(), so environment variables
    apply unless a flag overrides them.
    """
    defaults = ServerConfig.from_env()

    parser = argparse.ArgumentParser(
        prog="wordserver",
        description="Tiny HTTP/1.0 server for word utilities (echo, palindrome, duplicates, reverse)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wordserver                      # Run with defaults
  python -m wordserver --port 8000          # Custom port
  python -m wordserver --root ./site        # HTML files from ./site
        """
    )

    # ─────────────────────────────────────────────────────────────────────
    # NETWORK ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--host", "-H",
        default=defaults.host,
        help=f"Host to bind to (default: {defaults.host})"
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=defaults.port,
        help=f"Port to listen on (default: {defaults.port})"
    )

    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=defaults.timeout,
        help="Seconds to wait for a request line before dropping the client (default: wait forever)"
    )

    # ─────────────────────────────────────────────────────────────────────
    # FILES AND LOGGING
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--root", "-r",
        default=defaults.document_root,
        help=f"Directory holding index.html and words.html (default: {defaults.document_root})"
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        default=defaults.log_level.upper(),
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"WordServer {__version__}"
    )

    args = parser.parse_args(argv)

    config = ServerConfig(
        host=args.host,
        port=args.port,
        timeout=args.timeout,
        document_root=args.root,
        log_level=args.log_level,
    )

    try:
        server = WordServer(config)
        server.run()
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
