"""
=============================================================================
HTML FILE HANDLER
=============================================================================

Serves one fixed HTML file from the document root.

    GET /            → <document_root>/index.html
    GET /words.html  → <document_root>/words.html

The file name is fixed when the handler is created; nothing in the
request can change which file is read, so there is no path traversal
to guard against.

=============================================================================
MISSING FILES
=============================================================================

A missing or unreadable file is NOT a 404. The OSError propagates to
the connection handler, which logs it and closes the connection without
sending anything:

    handle()
      └──► html_file(path)
              └──► open() raises FileNotFoundError
                      └──► server logs "[conn] ... No such file"
                           and closes the socket

=============================================================================
"""

import logging
from pathlib import Path
from typing import Union

from ..http.request import HTTPRequest
from ..http.response import HTTPResponse, html_file


logger = logging.getLogger(__name__)


class HTMLFileHandler:
    """
    Handler that answers every request with the same HTML file.

    Usage:
        index = HTMLFileHandler(".", "index.html")
        response = index.handle(request)
    """

    def __init__(self, root_dir: Union[str, Path], file_name: str):
        """
        Args:
            root_dir: Directory the file lives in (read relative to the
                      working directory if not absolute).
            file_name: Name of the file inside root_dir.
        """
        self.root_dir = Path(root_dir)
        self.file_name = file_name

    @property
    def path(self) -> Path:
        """Full path of the served file."""
        return self.root_dir / self.file_name

    def handle(self, request: HTTPRequest) -> HTTPResponse:
        """
        Read the file and wrap it in a text/html response.

        Raises:
            OSError: If the file cannot be read.
        """
        logger.debug(f"Serving {self.path} for {request.path}")
        return html_file(self.path)
