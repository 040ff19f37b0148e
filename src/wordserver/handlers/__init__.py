"""
=============================================================================
REQUEST HANDLERS
=============================================================================

1. HTMLFileHandler
   - Serves one fixed HTML file from the document root
   - Used for "/" (index.html) and "/words.html"

2. Word handlers (echo, palindrome, duplicates, reverse)
   - Plain functions taking an HTTPRequest
   - Read the required "word" query parameter
   - Answer with text/plain

=============================================================================
"""

from .static import HTMLFileHandler
from .words import echo, palindrome, duplicates, reverse

__all__ = [
    "HTMLFileHandler",
    "echo",
    "palindrome",
    "duplicates",
    "reverse",
]
