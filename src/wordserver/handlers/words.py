"""
=============================================================================
WORD HANDLERS
=============================================================================

The four routes that work on the "word" query parameter:

    GET /echo?word=cat          → "cat"
    GET /palindrome?word=madam  → "yes"
    GET /duplicates?word=code   → "no"
    GET /reverse?word=banana    → "ananab"

All of them answer with text/plain.

=============================================================================
THE "word" PARAMETER IS REQUIRED
=============================================================================

    /reverse?word=     → word is ""  → "" (valid, empty body)
    /reverse?word      → word is ""  → "" (valid, empty body)
    /reverse           → MissingParameterError → connection closed

=============================================================================
"""

from ..http.request import HTTPRequest
from ..http.response import HTTPResponse, plaintext
from ..words import reverse_word, is_palindrome, has_duplicate_characters


WORD_PARAM = "word"


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def echo(request: HTTPRequest) -> HTTPResponse:
    """Send the word straight back."""
    return plaintext(request.require_query(WORD_PARAM))


def palindrome(request: HTTPRequest) -> HTTPResponse:
    """Answer "yes" if the word is a palindrome, "no" otherwise."""
    word = request.require_query(WORD_PARAM)
    return plaintext(_yes_no(is_palindrome(word)))


def duplicates(request: HTTPRequest) -> HTTPResponse:
    """Answer "yes" if any character repeats in the word, "no" otherwise."""
    word = request.require_query(WORD_PARAM)
    return plaintext(_yes_no(has_duplicate_characters(word)))


def reverse(request: HTTPRequest) -> HTTPResponse:
    """Send the word back reversed."""
    return plaintext(reverse_word(request.require_query(WORD_PARAM)))
