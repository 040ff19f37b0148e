"""
=============================================================================
WORD UTILITIES
=============================================================================

The string functions behind the word routes:

    /reverse      → reverse_word()
    /palindrome   → is_palindrome()
    /duplicates   → has_duplicate_characters()

All three are pure, O(n), and safe to call from any worker thread.

=============================================================================
EXAMPLES
=============================================================================

    reverse_word("banana")               → "ananab"
    is_palindrome("racecar")             → True
    is_palindrome("Racecar")             → False   (case-sensitive)
    has_duplicate_characters("code")     → False
    has_duplicate_characters("java")     → True

=============================================================================
"""

from typing import Set


def reverse_word(word: str) -> str:
    """
    Return the characters of `word` in reverse order.

    Walks the string from the last character to the first and collects
    each one into a list, then joins them back together.

        "html"   → "lmth"
        "havalo" → "olavah"
        ""       → ""
    """
    reversed_chars = []

    for i in range(len(word) - 1, -1, -1):
        reversed_chars.append(word[i])

    return "".join(reversed_chars)


def is_palindrome(word: str) -> bool:
    """
    Check whether `word` reads the same backward as forward.

    Exact comparison: no case folding, no whitespace stripping.
    The empty string is a palindrome.

        "madam"  → True
        "123321" → True
        "dog"    → False
    """
    return word == reverse_word(word)


def has_duplicate_characters(word: str) -> bool:
    """
    Check whether any character appears more than once in `word`.

    =========================================================================
    ALGORITHM
    =========================================================================

    Scan left to right, remembering every character seen so far.
    The first character already in the set is a duplicate, so we can
    stop right there.

        "12341"
         ▲▲▲▲▲
         │││││
         ││││└── "1" already seen → True
         │││└─── add "4"
         ││└──── add "3"
         │└───── add "2"
         └────── add "1"

    A set works for any code point, not just the 0-255 range.

    =========================================================================
    """
    seen: Set[str] = set()

    for char in word:
        if char in seen:
            return True
        seen.add(char)

    return False
