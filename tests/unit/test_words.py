"""
Unit tests for the word utilities.
"""

import pytest

from wordserver.words import reverse_word, is_palindrome, has_duplicate_characters


SAMPLES = ["", "a", "banana", "racecar", "Racecar", "ab ba", "123321", "héllo", "日本語"]


class TestReverseWord:
    """Tests for reverse_word()."""

    @pytest.mark.parametrize("word, expected", [
        ("banana", "ananab"),
        ("html", "lmth"),
        ("havalo", "olavah"),
        ("", ""),
        ("x", "x"),
    ])
    def test_reverse(self, word, expected):
        """Test known reversals."""
        assert reverse_word(word) == expected

    @pytest.mark.parametrize("word", SAMPLES)
    def test_reverse_twice_is_identity(self, word):
        """Test that reversing twice gives the original word back."""
        assert reverse_word(reverse_word(word)) == word

    def test_matches_slice(self):
        """Test agreement with slice reversal on non-ASCII input."""
        word = "añb€c🙂"
        assert reverse_word(word) == word[::-1]


class TestIsPalindrome:
    """Tests for is_palindrome()."""

    @pytest.mark.parametrize("word", ["madam", "racecar", "123321", "", "a", "abba"])
    def test_palindromes(self, word):
        """Test words that read the same both ways."""
        assert is_palindrome(word) is True

    @pytest.mark.parametrize("word", ["dog", "ab", "Madam", "race car"])
    def test_not_palindromes(self, word):
        """Test words that do not, including case and spacing differences."""
        assert is_palindrome(word) is False

    @pytest.mark.parametrize("word", SAMPLES)
    def test_agrees_with_reverse(self, word):
        """Test is_palindrome(s) == (s == reverse_word(s))."""
        assert is_palindrome(word) == (word == reverse_word(word))


class TestHasDuplicateCharacters:
    """Tests for has_duplicate_characters()."""

    @pytest.mark.parametrize("word, expected", [
        ("code", False),
        ("java", True),
        ("mmmmm", True),
        ("abcdefghijklmnopqrstuvwxyz", False),
        ("12341", True),
        ("", False),
        ("a", False),
    ])
    def test_known_words(self, word, expected):
        """Test the classic examples."""
        assert has_duplicate_characters(word) is expected

    def test_case_sensitive(self):
        """Test that upper and lower case are different characters."""
        assert has_duplicate_characters("aA") is False

    def test_extended_ascii(self):
        """Test characters in the 128-255 range."""
        assert has_duplicate_characters("éÿé") is True
        assert has_duplicate_characters("éÿ") is False

    def test_beyond_latin1(self):
        """Test code points above 255."""
        assert has_duplicate_characters("日本日") is True
        assert has_duplicate_characters("日本語") is False

    @pytest.mark.parametrize("word", SAMPLES)
    def test_agrees_with_set_size(self, word):
        """Test that the result is False exactly when all characters are distinct."""
        assert has_duplicate_characters(word) == (len(set(word)) != len(word))
