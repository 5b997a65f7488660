"""
Unit Tests for Text Helpers

Tests slugify, truncate and camel_case including:
- Documented examples
- Edge trimming and idempotence
- Byte-length truncation
"""

import pytest

from ash_helpers import slugify, truncate, camel_case, camelCase


class TestSlugify:
    """Test cases for slugify."""

    def test_punctuation_collapses(self):
        """Test that runs of punctuation and spaces become one hyphen."""
        assert slugify("Hello, World!") == "hello-world"

    def test_surrounding_whitespace_trimmed(self):
        """Test that surrounding whitespace does not leave hyphens behind."""
        assert slugify("  spaced  ") == "spaced"

    def test_empty(self):
        """Test slugify of empty text."""
        assert slugify("") == ""

    def test_only_symbols(self):
        """Test text with no slug characters at all."""
        assert slugify("!!! ???") == ""

    def test_literal_hyphens_kept(self):
        """Test that hyphens already in the text are not trimmed."""
        assert slugify("-dash-") == "-dash-"
        assert slugify("Already-Slugged") == "already-slugged"

    def test_interior_runs(self):
        """Test mixed separators inside the text."""
        assert slugify("multiple   spaces & symbols!!") == "multiple-spaces-symbols"
        assert slugify("tabs\tand\nnewlines") == "tabs-and-newlines"

    def test_non_ascii_replaced(self):
        """Test that non-ASCII letters are treated as separators."""
        assert slugify("Ünïcode Text") == "n-code-text"

    def test_idempotent(self, sample_texts):
        """Test that slugifying a slug changes nothing."""
        for text in sample_texts:
            once = slugify(text)
            assert slugify(once) == once


class TestTruncate:
    """Test cases for truncate."""

    def test_truncates_with_suffix(self):
        """Test truncation of text longer than the limit."""
        assert truncate("abcdefgh", 5) == "abcde..."

    def test_short_text_unchanged(self):
        """Test that text under the limit is returned as is."""
        assert truncate("abc", 5) == "abc"

    def test_exact_length_unchanged(self):
        """Test that text of exactly the limit is not truncated."""
        assert truncate("abcde", 5) == "abcde"

    def test_default_length(self):
        """Test the default limit of 100."""
        assert truncate("a" * 100) == "a" * 100
        assert truncate("a" * 150) == "a" * 100 + "..."

    def test_custom_suffix(self):
        """Test a custom suffix."""
        assert truncate("abcdefgh", 3, " [more]") == "abc [more]"
        assert truncate("abcdefgh", 3, "") == "abc"

    def test_length_measured_in_bytes(self):
        """Test that multi-byte characters count by their UTF-8 size."""
        # "héllo" is six bytes long
        assert truncate("héllo", 6) == "héllo"
        assert truncate("héllo", 5) == "héll..."

    def test_split_character_dropped(self):
        """Test that a character cut in half is left out."""
        assert truncate("héllo", 2) == "h..."


class TestCamelCase:
    """Test cases for camel_case."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("my-variable_name", "myVariableName"),
            ("hello world", "helloWorld"),
            ("Hello World", "helloWorld"),
            ("multiple--separators__here", "multipleSeparatorsHere"),
            ("alreadyCamel", "alreadyCamel"),
            ("XML-parser", "xMLParser"),
            ("", ""),
        ],
    )
    def test_conversion(self, text, expected):
        """Test conversion of separated words."""
        assert camel_case(text) == expected

    def test_leading_separator(self):
        """Test that a leading separator does not capitalise the first word."""
        assert camel_case("_private_name") == "privateName"

    def test_framework_alias(self):
        """Test that the camelCase name points at the same helper."""
        assert camelCase is camel_case
