"""Tests for punctuation trimming."""

import pytest

from findurls.core.punctuation import remove_punctuation


@pytest.mark.parametrize("text,expected", [
    ("example.com.", "example.com"),
    ("(example.com)", "example.com"),
    ("((example.com))", "example.com"),
    ("[example.com].", "example.com"),
    ("<https://example.com/>", "https://example.com/"),
    ("https://en.wikipedia.org/wiki/Stack_(data_structure)", "https://en.wikipedia.org/wiki/Stack_(data_structure)"),
    ("example.com/path_(foo)", "example.com/path_(foo)"),
    ("example.com)", "example.com"),
    ("(example.com", "example.com"),
    ("“example.com”", "example.com"),
    ("example.com—", "example.com"),
])
def test_remove_punctuation(text, expected):
    """Test punctuation is stripped while balanced pairs survive."""
    assert remove_punctuation(text) == expected


def test_unbalanced_closer_after_balanced_pair():
    """Test only the extra closing bracket is removed."""
    assert remove_punctuation("example.com/a_(b))") == "example.com/a_(b)"


def test_leading_quote_removed():
    """Test a leading quote is always removed."""
    assert remove_punctuation('"example.com') == "example.com"


def test_only_punctuation():
    """Test a string of punctuation trims to nothing."""
    assert remove_punctuation("...") == ""
    assert remove_punctuation("(") == ""


def test_empty_string():
    """Test empty input."""
    assert remove_punctuation("") == ""


def test_no_punctuation_unchanged():
    """Test clean URLs are returned as-is."""
    assert remove_punctuation("https://example.com/path") == "https://example.com/path"


@pytest.mark.parametrize("text", [
    "((example.com)).",
    "[<https://a.com/x_(y)>]",
    "‘example.com’!",
    "'example.com'",
    "--example.com--",
    "example.com/a)b)",
])
def test_trimming_is_stable(text):
    """Test trimming twice gives the same result as trimming once."""
    once = remove_punctuation(text)
    assert remove_punctuation(once) == once
