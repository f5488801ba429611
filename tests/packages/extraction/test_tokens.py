"""Tests for quoted-token matching and string helpers."""

import pytest

from packages.extraction.tokens import (
    after,
    quoted_tokens,
    remove_leading_and_ending_quotes,
)


class TestQuotedTokens:
    """Test the shortest-match, left-to-right quoted-token scan."""

    def test_tokens_in_order(self) -> None:
        line = '"period": { "value": "5000", "description": "Every period" },'
        assert quoted_tokens(line) == ["period", "value", "5000", "description", "Every period"]

    def test_empty_token_keeps_its_position(self) -> None:
        """Test an empty pair of quotes is a token of its own."""
        assert quoted_tokens('"a" : "" "b"') == ["a", "", "b"]

    def test_backslash_does_not_escape_quote(self) -> None:
        """Test a quote preceded by a backslash still ends the token."""
        assert quoted_tokens(r'"say \"hi\" now"') == ["say \\", " now"]

    def test_unpaired_trailing_quote_ignored(self) -> None:
        assert quoted_tokens('"a" "b') == ["a"]

    @pytest.mark.parametrize("line", ["", "   ", "{", "no quotes here"])
    def test_no_tokens(self, line: str) -> None:
        assert quoted_tokens(line) == []


class TestAfter:
    """Test text-after-marker lookup."""

    def test_returns_text_after_first_marker(self) -> None:
        assert after("a=b=c", "=") == "b=c"

    def test_marker_at_end(self) -> None:
        assert after("key:", ":") == ""

    def test_missing_marker(self) -> None:
        assert after("abc", "x") is None


class TestRemoveLeadingAndEndingQuotes:
    """Test single-layer quote unwrapping."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ('"quoted"', "quoted"),
            ("'single'", "single"),
            ('  "padded"  ', "padded"),
            ('""double""', '"double"'),
            ("plain", "plain"),
            ('"unbalanced', '"unbalanced'),
            ("'mixed\"", "'mixed\""),
            ('"', '"'),
            ("", ""),
        ],
    )
    def test_unwrapping(self, value: str, expected: str) -> None:
        assert remove_leading_and_ending_quotes(value) == expected

    def test_unquoted_value_keeps_whitespace(self) -> None:
        """Test values without wrapping quotes are returned untouched."""
        assert remove_leading_and_ending_quotes(" plain ") == " plain "
