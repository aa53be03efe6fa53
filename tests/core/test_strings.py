"""Tests for string helpers."""

from __future__ import annotations

import pytest

from utilkit.core.strings import (
    DEFAULT_TRUNCATION_MARKER,
    capitalize,
    initials,
    safe_parse,
    truncate_middle,
)
from utilkit.core.types import UNDEFINED


class TestCapitalize:
    @pytest.mark.parametrize(
        "text,expected",
        [("hello", "Hello"), ("hello World", "Hello World"), ("hELLO", "HELLO"), ("", ""), ("1a", "1a")],
    )
    def test_capitalize(self, text: str, expected: str) -> None:
        assert capitalize(text) == expected


class TestInitials:
    def test_two_words(self) -> None:
        assert initials("John Doe") == "JD"

    def test_collapses_whitespace(self) -> None:
        assert initials("  ada   lovelace ") == "AL"

    def test_single_word(self) -> None:
        assert initials("plato") == "P"

    @pytest.mark.parametrize("value", ["", "   ", None, UNDEFINED])
    def test_blank_or_absent(self, value: object) -> None:
        assert initials(value) is None  # type: ignore[arg-type]


class TestTruncateMiddle:
    def test_front_and_back(self) -> None:
        assert truncate_middle("0x1234567890abcdef", 4, 4, "...") == "0x12...cdef"

    def test_default_marker(self) -> None:
        assert DEFAULT_TRUNCATION_MARKER == "&hellip;"
        assert truncate_middle("Hello, world!", 5, 0) == "Hello&hellip;"

    def test_front_only_when_back_is_zero(self) -> None:
        assert truncate_middle("abcdefgh", 3, 0, "~") == "abc~"

    def test_zero_lengths_return_input(self) -> None:
        assert truncate_middle("abcdef") == "abcdef"

    def test_lengths_reaching_text_return_input(self) -> None:
        assert truncate_middle("abcdef", 6, 0) == "abcdef"
        assert truncate_middle("abcdef", 0, 6) == "abcdef"
        assert truncate_middle("abcdef", 3, 3) == "abcdef"

    def test_lengths_round_half_up(self) -> None:
        assert truncate_middle("abcdefghij", 1.5, 1.4, "-") == "ab-j"

    @pytest.mark.parametrize("value", [None, UNDEFINED])
    def test_absent(self, value: object) -> None:
        assert truncate_middle(value, 2, 2) is None  # type: ignore[arg-type]


class TestSafeParse:
    def test_object(self) -> None:
        assert safe_parse('{"key": "value"}') == {"key": "value"}

    @pytest.mark.parametrize(
        "text,expected", [("[1, 2]", [1, 2]), ("42", 42), ('"s"', "s"), ("true", True)]
    )
    def test_scalars_and_arrays(self, text: str, expected: object) -> None:
        assert safe_parse(text) == expected

    @pytest.mark.parametrize("text", ["invalid", "", "{'single': 1}", "{"])
    def test_invalid_json(self, text: str) -> None:
        assert safe_parse(text) is None

    @pytest.mark.parametrize("value", [None, UNDEFINED, 42, b"{}"])
    def test_non_string(self, value: object) -> None:
        assert safe_parse(value) is None

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", "[1, NaN]"])
    def test_non_standard_constants_are_rejected(self, text: str) -> None:
        assert safe_parse(text) is None

    def test_excessive_nesting_is_absent(self) -> None:
        depth = 100_000
        assert safe_parse("[" * depth + "]" * depth) is None

    def test_json_null(self) -> None:
        """Decoded null and failure are indistinguishable."""
        assert safe_parse("null") is None
