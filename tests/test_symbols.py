"""Tests for the symbol table (core/symbols.py)."""

from __future__ import annotations

import pytest

from romanum.core.symbols import SYMBOL_MAGNITUDES, lookup
from romanum.exceptions import InvalidCharError

EXPECTED = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


class TestSymbolMagnitudes:
    def test_contents(self) -> None:
        assert dict(SYMBOL_MAGNITUDES) == EXPECTED

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            SYMBOL_MAGNITUDES["K"] = 5000  # type: ignore[index]


class TestLookup:
    @pytest.mark.parametrize(("letter", "magnitude"), sorted(EXPECTED.items()))
    def test_uppercase(self, letter: str, magnitude: int) -> None:
        assert lookup(letter) == magnitude

    @pytest.mark.parametrize(("letter", "magnitude"), sorted(EXPECTED.items()))
    def test_lowercase(self, letter: str, magnitude: int) -> None:
        assert lookup(letter.lower()) == magnitude

    def test_invalid_keeps_original_character(self) -> None:
        with pytest.raises(InvalidCharError) as exc_info:
            lookup("q", position=4)
        assert exc_info.value.char == "q"
        assert exc_info.value.position == 4

    def test_non_ascii_lookalike_rejected(self) -> None:
        # "ı".upper() == "I", but only ASCII letters fold.
        with pytest.raises(InvalidCharError):
            lookup("ı")

    @pytest.mark.parametrize("text", ["", "XI"])
    def test_requires_single_character(self, text: str) -> None:
        with pytest.raises(ValueError):
            lookup(text)
