"""Tests for the canonical formatter (core/formatter.py)."""

from __future__ import annotations

import pytest

from romanum.core.formatter import CANONICAL_FRAGMENTS, format_roman_numeral
from romanum.core.parser import parse_roman_numeral
from romanum.exceptions import NegativeValueError


class TestKnownValues:
    @pytest.mark.parametrize(
        ("value", "numeral"),
        [
            (0, ""),
            (1, "I"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (90, "XC"),
            (400, "CD"),
            (900, "CM"),
            (1984, "MCMLXXXIV"),
            (2023, "MMXXIII"),
            (3999, "MMMCMXCIX"),
            (4000, "MMMM"),
            (5000, "MMMMM"),
        ],
    )
    def test_numeral(self, value: int, numeral: str) -> None:
        assert format_roman_numeral(value) == numeral

    def test_lowercase(self) -> None:
        assert format_roman_numeral(14, lowercase=True) == "xiv"


class TestCanonicalForm:
    def test_fragments_descend(self) -> None:
        magnitudes = [magnitude for _, magnitude in CANONICAL_FRAGMENTS]
        assert magnitudes == sorted(magnitudes, reverse=True)

    def test_no_four_repeated_letters_below_4000(self) -> None:
        for value in range(1, 4000):
            numeral = format_roman_numeral(value)
            for letter in "IXC":
                assert letter * 4 not in numeral, value
            for letter in "VLD":
                assert letter * 2 not in numeral, value


class TestRoundTrip:
    def test_full_range(self) -> None:
        for value in range(1, 10_000):
            assert parse_roman_numeral(format_roman_numeral(value)) == value

    @pytest.mark.parametrize(
        "value", [1, 4, 5, 9, 40, 90, 400, 900, 1000, 4000, 9000, 9999]
    )
    def test_boundaries(self, value: int) -> None:
        assert parse_roman_numeral(format_roman_numeral(value)) == value


class TestInvalidInput:
    def test_negative_rejected(self) -> None:
        with pytest.raises(NegativeValueError) as exc_info:
            format_roman_numeral(-1)
        assert exc_info.value.value == -1

    @pytest.mark.parametrize("value", [1.5, "12", None, True])
    def test_non_int_rejected(self, value: object) -> None:
        with pytest.raises(TypeError):
            format_roman_numeral(value)  # type: ignore[arg-type]
