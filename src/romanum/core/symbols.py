"""Symbol table mapping the seven Roman letters to their magnitudes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from romanum.exceptions import InvalidCharError

SYMBOL_MAGNITUDES: Mapping[str, int] = MappingProxyType(
    {
        "I": 1,
        "V": 5,
        "X": 10,
        "L": 50,
        "C": 100,
        "D": 500,
        "M": 1000,
    }
)
"""Read-only ``letter -> magnitude`` table, keyed by uppercase letter."""


def lookup(char: str, *, position: int = 0) -> int:
    """Return the magnitude of a single numeral character.

    Matching is case-insensitive for ASCII letters only, so characters
    such as ``"ı"`` (whose uppercase form is ``"I"``) are rejected.

    Parameters
    ----------
    char:
        Exactly one character.
    position:
        Index of *char* in the surrounding string, reported on failure.

    Raises
    ------
    InvalidCharError
        If *char* is not one of ``IVXLCDM`` in either case.
    ValueError
        If *char* is not a single character.
    """
    if len(char) != 1:
        raise ValueError(f"lookup expects a single character, got {char!r}")
    if char.isascii():
        magnitude = SYMBOL_MAGNITUDES.get(char.upper())
        if magnitude is not None:
            return magnitude
    raise InvalidCharError(char, position)
