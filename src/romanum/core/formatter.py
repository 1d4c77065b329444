"""Integer -> canonical Roman numeral string.

Greedy over a descending table of building blocks that already includes
the six subtractive pairs, which yields the minimal-length spelling.
There is no upper bound; values past 3999 simply repeat ``M``.
"""

from __future__ import annotations

from romanum.exceptions import NegativeValueError

CANONICAL_FRAGMENTS: tuple[tuple[str, int], ...] = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)


def format_roman_numeral(value: int, *, lowercase: bool = False) -> str:
    """Render *value* as its canonical Roman numeral.

    ``0`` renders as the empty string.  With *lowercase* the same
    numeral is returned in lowercase (``14 -> "xiv"``).

    Raises
    ------
    NegativeValueError
        If *value* is below zero.
    TypeError
        If *value* is not an ``int`` (``bool`` included).
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if value < 0:
        raise NegativeValueError(value)

    fragments: list[str] = []
    remaining = value
    for fragment, magnitude in CANONICAL_FRAGMENTS:
        count, remaining = divmod(remaining, magnitude)
        fragments.append(fragment * count)

    numeral = "".join(fragments)
    return numeral.lower() if lowercase else numeral
