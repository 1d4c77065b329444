"""Core layer — pure conversion logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Every function is deterministic and stateless.
"""

from romanum.core.conversion import convert
from romanum.core.formatter import CANONICAL_FRAGMENTS, format_roman_numeral
from romanum.core.models import Conversion
from romanum.core.parser import parse_roman_numeral
from romanum.core.symbols import SYMBOL_MAGNITUDES, lookup

__all__: list[str] = [
    "CANONICAL_FRAGMENTS",
    "Conversion",
    "SYMBOL_MAGNITUDES",
    "convert",
    "format_roman_numeral",
    "lookup",
    "parse_roman_numeral",
]
