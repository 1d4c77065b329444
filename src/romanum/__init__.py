"""romanum — Roman numeral parsing and formatting.

Converts Roman numeral text to integers and integers to canonical
Roman numerals, with a small line-oriented CLI on top.
"""

from romanum.core.formatter import format_roman_numeral
from romanum.core.parser import parse_roman_numeral
from romanum.version import __version__

__all__: list[str] = [
    "__version__",
    "format_roman_numeral",
    "parse_roman_numeral",
]
