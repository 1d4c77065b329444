"""Roman numeral string -> integer.

The scan is permissive: ordering and repetition are not validated, so
non-canonical spellings such as ``"IIII"`` (4) or ``"IC"`` (99) are
accepted.  Only the character set and non-emptiness are enforced.
"""

from __future__ import annotations

from romanum.core.symbols import lookup
from romanum.exceptions import MalformedNumeralError


def parse_roman_numeral(text: str) -> int:
    """Convert *text* to its integer value.

    Each adjacent pair ``(current, next)`` contributes ``-current`` when
    ``current < next`` and ``+current`` otherwise; the last character is
    always added.  Whitespace is not stripped.

    Raises
    ------
    MalformedNumeralError
        If *text* is empty.
    InvalidCharError
        For the first unrecognised character, scanning left to right.
    """
    if not text:
        raise MalformedNumeralError("empty string")

    total = 0
    current_value = lookup(text[0], position=0)
    for position, char in enumerate(text[1:], start=1):
        next_value = lookup(char, position=position)
        total += -current_value if current_value < next_value else current_value
        current_value = next_value

    # The last character has no successor, so it is never subtracted.
    return total + current_value
