"""Driver-facing composition of the parser and formatter.

Decimal input (``"1984"``, ``"-3"``) is formatted; anything else is
parsed and then re-formatted so callers can show the canonical form.

Decimal input is capped at :data:`MAX_DECIMAL_INPUT`; the formatter
itself is unbounded and emits one ``M`` per thousand.
"""

from __future__ import annotations

import logging
import re

from romanum.core.formatter import format_roman_numeral
from romanum.core.models import Conversion
from romanum.core.parser import parse_roman_numeral
from romanum.exceptions import ValueTooLargeError

logger = logging.getLogger(__name__)

MAX_DECIMAL_INPUT = 1_000_000
"""Largest decimal the driver will format (renders as 1000 ``M``)."""

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def is_decimal(text: str) -> bool:
    """Return ``True`` for an optionally signed run of ASCII digits."""
    return _DECIMAL_RE.fullmatch(text) is not None


def decimal_value(text: str) -> int:
    """Convert a decimal string, rejecting magnitudes above the ceiling.

    Leading zeros and the sign are stripped and the digit count checked
    before ``int()``, so no input reaches the interpreter's digit limit.

    Raises
    ------
    ValueTooLargeError
        If the magnitude exceeds :data:`MAX_DECIMAL_INPUT`.
    """
    significant = text.lstrip("+-").lstrip("0")
    if len(significant) > len(str(MAX_DECIMAL_INPUT)):
        raise ValueTooLargeError(text, MAX_DECIMAL_INPUT)
    value = int(significant or "0")
    if text.startswith("-"):
        value = -value
    if value > MAX_DECIMAL_INPUT:
        raise ValueTooLargeError(text, MAX_DECIMAL_INPUT)
    return value


def convert(text: str, *, lowercase: bool = False) -> Conversion:
    """Convert one line of user input in whichever direction applies.

    Raises
    ------
    ConversionError
        If a numeral input cannot be parsed.
    NegativeValueError
        If a decimal input is below zero.
    ValueTooLargeError
        If a decimal input is above :data:`MAX_DECIMAL_INPUT`.
    """
    source = text.strip()

    if is_decimal(source):
        value = decimal_value(source)
        numeral = format_roman_numeral(value, lowercase=lowercase)
        logger.debug("Formatted %d as %r", value, numeral)
        return Conversion(source=source, value=value, numeral=numeral, from_numeral=False)

    value = parse_roman_numeral(source)
    numeral = format_roman_numeral(value, lowercase=lowercase)
    logger.debug("Parsed %r as %d (canonical %r)", source, value, numeral)
    return Conversion(source=source, value=value, numeral=numeral, from_numeral=True)
