"""Domain models for romanum.

Frozen dataclasses only: immutable value objects with no behaviour
beyond data access and trivially derived properties.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Conversion:
    """Outcome of converting one driver-level input."""

    source: str
    """Input text after surrounding whitespace was stripped."""

    value: int
    """Integer value of the input."""

    numeral: str
    """Canonical Roman numeral for :attr:`value`."""

    from_numeral: bool
    """``True`` when *source* was a numeral (parse direction), ``False``
    when it was a decimal integer (format direction)."""

    @property
    def is_canonical(self) -> bool:
        """Whether a numeral source already spells the canonical form."""
        return self.from_numeral and self.source.upper() == self.numeral.upper()
