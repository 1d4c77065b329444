"""Custom exception hierarchy for romanum.

Every error that crosses a layer boundary inherits from
:class:`RomanumError`, so the CLI error boundary can render a clean
message (plus an optional hint) without leaking stack traces.

Hierarchy
---------
RomanumError
├── ConversionError
│   ├── InvalidCharError
│   └── MalformedNumeralError
├── NegativeValueError
├── ValueTooLargeError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations

_VALID_LETTERS_HINT = "Roman numerals use only the letters I, V, X, L, C, D and M."


class RomanumError(Exception):
    """Base exception for all romanum errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parsing ---------------------------------------------------------------

class ConversionError(RomanumError):
    """Raised when a numeral string cannot be converted to a value.

    Closed taxonomy: every parse failure is either an
    :class:`InvalidCharError` or a :class:`MalformedNumeralError`.
    """


class InvalidCharError(ConversionError):
    """Raised when a character outside ``IVXLCDM`` is encountered."""

    def __init__(self, char: str, position: int = 0) -> None:
        super().__init__(
            f"invalid character {char!r} at position {position}",
            hint=_VALID_LETTERS_HINT,
        )
        self.char: str = char
        """The offending character, exactly as it appeared in the input."""

        self.position: int = position
        """Zero-based index of :attr:`char` within the parsed string."""


class MalformedNumeralError(ConversionError):
    """Raised when the numeral as a whole is unusable (e.g. empty)."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason, hint="Enter at least one numeral letter, e.g. XIV.")
        self.reason: str = reason


# --- Formatting ------------------------------------------------------------

class NegativeValueError(RomanumError):
    """Raised when asked to format a value below zero."""

    def __init__(self, value: int) -> None:
        super().__init__(
            f"cannot format negative value {value}",
            hint="Roman numerals have no representation for negative numbers.",
        )
        self.value: int = value


class ValueTooLargeError(RomanumError):
    """Raised when a decimal input exceeds the driver ceiling."""

    def __init__(self, digits: str, limit: int) -> None:
        shown = digits if len(digits) <= 20 else f"{digits[:10]}...{digits[-5:]}"
        super().__init__(
            f"value {shown} exceeds the maximum of {limit}",
            hint=f"Enter a number between 0 and {limit}.",
        )
        self.limit: int = limit


# --- Configuration / environment -------------------------------------------

class ConfigurationError(RomanumError):
    """Raised when an environment setting holds an unusable value."""


class EnvironmentError(RomanumError):
    """Raised when an optional runtime dependency is not available."""
