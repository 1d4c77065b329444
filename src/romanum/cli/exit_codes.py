"""Exit-code constants used by the CLI layer."""

from __future__ import annotations

SUCCESS: int = 0
"""Every input converted (or nothing to do)."""

GENERAL_ERROR: int = 1
"""A known RomanumError reached the error boundary."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

CONVERSION_FAILED: int = 3
"""At least one input line could not be converted."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  POSIX convention (128 + SIGINT=2)."""
