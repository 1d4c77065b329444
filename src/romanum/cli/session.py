"""Line-oriented conversion loop.

Each input line is stripped, converted, and reported on stdout.  A
failing line is reported and the loop moves on; nothing here aborts the
session except the input running out.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from romanum.cli import exit_codes
from romanum.cli.console import escape, output
from romanum.config import Settings
from romanum.core.conversion import convert
from romanum.core.models import Conversion
from romanum.exceptions import ConversionError, NegativeValueError, ValueTooLargeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Counts of converted and rejected inputs for one session."""

    converted: int = 0
    failed: int = 0

    @property
    def exit_code(self) -> int:
        return exit_codes.CONVERSION_FAILED if self.failed else exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Rendering (pure — returns markup strings)
# ---------------------------------------------------------------------------

def render_conversion(conversion: Conversion) -> str:
    """Describe a successful conversion as a single markup line.

    * ``MCMLXXXIV = 1984 -> MCMLXXXIV``
    * ``IIII = 4 -> IV (non-canonical)``
    * ``1984 = MCMLXXXIV``
    """
    source = escape(conversion.source)
    if not conversion.from_numeral:
        return f"[bold]{source}[/bold] = [cyan]{conversion.numeral}[/cyan]"

    line = (
        f"[bold]{source}[/bold] = [cyan]{conversion.value}[/cyan]"
        f" -> [green]{conversion.numeral}[/green]"
    )
    if not conversion.is_canonical:
        line += " [dim](non-canonical)[/dim]"
    return line


def render_failure(source: str, error: Exception) -> str:
    """Describe a rejected input as a single markup line."""
    label = escape(source) if source else "(empty)"
    return f"[bold]{label}[/bold]: [red]{escape(str(error))}[/red]"


# ---------------------------------------------------------------------------
# Driving
# ---------------------------------------------------------------------------

def process_line(line: str, settings: Settings) -> bool:
    """Convert and report one input line; return ``True`` on success."""
    source = line.strip()
    try:
        conversion = convert(source, lowercase=settings.lowercase)
    except (ConversionError, NegativeValueError, ValueTooLargeError) as exc:
        logger.debug("Rejected %r: %s", source, exc)
        output.print(render_failure(source, exc))
        return False
    output.print(render_conversion(conversion))
    return True


def run_session(lines: Iterable[str], settings: Settings) -> SessionSummary:
    """Process every line from *lines* until it is exhausted."""
    converted = failed = 0
    for line in lines:
        if process_line(line, settings):
            converted += 1
        else:
            failed += 1
    logger.debug("Session finished: %d converted, %d failed", converted, failed)
    return SessionSummary(converted=converted, failed=failed)
