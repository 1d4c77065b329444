"""Interactive conversion prompt for the CLI layer.

Repeatedly asks for a numeral (or decimal number) with questionary and
reports each conversion until the user submits a blank answer or
cancels with Esc / Ctrl+C.
"""

from __future__ import annotations

from typing import Any

from romanum.cli.console import console
from romanum.cli.session import SessionSummary, process_line
from romanum.config import Settings
from romanum.exceptions import EnvironmentError

PROMPT_MESSAGE = "Roman numeral or number:"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def run_interactive(settings: Settings) -> SessionSummary:
    """Prompt until a blank or cancelled answer; return the tallies.

    Raises
    ------
    EnvironmentError
        If questionary is not installed.
    """
    questionary = _import_questionary()

    console.print("[dim]Enter a Roman numeral or a number. Blank line to quit.[/dim]")

    converted = failed = 0
    while True:
        answer: str | None = questionary.text(PROMPT_MESSAGE).ask()  # None on Ctrl+C / Esc
        if answer is None or not answer.strip():
            break
        if process_line(answer, settings):
            converted += 1
        else:
            failed += 1

    return SessionSummary(converted=converted, failed=failed)
