"""CLI application entry point and command routing for romanum.

This module is the **sole error boundary** for the application.  It
catches :class:`~romanum.exceptions.RomanumError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, renders a user-friendly message, and
returns a well-defined exit code.

Conversion failures on individual inputs are *not* boundary errors:
the session reports them inline and keeps going.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable

from romanum.cli import exit_codes
from romanum.cli.console import console
from romanum.config import Settings
from romanum.exceptions import RomanumError
from romanum.utils.logger import setup_logger
from romanum.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``romanum MCMLXXXIV 1984``  — convert each argument
    * ``romanum < numerals.txt``  — convert each line of stdin
    * ``romanum --interactive``   — prompt until a blank answer
    """
    parser = argparse.ArgumentParser(
        prog="romanum",
        description=(
            "Convert Roman numerals to integers and integers to Roman numerals. "
            "Without arguments, one input per line is read from stdin."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "items",
        nargs="*",
        metavar="ITEM",
        help="Roman numeral to parse, or decimal integer to format.",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Prompt for inputs until a blank answer.",
    )
    parser.add_argument(
        "--lower",
        action="store_true",
        default=None,
        help="Print numerals in lowercase (env: ROMANUM_LOWERCASE).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable debug logging on stderr (env: ROMANUM_VERBOSE).",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_batch(lines: Iterable[str], settings: Settings) -> int:
    """Convert every item of *lines* and report the overall outcome."""
    from romanum.cli.session import run_session

    summary = run_session(lines, settings)
    return summary.exit_code


def _handle_interactive(settings: Settings) -> int:
    """Run the questionary prompt loop."""
    from romanum.cli.prompt import run_interactive

    summary = run_interactive(settings)
    logger.debug(
        "Interactive session: %d converted, %d failed",
        summary.converted,
        summary.failed,
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    stdin: Iterable[str] | None = None,
    environ: dict[str, str] | None = None,
) -> int:
    """Run the romanum CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    stdin:
        Line source used when no items are given.  Defaults to
        :data:`sys.stdin`.
    environ:
        Environment mapping for settings.  Defaults to ``os.environ``.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env(environ).with_overrides(
        lowercase=args.lower,
        verbose=args.verbose,
    )
    setup_logger(verbose=settings.verbose)
    logger.debug("Settings: %s", settings)

    if args.interactive:
        return _handle_interactive(settings)

    if args.items:
        return _handle_batch(args.items, settings)

    return _handle_batch(sys.stdin if stdin is None else stdin, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except RomanumError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
