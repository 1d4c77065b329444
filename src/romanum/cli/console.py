"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working when it is not installed; in that case output degrades to
plain ``print`` with markup tags removed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from romanum.exceptions import EnvironmentError

_MARKUP_TAG_RE = re.compile(r"(?<!\\)\[/?[a-z][a-z0-9 ._#-]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console bound to stderr (default) or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False, emoji=False)


def escape(text: str) -> str:
    """Escape user text so Rich does not treat it as markup."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


def strip_markup(text: str) -> str:
    """Remove ``[style]...[/style]`` tags for plain-text output."""
    return _MARKUP_TAG_RE.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            stream = sys.stderr if self._stderr else sys.stdout
            plain = [strip_markup(obj) if isinstance(obj, str) else obj for obj in objects]
            print(*plain, file=stream)
            return
        rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
"""Diagnostics, hints and boundary errors."""

output = _ConsoleProxy(stderr=False)
"""Per-input conversion results."""
