"""Runtime settings, read from the environment and overridden by CLI flags.

Recognised variables
--------------------
``ROMANUM_LOWERCASE``
    Print numerals in lowercase (``xiv`` instead of ``XIV``).
``ROMANUM_VERBOSE``
    Enable debug logging on stderr.

Boolean values accept ``1/0``, ``true/false``, ``yes/no`` and
``on/off`` in any case.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from romanum.exceptions import ConfigurationError

ENV_LOWERCASE = "ROMANUM_LOWERCASE"
ENV_VERBOSE = "ROMANUM_VERBOSE"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(name: str, raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ConfigurationError(
        f"{name} has an invalid value: {raw!r}",
        hint=f"Set {name} to one of: 1, 0, true, false, yes, no, on, off.",
    )


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime settings."""

    lowercase: bool = False
    verbose: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``).

        Raises
        ------
        ConfigurationError
            If a variable holds something other than a boolean word.
        """
        env = os.environ if environ is None else environ
        return cls(
            lowercase=_parse_bool(ENV_LOWERCASE, env.get(ENV_LOWERCASE, "")),
            verbose=_parse_bool(ENV_VERBOSE, env.get(ENV_VERBOSE, "")),
        )

    def with_overrides(self, **flags: bool | None) -> Settings:
        """Return a copy with every non-``None`` flag applied."""
        changes = {name: value for name, value in flags.items() if value is not None}
        return replace(self, **changes)
