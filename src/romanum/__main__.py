"""Allow ``python -m romanum`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m romanum`` behaves identically to the ``romanum`` console
script.
"""

from __future__ import annotations

from romanum.cli.app import cli

if __name__ == "__main__":
    cli()
