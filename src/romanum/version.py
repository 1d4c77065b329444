"""Single source of truth for the romanum version string."""

__version__: str = "1.0.0"
