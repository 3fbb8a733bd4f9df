"""List and re-open projects recently opened in the Windsurf editor."""

__version__ = "0.1.0"
