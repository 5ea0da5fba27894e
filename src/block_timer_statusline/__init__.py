"""Block timer widget for Claude Code style status lines."""

__version__ = "0.1.0"
