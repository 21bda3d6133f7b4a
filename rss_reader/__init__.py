"""Command-line RSS feed reader."""

__version__ = "1.0.0"
