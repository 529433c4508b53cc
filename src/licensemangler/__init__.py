"""Command-line shell for managing a license manager process."""

__version__ = "0.1.0"
