"""Solutions to classic algorithm drills as plain Python functions."""

__version__ = "0.1.0"