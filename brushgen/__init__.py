"""Build-time generator for theme brush resources."""

__version__ = "1.0.0"
