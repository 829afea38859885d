"""Grade Track: single-user exam tracking."""

__version__ = "1.0.0"
