"""CLIFIT - step through a workout routine from the terminal."""

__version__ = "0.1.0"
