"""A small desktop audio player with a persistent playlist."""

__version__ = "0.1.0"