"""A tile-and-sprite fantasy console with game building blocks."""

__version__ = "0.1.0"