"""Tile-based puzzle game: map loading and validation, movement and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]