"""Tile-map puzzle game: map loading, validation, solvability checks and player movement."""

__version__ = "0.1.0"

__all__ = ["game", "lines", "mapfile", "printf", "textutil"]