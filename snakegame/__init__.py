"""A grid-based Snake game for pygame with a brute-force look-ahead AI player."""

__version__ = "0.1.0"
__all__ = ["__version__"]