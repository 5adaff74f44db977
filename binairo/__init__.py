"""Binairo puzzle game: board rules, move handling and a desktop window."""

__version__ = "1.0.0"
__all__ = ["__version__"]