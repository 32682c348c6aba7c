"""Quarto, the two-player board game: pieces, board and a terminal front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]