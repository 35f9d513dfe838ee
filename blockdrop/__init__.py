"""A falling-block puzzle game on a 10 by 20 grid, with a pygame window."""

__version__ = "0.1.0"