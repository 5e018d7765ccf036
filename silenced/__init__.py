"""A small tile-based 2D role-playing game engine built on pygame."""

__version__ = "0.1.0"