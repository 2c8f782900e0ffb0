"""A grid-based snake arcade game with a window-independent game engine."""

__version__ = "0.1.0"