"""Sliding tile puzzle: board logic, game state, a pygame window and a console game."""

__version__ = "2.0.0"
__all__ = ["__version__"]