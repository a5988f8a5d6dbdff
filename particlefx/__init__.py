"""Firework particle effects built on simple 2D matrix transforms, with a pygame window."""

__version__ = "0.1.0"
__all__ = ["matrices", "particle", "engine"]