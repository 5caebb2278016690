"""Catch the falling yin-yang orbs: a small pygame arcade game."""

__version__ = "0.1.0"
__all__ = ["game", "orb", "player"]