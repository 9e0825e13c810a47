"""Animated Towers of Hanoi with pause, speed control and replay of saved solutions."""

__version__ = "0.1.0"
__all__ = ["__version__"]