"""Add To Calendar link generator."""

__version__ = "1.0.0"
