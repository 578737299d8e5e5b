"""A terminal to-do list that keeps one plain-text task log per day."""

__version__ = "0.1.0"
__all__ = ["__version__"]