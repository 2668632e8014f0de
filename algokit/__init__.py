"""Sorting, searching, tree, linked-list, stream and dynamic-programming algorithms."""

__version__ = "0.1.0"