"""Recursive and backtracking algorithms, with linked-list and binary-tree helpers."""

__version__ = "0.1.0"