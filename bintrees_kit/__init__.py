"""Linked binary tree nodes with traversals, measurements, shape checks, a text renderer and demos."""

__version__ = "0.1.0"
__all__ = ["node", "printer", "demos"]