"""
Sorted container implementations for the tree store.
"""

from rbstore.models.sortedcontainers.red_black_tree import DuplicatePolicy, RedBlackTree

__all__ = ["DuplicatePolicy", "RedBlackTree"]
