"""
Red-Black Tree based ordered key-value store.

This package provides an in-memory associative container with:
- insert(key, value) - O(log N), overwrite or reject on duplicate keys
- find(key) - O(log N), KeyNotFoundError when absent
- remove(key) - O(log N), returns the removed value
- traverse() - nested in-order debug rendering
- size() - number of stored entries
"""

from rbstore.models.exceptions import (
    DuplicateKeyError,
    InvariantViolationError,
    KeyNotFoundError,
)
from rbstore.models.sortedcontainers import DuplicatePolicy, RedBlackTree

__all__ = [
    "RedBlackTree",
    "DuplicatePolicy",
    "DuplicateKeyError",
    "InvariantViolationError",
    "KeyNotFoundError",
]
