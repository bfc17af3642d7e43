"""
Data models for the tree store.
"""

from rbstore.models.exceptions import (
    DuplicateKeyError,
    InvariantViolationError,
    KeyNotFoundError,
)
from rbstore.models.node import Color, Node, is_black, is_red

__all__ = [
    "Color",
    "Node",
    "is_black",
    "is_red",
    "DuplicateKeyError",
    "InvariantViolationError",
    "KeyNotFoundError",
]
