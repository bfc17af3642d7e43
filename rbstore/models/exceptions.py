"""
Custom exceptions for the red-black tree store.
"""

from typing import Any


class KeyNotFoundError(KeyError):
    """
    Raised when a key is absent on find or remove.

    A stored value of None is a legitimate payload, so absence is always
    reported with this error and never with a None return.
    """

    def __init__(self, key: Any):
        """
        Initialize not-found error.

        Args:
            key: The key that was looked up.
        """
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key not found: {self.key!r}"


class DuplicateKeyError(KeyError):
    """Raised on insert of an existing key when duplicates are rejected."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Duplicate key rejected: {self.key!r}"


class InvariantViolationError(AssertionError):
    """
    Raised by validation when a red-black or BST invariant is broken.

    This is a fail-fast error indicating the tree structure was corrupted.
    """

    def __init__(self, invariant: str, key: Any = None):
        """
        Initialize invariant error.

        Args:
            invariant: Description of the violated invariant.
            key: Key of the node where the violation was detected, if any.
        """
        self.invariant = invariant
        self.key = key
        message = invariant if key is None else f"{invariant} (at key {key!r})"
        super().__init__(message)
