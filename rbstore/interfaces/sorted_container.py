"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import abstractmethod
from typing import Any

from rbstore.interfaces.ordered_iterable import OrderedIterable
from rbstore.models.exceptions import KeyNotFoundError


class SortedContainer(OrderedIterable):
    """
    Abstract base class for sorted key-value containers.

    Provides O(log N) operations for insert, find, and remove.
    Inherits in-order iteration from OrderedIterable.

    Implementations:
    - RedBlackTree
    """

    @abstractmethod
    def insert(self, key: Any, value: Any) -> None:
        """
        Insert a key-value pair.

        Args:
            key: The key to insert.
            value: The value to associate with the key.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def find(self, key: Any) -> Any:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The stored value (which may itself be None).

        Raises:
            KeyNotFoundError: If the key is absent.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, key: Any) -> Any:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            The value that was stored under the key.

        Raises:
            KeyNotFoundError: If the key is absent.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def traverse(self) -> str:
        """Return a nested in-order rendering of the structure for debugging."""
        pass

    def put(self, key: Any, value: Any) -> None:
        """Alias of insert."""
        self.insert(key, value)

    def get(self, key: Any, default: Any = None) -> Any:
        """
        Retrieve the value for a key, or ``default`` if it is absent.

        Use find() when a stored None must be told apart from absence.
        """
        try:
            return self.find(key)
        except KeyNotFoundError:
            return default

    def delete(self, key: Any) -> bool:
        """
        Remove a key if present.

        Returns:
            True if the key was found and removed, False otherwise.
        """
        try:
            self.remove(key)
        except KeyNotFoundError:
            return False
        return True

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return self.size()
