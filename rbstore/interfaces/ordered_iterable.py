"""
OrderedIterable protocol for data structures that iterate in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that support full in-order iteration.

    Implementations must support:
    - Full iteration via __iter__
    - Async iteration via __aiter__
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in sorted order."""
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        """Return an async iterator over all key-value pairs in sorted order."""
        pass
