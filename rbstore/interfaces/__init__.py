"""
Abstract base classes and protocols for the tree store.
"""

from rbstore.interfaces.ordered_iterable import OrderedIterable
from rbstore.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]
