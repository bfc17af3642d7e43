"""
Node and Color for the red-black tree.

Empty child slots (None) act as sentinel leaves: they carry no key or value
and always count as BLACK.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """
    Node in the Red-Black Tree.

    Attributes:
        key: Ordering key, compared with < and >.
        value: Payload stored under the key (None is a valid payload).
        color: RED or BLACK. New nodes are born RED.
        left: Left subtree, or None for a sentinel leaf.
        right: Right subtree, or None for a sentinel leaf.
        parent: Back-reference to the parent, None for the root.
    """

    key: Any
    value: Any
    color: Color = Color.RED
    left: "Node | None" = field(default=None, repr=False)
    right: "Node | None" = field(default=None, repr=False)
    parent: "Node | None" = field(default=None, repr=False)

    def is_left_child(self) -> bool:
        return self.parent is not None and self.parent.left is self

    def is_right_child(self) -> bool:
        return self.parent is not None and self.parent.right is self

    def sibling(self) -> "Node | None":
        """Return the other child of this node's parent."""
        if self.parent is None:
            return None
        if self is self.parent.left:
            return self.parent.right
        return self.parent.left

    def grandparent(self) -> "Node | None":
        if self.parent is None:
            return None
        return self.parent.parent

    def uncle(self) -> "Node | None":
        """Return the sibling of this node's parent."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def render(self) -> str:
        """Render as ``<value(key)>`` when red, ``[value(key)]`` when black."""
        if self.color == Color.RED:
            return f"<{self.value}({self.key})>"
        return f"[{self.value}({self.key})]"


def is_red(node: Node | None) -> bool:
    return node is not None and node.color == Color.RED


def is_black(node: Node | None) -> bool:
    """Sentinel leaves (None) are black."""
    return node is None or node.color == Color.BLACK
