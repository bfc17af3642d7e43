"""
Red-Black Tree implementation for sorted key-value storage.

Search, insert and remove all run in O(log N). Sentinel leaves are empty
child slots (None) which count as black.
"""

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from enum import Enum
from typing import Any

from rbstore.interfaces.sorted_container import SortedContainer
from rbstore.models.exceptions import (
    DuplicateKeyError,
    InvariantViolationError,
    KeyNotFoundError,
)
from rbstore.models.node import Color, Node, is_black, is_red
from rbstore.models.sortedcontainers.rotations import rotate_left, rotate_right

logger = logging.getLogger(__name__)


class DuplicatePolicy(Enum):
    """What insert does when the key is already stored."""

    OVERWRITE = "overwrite"  # Replace the stored value (map semantics)
    REJECT = "reject"  # Raise DuplicateKeyError


class RedBlackTree(SortedContainer):
    """
    Red-Black Tree implementation of SortedContainer.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from a node to a leaf has same number of black nodes

    Not safe for concurrent use; callers sharing a tree across threads must
    serialize access themselves.
    """

    DEFAULT_DUPLICATE_POLICY = DuplicatePolicy.OVERWRITE

    def __init__(
        self,
        items: Iterable[tuple[Any, Any]] | None = None,
        duplicate_policy: DuplicatePolicy | str = DEFAULT_DUPLICATE_POLICY,
    ) -> None:
        """
        Initialize the tree.

        Args:
            items: Optional (key, value) pairs, inserted in order.
            duplicate_policy: DuplicatePolicy member or its name
                              ("overwrite" / "reject").
        """
        try:
            policy = DuplicatePolicy(duplicate_policy)
        except ValueError:
            raise ValueError(
                f"duplicate_policy must be one of "
                f"{[p.value for p in DuplicatePolicy]}, got {duplicate_policy!r}"
            ) from None

        self._duplicate_policy = policy
        self._root: Node | None = None
        self._size: int = 0

        if items is not None:
            for key, value in items:
                self.insert(key, value)

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return self._duplicate_policy

    @property
    def root(self) -> Node | None:
        return self._root

    def insert(self, key: Any, value: Any) -> None:
        """Insert a key-value pair. O(log N)"""
        # Find insertion point
        parent = None
        current = self._root

        while current is not None:
            parent = current
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                self._insert_duplicate(current, value)
                return

        # Insert new node
        new_node = Node(key=key, value=value, parent=parent)
        if parent is None:
            self._root = new_node
        elif key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        logger.debug(f"Inserted key {key!r} (size={self._size})")

        self._fix_insert(new_node)
        self._root = self._find_root(new_node)

    def find(self, key: Any) -> Any:
        """Retrieve value by key. O(log N)"""
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def remove(self, key: Any) -> Any:
        """Remove a key-value pair and return its value. O(log N)"""
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)

        removed_value = node.value
        self._delete_node(node)
        self._size -= 1
        logger.debug(f"Removed key {key!r} (size={self._size})")
        return removed_value

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        """Drop every entry."""
        self._root = None
        self._size = 0

    def keys(self) -> list[Any]:
        return [key for key, _ in self]

    def values(self) -> list[Any]:
        return [value for _, value in self]

    def items(self) -> list[tuple[Any, Any]]:
        return list(self)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return _InOrderIterator(self._root)

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return _AsyncInOrderIterator(self._root)

    def traverse(self) -> str:
        """
        Render the tree for debugging.

        Each node prints as ``<value(key)>`` when red or ``[value(key)]``
        when black, followed by its subtrees as ``= {L: ... R: ...}``.
        Sentinel leaves and the empty tree print as ``NIL``.
        """
        return self._render(self._root)

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return self._height(self._root)

    def black_height(self) -> int:
        """
        Return the black-height of the root.

        Counts black nodes (sentinel leaf included, root excluded) on any
        path from the root down to a leaf. The empty tree has black-height 0.
        """
        if self._root is None:
            return 0
        return self.validate() - (1 if self._root.color == Color.BLACK else 0)

    def validate(self) -> int:
        """
        Verify that the tree satisfies all red-black and BST invariants.

        Returns:
            Number of black nodes on every path from the root to a leaf,
            counting the root and the sentinel leaf.

        Raises:
            InvariantViolationError: On the first violation found.
        """
        if self._root is None:
            if self._size != 0:
                raise InvariantViolationError(
                    f"Empty tree reports size {self._size}"
                )
            return 0

        if self._root.parent is not None:
            raise InvariantViolationError("Root has a parent", self._root.key)
        if self._root.color != Color.BLACK:
            raise InvariantViolationError("Root is not black", self._root.key)

        count = [0]
        black_count = self._validate_subtree(self._root, None, None, count)
        if count[0] != self._size:
            raise InvariantViolationError(
                f"Tree holds {count[0]} nodes but reports size {self._size}"
            )
        return black_count

    def __str__(self) -> str:
        return self.traverse()

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self)
        return f"RedBlackTree({{{items}}})"

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _find_root(self, node: Node) -> Node:
        """Walk parent links up from node to the current root."""
        while node.parent is not None:
            node = node.parent
        return node

    def _insert_duplicate(self, node: Node, value: Any) -> None:
        """Apply the duplicate policy to an existing node."""
        if self._duplicate_policy is DuplicatePolicy.REJECT:
            logger.debug(f"Rejected duplicate key {node.key!r}")
            raise DuplicateKeyError(node.key)

        node.value = value
        logger.debug(f"Updated key {node.key!r}")

    def _rotate(self, node: Node, left: bool) -> Node:
        """Rotate around node and return the promoted node."""
        logger.debug(f"Rotating {'left' if left else 'right'} at key {node.key!r}")
        if left:
            return rotate_left(node)
        return rotate_right(node)

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        while True:
            parent = node.parent

            # Case 1: node is the root
            if parent is None:
                node.color = Color.BLACK
                return

            # Case 2: parent is black
            if parent.color == Color.BLACK:
                return

            # Parent is red, so it is not the root and the grandparent exists
            grandparent = parent.parent
            uncle = node.uncle()

            if is_red(uncle):
                # Case 3: parent and uncle are red, push the violation up
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
                continue

            # Case 4a: inner grandchild, rotate it to the outside
            if node.is_right_child() and parent.is_left_child():
                self._rotate(parent, left=True)
                node = parent
            elif node.is_left_child() and parent.is_right_child():
                self._rotate(parent, left=False)
                node = parent

            # Case 4b: outer grandchild, rotate the grandparent
            risen = self._rotate(grandparent, left=node.is_right_child())

            # Case 4c
            risen.color = Color.BLACK
            grandparent.color = Color.RED
            return

    def _delete_node(self, node: Node) -> None:
        """Delete a node from the tree."""
        if node.left is not None and node.right is not None:
            # Node has two children - find successor
            successor = node.right
            while successor.left is not None:
                successor = successor.left

            # Copy successor's data to node
            node.key = successor.key
            node.value = successor.value
            node = successor

        # Node has at most one child
        child = node.left if node.left is not None else node.right
        parent = node.parent
        self._replace_node(node, child)

        if node.color == Color.BLACK:
            if is_red(child):
                child.color = Color.BLACK
            else:
                self._fix_delete(child, parent)

        node.parent = node.left = node.right = None

    def _replace_node(self, node: Node, child: Node | None) -> None:
        """Replace node with child in tree."""
        if node.parent is None:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child

        if child is not None:
            child.parent = node.parent

    def _fix_delete(self, node: Node | None, parent: Node | None) -> None:
        """
        Fix Red-Black Tree properties after delete.

        ``node`` is the double-black position, which may be a sentinel (None);
        ``parent`` locates it.
        """
        # Case 1: node is the root
        while parent is not None:
            on_left = node is parent.left
            sibling = parent.right if on_left else parent.left

            if is_red(sibling):
                # Case 2: sibling is red
                parent.color = Color.RED
                sibling.color = Color.BLACK
                self._rotate(parent, left=on_left)
                self._root = self._find_root(parent)
                sibling = parent.right if on_left else parent.left

            if sibling is None:
                near = far = None
            elif on_left:
                near, far = sibling.left, sibling.right
            else:
                near, far = sibling.right, sibling.left

            if is_black(near) and is_black(far):
                if sibling is not None:
                    sibling.color = Color.RED

                if parent.color == Color.BLACK:
                    # Case 3: push the deficit up to the parent
                    node, parent = parent, parent.parent
                    continue

                # Case 4: red parent absorbs the deficit
                parent.color = Color.BLACK
                return

            if is_black(far):
                # Case 5: near nephew red, far nephew black
                near.color = Color.BLACK
                sibling.color = Color.RED
                sibling = self._rotate(sibling, left=not on_left)
                far = sibling.right if on_left else sibling.left

            # Case 6: far nephew red
            sibling.color = parent.color
            parent.color = Color.BLACK
            far.color = Color.BLACK
            self._rotate(parent, left=on_left)
            self._root = self._find_root(parent)
            return

    def _render(self, node: Node | None) -> str:
        if node is None:
            return "NIL"
        return (
            f"{node.render()} = "
            f"{{L: {self._render(node.left)} R: {self._render(node.right)}}}"
        )

    def _height(self, node: Node | None) -> int:
        if node is None:
            return 0
        return 1 + max(self._height(node.left), self._height(node.right))

    def _validate_subtree(
        self, node: Node | None, low: Any, high: Any, count: list[int]
    ) -> int:
        """Return black count of subtree (sentinel counts as 1)."""
        if node is None:
            return 1

        count[0] += 1

        # BST ordering against the bounds inherited from ancestors
        if low is not None and not node.key > low.key:
            raise InvariantViolationError(
                f"BST order violated: key not greater than ancestor {low.key!r}",
                node.key,
            )
        if high is not None and not node.key < high.key:
            raise InvariantViolationError(
                f"BST order violated: key not less than ancestor {high.key!r}",
                node.key,
            )

        for child in (node.left, node.right):
            if child is not None and child.parent is not node:
                raise InvariantViolationError("Broken parent link", child.key)

        if node.color == Color.RED and (is_red(node.left) or is_red(node.right)):
            raise InvariantViolationError("Red node has a red child", node.key)

        left_black = self._validate_subtree(node.left, low, node, count)
        right_black = self._validate_subtree(node.right, node, high, count)
        if left_black != right_black:
            raise InvariantViolationError("Black-height mismatch", node.key)

        return left_black + (1 if node.color == Color.BLACK else 0)


class _InOrderIterator(Iterator[tuple[Any, Any]]):
    """Iterator over all entries of a Red-Black Tree in key order."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()
        result = (node.key, node.value)

        # Push right subtree's left path
        self._push_left_path(node.right)

        return result

    def _push_left_path(self, node: Node | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left


class _AsyncInOrderIterator(AsyncIterator[tuple[Any, Any]]):
    """Async iterator over a Red-Black Tree (in-memory, no I/O)."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left_path(root)

    def __aiter__(self) -> "_AsyncInOrderIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        if not self._stack:
            raise StopAsyncIteration

        node = self._stack.pop()
        result = (node.key, node.value)

        # Push right subtree's left path
        self._push_left_path(node.right)

        return result

    def _push_left_path(self, node: Node | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left
