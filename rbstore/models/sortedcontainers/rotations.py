"""
Rotation primitives for the Red-Black Tree.

Rotations are the only operations that change the shape of the tree once a
node is linked in. Both preserve the in-order key sequence and run in O(1).
Neither touches the tree's root reference: when the rotated node was the
root, the promoted node is left parentless and the caller recomputes the root.
"""

from rbstore.models.node import Node


def rotate_left(node: Node) -> Node:
    """
    Promote the right child of ``node`` into its position.

    Args:
        node: The node to rotate around. Must have a right child.

    Returns:
        The promoted node (the old right child).

    Raises:
        ValueError: If ``node`` has no right child.
    """
    pivot = node.right
    if pivot is None:
        raise ValueError(f"Cannot rotate left at key {node.key!r}: no right child")

    # Turn pivot's left subtree into node's right subtree
    node.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = node

    _reattach(node, pivot)

    pivot.left = node
    node.parent = pivot
    return pivot


def rotate_right(node: Node) -> Node:
    """
    Promote the left child of ``node`` into its position.

    Args:
        node: The node to rotate around. Must have a left child.

    Returns:
        The promoted node (the old left child).

    Raises:
        ValueError: If ``node`` has no left child.
    """
    pivot = node.left
    if pivot is None:
        raise ValueError(f"Cannot rotate right at key {node.key!r}: no left child")

    # Turn pivot's right subtree into node's left subtree
    node.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = node

    _reattach(node, pivot)

    pivot.right = node
    node.parent = pivot
    return pivot


def _reattach(old: Node, new: Node) -> None:
    """Link ``new`` into the slot ``old`` occupies under its parent."""
    parent = old.parent
    new.parent = parent
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new
