"""
Tests for data models: Color, Node, sentinel predicates and exceptions.
"""

import pytest

from rbstore.models import (
    Color,
    DuplicateKeyError,
    InvariantViolationError,
    KeyNotFoundError,
    Node,
    is_black,
    is_red,
)


def _family():
    """Build grandparent(20) -> parent(10) -> child(5), with uncle(30) and sibling(15)."""
    grandparent = Node(key=20, value="g", color=Color.BLACK)
    parent = Node(key=10, value="p", parent=grandparent)
    uncle = Node(key=30, value="u", parent=grandparent)
    grandparent.left, grandparent.right = parent, uncle
    child = Node(key=5, value="c", parent=parent)
    sibling = Node(key=15, value="s", parent=parent)
    parent.left, parent.right = child, sibling
    return grandparent, parent, uncle, child, sibling


class TestColor:
    """Tests for Color and the sentinel predicates."""

    def test_new_node_is_red(self):
        """Test that nodes are born red with two sentinel children."""
        node = Node(key=1, value="one")
        assert node.color == Color.RED
        assert node.left is None
        assert node.right is None
        assert node.parent is None

    def test_predicates(self):
        """Test is_red / is_black on real nodes."""
        red = Node(key=1, value="a")
        black = Node(key=2, value="b", color=Color.BLACK)

        assert is_red(red) and not is_black(red)
        assert is_black(black) and not is_red(black)

    def test_sentinel_is_black(self):
        """Test that an empty slot counts as a black leaf."""
        assert is_black(None)
        assert not is_red(None)


class TestNode:
    """Tests for Node relatives and rendering."""

    def test_child_side(self):
        """Test left/right child detection."""
        grandparent, parent, uncle, child, sibling = _family()

        assert parent.is_left_child()
        assert uncle.is_right_child()
        assert child.is_left_child()
        assert sibling.is_right_child()
        assert not grandparent.is_left_child()
        assert not grandparent.is_right_child()

    def test_relatives(self):
        """Test sibling, grandparent and uncle lookups."""
        grandparent, parent, uncle, child, sibling = _family()

        assert child.sibling() is sibling
        assert sibling.sibling() is child
        assert child.grandparent() is grandparent
        assert child.uncle() is uncle
        assert parent.uncle() is None
        assert grandparent.sibling() is None
        assert grandparent.grandparent() is None

    def test_sibling_may_be_sentinel(self):
        """Test that a missing sibling is reported as None."""
        parent = Node(key=10, value="p", color=Color.BLACK)
        child = Node(key=5, value="c", parent=parent)
        parent.left = child

        assert child.sibling() is None

    def test_render(self):
        """Test red nodes use angle brackets and black nodes square brackets."""
        assert Node(key=7, value="seven").render() == "<seven(7)>"
        assert Node(key=7, value="seven", color=Color.BLACK).render() == "[seven(7)]"

    def test_repr_skips_links(self):
        """Test that repr does not walk the cyclic parent/child links."""
        grandparent, _, _, child, _ = _family()
        text = repr(child)

        assert "key=5" in text
        assert "parent" not in text
        assert "left" not in text

    def test_identity_equality(self):
        """Test that nodes with equal fields are still distinct."""
        assert Node(key=1, value="a") != Node(key=1, value="a")


class TestExceptions:
    """Tests for the error taxonomy."""

    def test_key_not_found(self):
        """Test KeyNotFoundError carries the key and is a KeyError."""
        error = KeyNotFoundError(42)

        assert isinstance(error, KeyError)
        assert error.key == 42
        assert str(error) == "Key not found: 42"

    def test_duplicate_key(self):
        """Test DuplicateKeyError carries the key and is a KeyError."""
        error = DuplicateKeyError("k")

        assert isinstance(error, KeyError)
        assert error.key == "k"
        assert str(error) == "Duplicate key rejected: 'k'"

    def test_invariant_violation(self):
        """Test InvariantViolationError names the invariant and key."""
        error = InvariantViolationError("Root is not black", 3)

        assert isinstance(error, AssertionError)
        assert error.invariant == "Root is not black"
        assert error.key == 3
        assert str(error) == "Root is not black (at key 3)"

    def test_invariant_violation_without_key(self):
        """Test message when no node is involved."""
        assert str(InvariantViolationError("size mismatch")) == "size mismatch"

    def test_not_found_is_raisable_as_key_error(self):
        """Test callers catching KeyError also catch KeyNotFoundError."""
        with pytest.raises(KeyError):
            raise KeyNotFoundError("missing")
