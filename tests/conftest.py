"""
Shared pytest fixtures for red-black tree tests.
"""

import pytest

from rbstore import DuplicatePolicy, RedBlackTree

SCENARIO_B_KEYS = [186, 78, 170, 132, 191, 102, 45, 28, 52, 158]


@pytest.fixture
def tree():
    """Provide a fresh, empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def rejecting_tree():
    """Provide a RedBlackTree that rejects duplicate keys."""
    return RedBlackTree(duplicate_policy=DuplicatePolicy.REJECT)


@pytest.fixture
def scenario_a_tree():
    """Provide the tree built by inserting 10, 20, 30 in order."""
    return RedBlackTree([(10, "ten"), (20, "twenty"), (30, "thirty")])


@pytest.fixture
def scenario_b_keys():
    """Provide the fixed key sequence from the demonstration run."""
    return list(SCENARIO_B_KEYS)


@pytest.fixture
def scenario_b_tree(scenario_b_keys):
    """Provide a tree holding the demonstration keys with quoted values."""
    return RedBlackTree((k, f'"{k}"') for k in scenario_b_keys)


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [(i, f"value{i}") for i in range(1000)]
