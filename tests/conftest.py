"""
Shared pytest fixtures for red-black tree tests.
"""

import random

import pytest

from rbtree import RBTree
from rbtree.models.sortedcontainers.rb_tree import CHECK_INVARIANTS_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure a developer's shell setting does not leak into tests."""
    monkeypatch.delenv(CHECK_INVARIANTS_ENV, raising=False)


@pytest.fixture
def empty_tree():
    """Provide a fresh tree with invariant checks enabled."""
    return RBTree(check_invariants=True)


@pytest.fixture
def small_tree():
    """Provide the tree {10, 20, 30}."""
    return RBTree([10, 20, 30], check_invariants=True)


@pytest.fixture
def sample_keys():
    """Provide keys in an order that exercises every fixup case."""
    return [10, 5, 20, 1, 15, 30, 25, 7, 3, 8, 40, 35, 2, 50, 45]


@pytest.fixture
def random_keys():
    """Provide a reproducible shuffled key list with duplicates."""
    rng = random.Random(1234)
    return [rng.randint(0, 500) for _ in range(1000)]
