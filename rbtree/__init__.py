"""
Ordered set of unique keys backed by a red-black tree.

This package provides a sorted container with:
- insert(key) - O(log N), returns (cursor, inserted)
- find(key) / contains(key) - O(log N) exact lookup
- lower_bound(key) / upper_bound(key) - O(log N) range boundaries
- begin() / end() - bidirectional cursors walking parent links, no stack
- copy() / move() / swap() - whole-tree ownership operations
"""

from rbtree.models.exceptions import InvalidIteratorError, InvariantViolationError
from rbtree.models.node import Color
from rbtree.models.sortedcontainers import RBTree, TreeIterator

__all__ = [
    "Color",
    "InvalidIteratorError",
    "InvariantViolationError",
    "RBTree",
    "TreeIterator",
]
