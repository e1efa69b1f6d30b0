"""
Sorted container implementations.
"""

from rbtree.models.sortedcontainers.rb_tree import RBTree
from rbtree.models.sortedcontainers.tree_iterator import TreeIterator

__all__ = ["RBTree", "TreeIterator"]
