"""
Data models for the red-black tree.
"""

from rbtree.models.arena import NodeArena
from rbtree.models.exceptions import InvalidIteratorError, InvariantViolationError
from rbtree.models.node import Color, EndNode, Node

__all__ = [
    "Color",
    "Node",
    "EndNode",
    "NodeArena",
    "InvalidIteratorError",
    "InvariantViolationError",
]
