"""
Descent-based lookups on a binary search tree.

Every function here is a pure query: one walk from the given node down
towards a leaf, O(height), no recursion and no mutation.
"""

from typing import Any

from rbtree.models.node import Node


def find(root: Node | None, key: Any) -> Node | None:
    """Return the node holding key, or None if it is absent."""
    current = root
    while current is not None:
        if key < current.key:
            current = current.left
        elif current.key < key:
            current = current.right
        else:
            return current
    return None


def find_v2(root: Node | None, key: Any) -> tuple[Node | None, Node | None]:
    """
    Find a node and remember where the descent stopped.

    Args:
        root: Root of the tree to search.
        key: The key to look up.

    Returns:
        (node, parent). On a hit node holds key and parent is the node
        itself. On a miss node is None and parent is the last node
        visited, i.e. the node a new key would be attached to.
    """
    parent = None
    current = root
    while current is not None:
        parent = current
        if key < current.key:
            current = current.left
        elif current.key < key:
            current = current.right
        else:
            return current, parent
    return None, parent


def lower_bound(root: Node | None, key: Any) -> Node | None:
    """Return the first node whose key is not less than key."""
    candidate = None
    current = root
    while current is not None:
        if current.key < key:
            current = current.right
        else:
            candidate = current
            current = current.left
    return candidate


def upper_bound(root: Node | None, key: Any) -> Node | None:
    """Return the first node whose key is greater than key."""
    candidate = None
    current = root
    while current is not None:
        if key < current.key:
            candidate = current
            current = current.left
        else:
            current = current.right
    return candidate


def minimum(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def maximum(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node
