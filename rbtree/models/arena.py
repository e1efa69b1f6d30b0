"""
NodeArena - owning storage for the nodes of one tree.
"""

from collections.abc import Iterator
from typing import Any

from rbtree.models.node import Color, Node


class NodeArena:
    """
    Exclusive owner of every node allocated for a tree.

    Nodes are appended on allocation and only released all together via
    clear(). Tree links between nodes never own anything; the arena list is
    the only strong collection of nodes a tree holds.
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    def allocate(self, key: Any, color: Color) -> Node:
        """
        Create a detached node and take ownership of it.

        Args:
            key: Key stored in the node.
            color: Initial node color.

        Returns:
            The new node, with no links set.
        """
        node = Node(key=key, color=color)
        self._nodes.append(node)
        return node

    def owns(self, node: Node) -> bool:
        """Check whether node was allocated by this arena. O(N)"""
        return any(n is node for n in self._nodes)

    def clear(self) -> None:
        # Break links so stale iterators cannot walk into a detached graph.
        for node in self._nodes:
            node.left = node.right = node.parent = None
        self._nodes = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)
