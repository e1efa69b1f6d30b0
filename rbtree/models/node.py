"""
Node types for the red-black tree.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False, slots=True)
class Node:
    """
    Node in the Red-Black Tree.

    The key is fixed once the node is allocated. Links are plain references
    into the owning arena; the root's parent is the tree's EndNode.
    """

    key: Any
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None
    parent: "Node | EndNode | None" = None

    def __repr__(self) -> str:
        return f"Node({self.key!r}, {self.color.name})"


@dataclass(eq=False, slots=True)
class EndNode:
    """
    Per-tree anchor.

    Its only slot is ``left``, which holds the root. The same object is the
    past-the-end position for iteration, so an empty tree is simply an
    anchor whose ``left`` is None.
    """

    left: Node | None = None

    def __repr__(self) -> str:
        return "EndNode()"
