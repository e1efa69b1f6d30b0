"""
Invariant checks for a red-black tree.

Both walks use an explicit stack so that even a corrupted, degenerate tree
cannot exhaust the interpreter's recursion limit.
"""

from rbtree.models.exceptions import InvariantViolationError
from rbtree.models.node import Color, EndNode, Node


def validate(anchor: EndNode) -> int:
    """
    Verify every red-black and search-tree invariant below anchor.

    Checks: root is black and parented to the anchor, parent/child links
    agree, no red node has a red child, keys are strictly increasing in
    order, and all root-to-leaf paths carry the same number of black nodes.

    Args:
        anchor: The tree's EndNode.

    Returns:
        Black height of the tree (0 for an empty tree, leaves not counted).

    Raises:
        InvariantViolationError: On the first violation found.
    """
    root = anchor.left
    if root is None:
        return 0

    if root.parent is not anchor:
        raise InvariantViolationError("root-parent", root.key, "root is not parented to the anchor")
    if root.color != Color.BLACK:
        raise InvariantViolationError("root-black", root.key)

    expected_black_height: int | None = None
    previous: Node | None = None

    # In-order walk carrying the black count of the path above each node.
    stack: list[tuple[Node, int]] = []
    current: Node | None = root
    blacks_above = 0

    while stack or current is not None:
        while current is not None:
            _check_node(current)
            blacks = blacks_above + (1 if current.color == Color.BLACK else 0)
            stack.append((current, blacks))

            if current.left is None or current.right is None:
                if expected_black_height is None:
                    expected_black_height = blacks
                elif blacks != expected_black_height:
                    raise InvariantViolationError(
                        "black-height",
                        current.key,
                        f"path has {blacks} black nodes, expected {expected_black_height}",
                    )

            blacks_above = blacks
            current = current.left

        node, blacks = stack.pop()
        if previous is not None and not previous.key < node.key:
            raise InvariantViolationError(
                "order", node.key, f"follows {previous.key!r} in traversal"
            )
        previous = node

        blacks_above = blacks
        current = node.right

    return expected_black_height or 0


def _check_node(node: Node) -> None:
    """Local checks: link symmetry and no red-red edge."""
    for child in (node.left, node.right):
        if child is None:
            continue
        if child.parent is not node:
            raise InvariantViolationError("parent-link", child.key, f"parent is not {node.key!r}")
        if node.color == Color.RED and child.color == Color.RED:
            raise InvariantViolationError("red-red", child.key, f"red child of red {node.key!r}")


def height(anchor: EndNode) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if anchor.left is None:
        return 0

    tallest = 0
    stack: list[tuple[Node, int]] = [(anchor.left, 1)]
    while stack:
        node, depth = stack.pop()
        tallest = max(tallest, depth)
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return tallest
