"""
Rotations and post-insert fixup for the red-black tree.

Parent links of the root point at the tree's EndNode, whose ``left`` slot
holds the root. Rotating the root therefore re-links the anchor through the
same "left child of parent" path used for every other node.
"""

from rbtree.models.node import Color, EndNode, Node


def is_left_child(node: Node) -> bool:
    """True if node is the left child of its parent (the root counts)."""
    return node.parent is not None and node.parent.left is node


def is_red(node: Node | None) -> bool:
    # Absent children are black leaves.
    return node is not None and node.color == Color.RED


def rotate_left(node: Node) -> None:
    """
    Left rotation around node.

    The right child takes node's place, node becomes its left child and the
    right child's former left subtree moves under node. In-order key
    sequence is unchanged.
    """
    right_child = node.right
    if right_child is None:
        raise ValueError(f"rotate_left needs a right child at {node!r}")

    node.right = right_child.left
    if right_child.left is not None:
        right_child.left.parent = node

    right_child.parent = node.parent
    if is_left_child(node):
        node.parent.left = right_child
    else:
        node.parent.right = right_child

    right_child.left = node
    node.parent = right_child


def rotate_right(node: Node) -> None:
    """Right rotation around node. Mirror of rotate_left."""
    left_child = node.left
    if left_child is None:
        raise ValueError(f"rotate_right needs a left child at {node!r}")

    node.left = left_child.right
    if left_child.right is not None:
        left_child.right.parent = node

    left_child.parent = node.parent
    if is_left_child(node):
        node.parent.left = left_child
    else:
        node.parent.right = left_child

    left_child.right = node
    node.parent = left_child


def insert_fixup(anchor: EndNode, node: Node) -> None:
    """
    Restore red-black properties after attaching a red node.

    Climbs from node towards the root. Red uncle: recolor and continue from
    the grandparent. Black or missing uncle: rotate an inner child into the
    outer position, then recolor and rotate the grandparent, which ends the
    walk. The root is read through the anchor on every step because a
    rotation at the top replaces it.

    Args:
        anchor: The tree's EndNode.
        node: The freshly inserted red node.
    """
    while node is not anchor.left and node.parent.color == Color.RED:
        parent = node.parent
        # A red parent is never the root, so the grandparent is a real node.
        grandparent = parent.parent

        if parent is grandparent.left:
            uncle = grandparent.right

            if is_red(uncle):
                # Case 1: Uncle is red
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
                continue

            if node is parent.right:
                # Case 2: Node is inner child
                node = parent
                rotate_left(node)
                parent = node.parent

            # Case 3: Node is outer child
            parent.color = Color.BLACK
            grandparent.color = Color.RED
            rotate_right(grandparent)
            break
        else:
            uncle = grandparent.left

            if is_red(uncle):
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
                continue

            if node is parent.left:
                node = parent
                rotate_right(node)
                parent = node.parent

            parent.color = Color.BLACK
            grandparent.color = Color.RED
            rotate_left(grandparent)
            break

    anchor.left.color = Color.BLACK
