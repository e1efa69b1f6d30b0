"""
Structural deep copy of a red-black tree.
"""

from collections.abc import Callable
from typing import Any

from rbtree.models.arena import NodeArena
from rbtree.models.node import EndNode, Node


def copy_structure(
    source_root: Node | None,
    target_anchor: EndNode,
    arena: NodeArena,
    copy_key: Callable[[Any], Any] | None = None,
) -> Node | None:
    """
    Mirror a tree into a fresh arena, keeping shape and colors.

    The walk moves the source cursor and the target cursor in lockstep
    using parent links only: descend into a source child whose mirror is
    not built yet, otherwise climb. No recursion and no auxiliary stack.

    Args:
        source_root: Root of the tree to copy.
        target_anchor: EndNode that will hold the copied root.
        arena: Arena that allocates and owns every copied node.
        copy_key: Optional function applied to each key (e.g. deepcopy).

    Returns:
        The copied root, or None if source_root is None.
    """
    if source_root is None:
        target_anchor.left = None
        return None

    convert = copy_key if copy_key is not None else _identity

    root = arena.allocate(convert(source_root.key), source_root.color)
    root.parent = target_anchor
    target_anchor.left = root

    source = source_root
    target = root
    while True:
        if source.left is not None and target.left is None:
            source = source.left
            child = arena.allocate(convert(source.key), source.color)
            child.parent = target
            target.left = child
            target = child
        elif source.right is not None and target.right is None:
            source = source.right
            child = arena.allocate(convert(source.key), source.color)
            child.parent = target
            target.right = child
            target = child
        elif source is source_root:
            break
        else:
            source = source.parent
            target = target.parent

    return root


def _identity(key: Any) -> Any:
    return key
