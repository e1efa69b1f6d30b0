"""
Red-Black Tree implementation of an ordered set of unique keys.

Insertion, lookup and bound queries run in O(log N); begin/end and min/max
are O(1) thanks to cached leftmost/rightmost references.
"""

import copy
import logging
import os
from collections.abc import AsyncIterator, Callable, Iterable, Iterator
from typing import Any

from rbtree.algorithms import search
from rbtree.algorithms.balance import insert_fixup
from rbtree.algorithms.copier import copy_structure
from rbtree.algorithms.validator import height, validate
from rbtree.interfaces.sorted_container import SortedContainer
from rbtree.models.arena import NodeArena
from rbtree.models.exceptions import InvariantViolationError
from rbtree.models.node import Color, EndNode, Node
from rbtree.models.sortedcontainers.tree_iterator import (
    TreeIterator,
    _AsyncRangeIterator,
    _RangeIterator,
    _ReverseIterator,
)

CHECK_INVARIANTS_ENV = "RBTREE_CHECK_INVARIANTS"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


def check_invariants_from_env() -> bool:
    """
    Read the invariant-checking flag from the environment.

    Raises:
        ValueError: If the variable holds something other than a boolean flag.
    """
    raw = os.environ.get(CHECK_INVARIANTS_ENV, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{CHECK_INVARIANTS_ENV} must be a boolean flag, got {raw!r}")


class RBTree(SortedContainer):
    """
    Red-Black Tree implementation of SortedContainer.

    Layout:
    - One NodeArena owns every node; links between nodes are plain
      cross-references into it
    - An EndNode anchors the tree: its ``left`` slot is the root and it is
      the past-the-end position for every cursor

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black and parented to the anchor
    3. Red nodes cannot have red children
    4. Every path from a node to a missing child has the same number of black nodes
    5. Keys are unique and strictly ordered in-order
    """

    def __init__(
        self,
        keys: Iterable[Any] | None = None,
        *,
        check_invariants: bool | None = None,
    ) -> None:
        """
        Initialize the tree.

        Args:
            keys: Optional keys inserted one by one in order; duplicates
                  are skipped.
            check_invariants: Run validate() after every insertion that adds
                  a node. None reads RBTREE_CHECK_INVARIANTS.
        """
        if check_invariants is None:
            check_invariants = check_invariants_from_env()
        elif not isinstance(check_invariants, bool):
            raise ValueError(f"check_invariants must be a bool, got {check_invariants!r}")

        self._check_invariants = check_invariants
        self._arena = NodeArena()
        self._anchor = EndNode()
        self._leftmost: Node | EndNode = self._anchor
        self._rightmost: Node | None = None
        self._size: int = 0

        if keys is not None:
            self.insert_many(keys)

    @property
    def check_invariants(self) -> bool:
        return self._check_invariants

    @property
    def _root(self) -> Node | None:
        return self._anchor.left

    # Capacity

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    # Cursors

    def begin(self) -> TreeIterator:
        return TreeIterator(self._leftmost, self._anchor)

    def end(self) -> TreeIterator:
        return TreeIterator(self._anchor, self._anchor)

    # Modifiers

    def insert(self, key: Any) -> tuple[TreeIterator, bool]:
        """Insert key if absent. O(log N)"""
        if self._root is None:
            return TreeIterator(self._insert_root(key), self._anchor), True

        node, parent = search.find_v2(self._root, key)
        if node is not None:
            return TreeIterator(node, self._anchor), False

        return TreeIterator(self._insert_at(parent, key), self._anchor), True

    def insert_many(self, keys: Iterable[Any]) -> int:
        """Insert keys in input order, skipping duplicates. O(M log N)"""
        seen = 0
        added = 0
        for key in keys:
            seen += 1
            if self.insert(key)[1]:
                added += 1

        logging.debug(f"Bulk insert added {added} of {seen} keys")
        return added

    def clear(self) -> None:
        """Release every node and leave the tree empty."""
        logging.debug(f"Clearing tree with {self._size} keys")
        self._arena.clear()
        self._reset()

    def swap(self, other: "RBTree") -> None:
        """Exchange contents with another tree. Cursors follow their nodes. O(1)"""
        if other is self:
            return

        mine = self._detach()
        theirs = other._detach()
        self._attach(*theirs)
        other._attach(*mine)
        logging.debug(f"Swapped trees of sizes {other._size} and {self._size}")

    # Lookup

    def find(self, key: Any) -> TreeIterator:
        """Cursor at key, or end(). O(log N)"""
        return self._cursor(search.find(self._root, key))

    def contains(self, key: Any) -> bool:
        return self.find(key) != self.end()

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def lower_bound(self, key: Any) -> TreeIterator:
        """Cursor at the first key >= key, or end(). O(log N)"""
        return self._cursor(search.lower_bound(self._root, key))

    def upper_bound(self, key: Any) -> TreeIterator:
        """Cursor at the first key > key, or end(). O(log N)"""
        return self._cursor(search.upper_bound(self._root, key))

    def min_key(self) -> Any:
        """Return the smallest key. O(1)"""
        if self._rightmost is None:
            raise ValueError("Tree is empty")
        return self._leftmost.key

    def max_key(self) -> Any:
        """Return the largest key. O(1)"""
        if self._rightmost is None:
            raise ValueError("Tree is empty")
        return self._rightmost.key

    # Iteration

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def __reversed__(self) -> Iterator[Any]:
        return _ReverseIterator(self)

    def iterator(self, start: Any | None = None, end: Any | None = None) -> Iterator[Any]:
        first = self.begin() if start is None else self.lower_bound(start)
        return _RangeIterator(first, end)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[Any]:
        first = self.begin() if start is None else self.lower_bound(start)
        return _AsyncRangeIterator(first, end)

    # Copy and move

    def copy(self) -> "RBTree":
        """Deep copy of the structure into a new arena. O(N)"""
        return self._clone(None)

    def __copy__(self) -> "RBTree":
        return self._clone(None)

    def __deepcopy__(self, memo: dict) -> "RBTree":
        return self._clone(lambda key: copy.deepcopy(key, memo))

    def assign(self, other: "RBTree") -> None:
        """Replace contents with a deep copy of other."""
        if other is self:
            return
        self.move_assign(other.copy())

    def move(self) -> "RBTree":
        """
        Transfer every node to a new tree and leave this one empty.

        The anchor travels with the nodes, so cursors taken before the move
        (end() included) now address the returned tree. This tree restarts
        with a fresh arena and anchor.
        """
        target = type(self)(check_invariants=self._check_invariants)
        target._attach(*self._detach())
        logging.debug(f"Moved {target._size} keys to a new tree")
        return target

    def move_assign(self, other: "RBTree") -> None:
        """Drop current contents and take over other's nodes."""
        if other is self:
            return
        self._arena.clear()
        self._reset()
        self._attach(*other._detach())
        logging.debug(f"Move-assigned {self._size} keys")

    # Diagnostics

    def validate(self) -> int:
        """
        Check every invariant, including the cached leftmost/rightmost and
        the size counter.

        Returns:
            Black height of the tree.

        Raises:
            InvariantViolationError: On the first violation found.
        """
        black_height = validate(self._anchor)

        root = self._root
        if root is None:
            if self._size != 0 or self._leftmost is not self._anchor or self._rightmost is not None:
                raise InvariantViolationError("empty-state", detail="empty tree has stale caches")
            return black_height

        cached = (("root", root), ("leftmost", self._leftmost), ("rightmost", self._rightmost))
        for name, node in cached:
            if not self._arena.owns(node):
                raise InvariantViolationError(
                    "ownership", node.key, f"{name} node belongs to another arena"
                )

        if self._leftmost is not search.minimum(root):
            raise InvariantViolationError("leftmost-cache", self._leftmost.key)
        if self._rightmost is not search.maximum(root):
            raise InvariantViolationError("rightmost-cache", self._rightmost.key)
        if self._size != len(self._arena):
            raise InvariantViolationError(
                "size", detail=f"size is {self._size}, arena holds {len(self._arena)} nodes"
            )
        return black_height

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path. O(N)"""
        return height(self._anchor)

    def __repr__(self) -> str:
        return f"RBTree({list(self)!r})"

    # Internals

    def _cursor(self, node: Node | None) -> TreeIterator:
        return TreeIterator(node if node is not None else self._anchor, self._anchor)

    def _insert_root(self, key: Any) -> Node:
        node = self._arena.allocate(key, Color.BLACK)
        node.parent = self._anchor
        self._anchor.left = node

        self._leftmost = self._rightmost = node
        self._size = 1
        return node

    def _insert_at(self, parent: Node, key: Any) -> Node:
        """Attach a red node under parent, rebalance, refresh caches."""
        node = self._arena.allocate(key, Color.RED)
        node.parent = parent

        if key < parent.key:
            parent.left = node
            new_min = parent is self._leftmost
            new_max = False
        else:
            parent.right = node
            new_min = False
            new_max = parent is self._rightmost

        insert_fixup(self._anchor, node)

        if new_min:
            self._leftmost = node
        elif new_max:
            self._rightmost = node

        self._size += 1

        if self._check_invariants:
            try:
                self.validate()
            except InvariantViolationError as e:
                logging.critical(f"Tree corrupted after inserting {key!r}: {e}")
                raise

        return node

    def _clone(self, copy_key: Callable[[Any], Any] | None) -> "RBTree":
        target = type(self)(check_invariants=self._check_invariants)
        root = copy_structure(self._root, target._anchor, target._arena, copy_key)
        if root is not None:
            target._leftmost = search.minimum(root)
            target._rightmost = search.maximum(root)
            target._size = self._size

        logging.debug(f"Copied tree with {self._size} keys")
        return target

    def _detach(self) -> tuple[NodeArena, EndNode, Node | EndNode, Node | None, int]:
        """Hand out arena, anchor and caches; restart with a fresh arena and anchor."""
        state = (self._arena, self._anchor, self._leftmost, self._rightmost, self._size)

        self._arena = NodeArena()
        self._anchor = EndNode()
        self._reset()
        return state

    def _attach(
        self,
        arena: NodeArena,
        anchor: EndNode,
        leftmost: Node | EndNode,
        rightmost: Node | None,
        size: int,
    ) -> None:
        """Adopt detached state, replacing whatever this tree held."""
        self._arena = arena
        self._anchor = anchor
        self._leftmost = leftmost
        self._rightmost = rightmost
        self._size = size

    def _reset(self) -> None:
        self._anchor.left = None
        self._leftmost = self._anchor
        self._rightmost = None
        self._size = 0
