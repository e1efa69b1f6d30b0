"""
Cursor and range iterators over a red-black tree.
"""

from collections.abc import AsyncIterator, Iterator
from typing import Any

from rbtree.algorithms.search import maximum, minimum
from rbtree.models.exceptions import InvalidIteratorError
from rbtree.models.node import EndNode, Node


class TreeIterator:
    """
    Bidirectional cursor addressing one node of a tree, or its end.

    Stepping walks parent/child links only, so a cursor needs no stack and
    stays valid across insertions: nodes never move, rotations only relink
    them.
    """

    def __init__(self, node: Node | EndNode, end: EndNode) -> None:
        self._node = node
        self._end = end

    @property
    def node(self) -> Node | EndNode:
        return self._node

    @property
    def is_end(self) -> bool:
        return self._node is self._end

    @property
    def key(self) -> Any:
        """The addressed key. Raises InvalidIteratorError at end."""
        if self._node is self._end:
            raise InvalidIteratorError("dereference", "iterator is at end")
        return self._node.key

    def advance(self) -> "TreeIterator":
        """
        Move to the in-order successor. O(1) amortized.

        Returns:
            self, so calls can be chained.

        Raises:
            InvalidIteratorError: If the iterator is already at end.
        """
        node = self._node
        if node is self._end:
            raise InvalidIteratorError("advance", "iterator is at end")

        if node.right is not None:
            self._node = minimum(node.right)
            return self

        # Climb until we come up from a left subtree. The root is the left
        # child of the anchor, so climbing past the maximum stops at end.
        while node.parent.left is not node:
            node = node.parent
        self._node = node.parent
        return self

    def retreat(self) -> "TreeIterator":
        """
        Move to the in-order predecessor. Retreating from end lands on the
        maximum key.

        Raises:
            InvalidIteratorError: If there is no previous key.
        """
        node = self._node
        if node is self._end:
            if self._end.left is None:
                raise InvalidIteratorError("retreat", "tree is empty")
            self._node = maximum(self._end.left)
            return self

        if node.left is not None:
            self._node = maximum(node.left)
            return self

        while True:
            parent = node.parent
            if parent is self._end:
                raise InvalidIteratorError("retreat", "iterator is at the first key")
            if parent.right is node:
                self._node = parent
                return self
            node = parent

    def copy(self) -> "TreeIterator":
        return TreeIterator(self._node, self._end)

    def __iter__(self) -> Iterator[Any]:
        """Yield keys from this position up to end without moving self."""
        cursor = self.copy()
        while not cursor.is_end:
            yield cursor.key
            cursor.advance()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeIterator):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        if self.is_end:
            return "TreeIterator(end)"
        return f"TreeIterator({self._node.key!r})"


class _RangeIterator(Iterator[Any]):
    """Iterator over keys in [start, end) of a Red-Black Tree."""

    def __init__(self, first: TreeIterator, end: Any | None) -> None:
        self._cursor = first
        self._end = end

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._cursor.is_end:
            raise StopIteration

        key = self._cursor.key

        # Check end bound
        if self._end is not None and not key < self._end:
            raise StopIteration

        self._cursor.advance()
        return key


class _ReverseIterator(Iterator[Any]):
    """Iterator over keys from the maximum down to the current minimum."""

    def __init__(self, tree: Any) -> None:
        self._tree = tree
        self._cursor = tree.end()

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        # begin() is read on every step so a key inserted below the
        # current minimum is still reached.
        if self._cursor == self._tree.begin():
            raise StopIteration

        self._cursor.retreat()
        return self._cursor.key


class _AsyncRangeIterator(AsyncIterator[Any]):
    """Async iterator over keys in [start, end) (in-memory, no I/O)."""

    def __init__(self, first: TreeIterator, end: Any | None) -> None:
        self._cursor = first
        self._end = end

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> Any:
        if self._cursor.is_end:
            raise StopAsyncIteration

        key = self._cursor.key

        # Check end bound
        if self._end is not None and not key < self._end:
            raise StopAsyncIteration

        self._cursor.advance()
        return key
