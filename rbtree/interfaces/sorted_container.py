"""
SortedContainer abstract base class for ordered unique-key containers.
"""

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any

from rbtree.interfaces.range_iterable import RangeIterable


class SortedContainer(RangeIterable):
    """
    Abstract base class for ordered containers of unique keys.

    Provides O(log N) insertion, lookup and bound queries and a
    bidirectional cursor type. Inherits range iteration from RangeIterable.

    Implementations:
    - RBTree: red-black tree with an end-node anchor
    """

    @abstractmethod
    def insert(self, key: Any) -> tuple[Any, bool]:
        """
        Insert a key if it is not present yet.

        Args:
            key: The key to insert.

        Returns:
            (cursor at the key, True if a new entry was created).

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def insert_many(self, keys: Iterable[Any]) -> int:
        """
        Insert keys one by one in input order, skipping duplicates.

        Args:
            keys: Keys to insert.

        Returns:
            Number of keys that were actually added.

        Time complexity: O(M log N)
        """
        pass

    @abstractmethod
    def find(self, key: Any) -> Any:
        """
        Locate a key.

        Args:
            key: The key to look up.

        Returns:
            Cursor at the key, or the end cursor if absent.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, key: Any) -> bool:
        """
        Check if a key exists.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def lower_bound(self, key: Any) -> Any:
        """
        Return a cursor at the first key not less than key, or end.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def upper_bound(self, key: Any) -> Any:
        """
        Return a cursor at the first key greater than key, or end.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of keys.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def empty(self) -> bool:
        """
        Return True if the container holds no keys.

        Time complexity: O(1)
        """
        pass
