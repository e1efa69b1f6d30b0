"""
RangeIterable protocol for data structures that support ordered range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for data structures that support iteration over a range of keys.

    Implementations must support:
    - Full iteration in ascending order via __iter__
    - Full iteration in descending order via __reversed__
    - Range-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__ and async_iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all keys in ascending order."""
        pass

    @abstractmethod
    def __reversed__(self) -> Iterator[Any]:
        """Return an iterator over all keys in descending order."""
        pass

    @abstractmethod
    def iterator(self, start: Any | None = None, end: Any | None = None) -> Iterator[Any]:
        """
        Return an iterator over keys in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding keys in ascending order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all keys in ascending order."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[Any]:
        """
        Return an async iterator over keys in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            AsyncIterator yielding keys in ascending order.
        """
        pass
