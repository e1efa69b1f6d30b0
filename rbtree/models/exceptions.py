"""
Custom exceptions for the red-black tree.
"""

from typing import Any


class InvalidIteratorError(Exception):
    """
    Raised when a TreeIterator is used outside the range it can address.

    Covers dereferencing or advancing the end position and retreating
    before the first key.
    """

    def __init__(self, operation: str, detail: str):
        """
        Initialize iterator error.

        Args:
            operation: The iterator operation that failed.
            detail: Human readable reason.
        """
        self.operation = operation
        super().__init__(f"Cannot {operation} iterator: {detail}")


class InvariantViolationError(AssertionError):
    """
    Raised when a red-black or search-tree invariant does not hold.

    This indicates a bug in the balancing code, never a caller error.
    """

    def __init__(self, invariant: str, key: Any = None, detail: str = ""):
        """
        Initialize invariant violation.

        Args:
            invariant: Short name of the broken invariant.
            key: Key of the node where the violation was found, if any.
            detail: Additional description.
        """
        self.invariant = invariant
        self.key = key
        message = f"Red-black invariant violated ({invariant})"
        if key is not None:
            message += f" at key {key!r}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
