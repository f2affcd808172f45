"""
RangeIterable protocol for containers that support ordered range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class RangeIterable(ABC):
    """
    Protocol for containers whose keys can be walked in ascending order.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        """Return an iterator over all keys in sorted order."""
        pass

    @abstractmethod
    def iterator(self, start: str | None = None, end: str | None = None) -> Iterator[str]:
        """
        Return an iterator over the keys in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding keys in sorted order.
        """
        pass
