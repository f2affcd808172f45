"""
SortedSet abstract base class for ordered sets of strings.
"""

from abc import abstractmethod
from collections.abc import Callable, Sequence

from bst_lexicon.interfaces.range_iterable import RangeIterable


class SortedSet(RangeIterable):
    """
    Abstract base class for ordered sets of strings.

    Keys are compared with the native str ordering (codepoint-wise, a
    proper prefix sorts before its extensions). Inherits range iteration
    capabilities from RangeIterable.

    Implementations:
    - Lexicon: plain binary search tree with a median-first bulk loader
    """

    @abstractmethod
    def add(self, s: str) -> bool:
        """
        Insert a key if it is not already present.

        Args:
            s: The key to insert. Must not be None.

        Returns:
            True if the key was added, False if it was already present.

        Time complexity: O(height)
        """
        pass

    @abstractmethod
    def add_all(self, array: Sequence[str], lo: int = 0, hi: int | None = None) -> int:
        """
        Insert the keys array[lo:hi].

        Returns:
            The number of keys actually added.
        """
        pass

    @abstractmethod
    def contains(self, s: str | None) -> bool:
        """
        Check if a key exists.

        Args:
            s: The key to check. None is never contained.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(height)
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
    def get_min(self) -> str | None:
        """Return the least key, or None if the set is empty."""
        pass

    @abstractmethod
    def get_next(self, s: str) -> str | None:
        """
        Return the least key strictly greater than s.

        Args:
            s: The query string. It need not be in the set.

        Returns:
            The successor key, or None if there is none.
        """
        pass

    @abstractmethod
    def consume_all_with_prefix(self, sink: Callable[[str], None], prefix: str) -> None:
        """
        Deliver every key starting with prefix to sink, in ascending order.

        Args:
            sink: Called once per matching key.
            prefix: The required prefix; "" matches every key.
        """
        pass

    def consume_all(self, sink: Callable[[str], None]) -> None:
        """Deliver every key to sink, in ascending order."""
        self.consume_all_with_prefix(sink, "")

    @abstractmethod
    def to_array(self, buffer: list | None = None) -> list:
        """
        Return the keys in ascending order.

        Args:
            buffer: List to fill if it is long enough; a fresh list is
                allocated otherwise. Slots past size() are left untouched.

        Returns:
            The list that was written.
        """
        pass
