"""
Lexicon - ordered set of strings stored in a plain binary search tree.

No rebalancing is performed: inserting sorted input one key at a time
yields a linear tree. add_all() inserts medians first so that a sorted,
duplicate-free range produces a tree of logarithmic height.
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from bst_lexicon.interfaces.sorted_set import SortedSet
from bst_lexicon.models.exceptions import InvariantError, NullArgumentError
from bst_lexicon.models.invariant import well_formed

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """Node in the lexicon's tree."""

    key: str
    left: "Node | None" = None
    right: "Node | None" = None


class Lexicon(SortedSet):
    """
    Binary search tree implementation of SortedSet.

    Properties maintained:
    1. Every node has a key
    2. Keys in a left subtree are strictly less than the parent's key
    3. Keys in a right subtree are strictly greater than the parent's key
    4. The cached size equals the number of nodes

    The invariant is checked at the start of every public operation and at
    the end of every mutation while check_invariants is on (the default
    unless Python runs with -O). Each check walks the whole tree, so with
    checking on every operation costs O(n), including size() and contains(),
    and add_all() becomes quadratic. Pass check_invariants=False to get
    O(1) size() and O(height) lookups and insertions.
    """

    def __init__(self, check_invariants: bool = __debug__) -> None:
        self._root: Node | None = None
        self._size: int = 0
        self._check_invariants = check_invariants
        self._assert_well_formed("end of __init__()")

    def _assert_well_formed(self, where: str) -> None:
        if self._check_invariants and not well_formed(self._root, self._size):
            raise InvariantError(where)

    def size(self) -> int:
        self._assert_well_formed("start of size()")
        return self._size

    def __len__(self) -> int:
        return self.size()

    def get_min(self) -> str | None:
        """Return the leftmost key, or None if empty."""
        self._assert_well_formed("start of get_min()")
        if self._root is None:
            return None

        node = self._root
        while node.left is not None:
            node = node.left
        return node.key

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        self._assert_well_formed("start of height()")
        deepest = 0
        pending: list[tuple[Node, int]] = []
        if self._root is not None:
            pending.append((self._root, 1))

        while pending:
            node, depth = pending.pop()
            deepest = max(deepest, depth)
            if node.left is not None:
                pending.append((node.left, depth + 1))
            if node.right is not None:
                pending.append((node.right, depth + 1))
        return deepest

    def contains(self, s: str | None) -> bool:
        """Check membership. O(height). None is never contained."""
        self._assert_well_formed("start of contains()")
        if s is None:
            return False

        node = self._root
        while node is not None:
            if s == node.key:
                return True
            if s < node.key:
                node = node.left
            else:
                node = node.right
        return False

    def __contains__(self, s: object) -> bool:
        if not isinstance(s, str):
            self._assert_well_formed("start of __contains__()")
            return False
        return self.contains(s)

    def get_next(self, s: str) -> str | None:
        """
        Return the least key strictly greater than s, or None.

        Each step left records a smaller candidate; each step right skips a
        subtree whose keys are all <= s. Iterative, O(height).
        """
        self._assert_well_formed("start of get_next()")
        if s is None:
            raise NullArgumentError("s")

        result = None
        node = self._root
        while node is not None:
            if node.key <= s:
                node = node.right
            else:
                result = node.key
                node = node.left
        return result

    def consume_all_with_prefix(self, sink: Callable[[str], None], prefix: str) -> None:
        self._assert_well_formed("start of consume_all_with_prefix()")
        if sink is None:
            raise NullArgumentError("sink")
        if prefix is None:
            raise NullArgumentError("prefix")

        for key in self._prefix_walk(prefix):
            sink(key)

    def _prefix_walk(self, prefix: str) -> Iterator[str]:
        """In-order walk restricted to the keys starting with prefix."""
        stack: list[Node] = []
        node = self._root

        while stack or node is not None:
            # Everything left of a key <= prefix is < prefix and cannot match
            while node is not None:
                stack.append(node)
                node = node.left if prefix < node.key else None

            node = stack.pop()
            matched = node.key.startswith(prefix)
            if matched:
                yield node.key

            # Right descendants can match only while the window is still open
            node = node.right if prefix > node.key or matched else None

    def add(self, s: str) -> bool:
        """Insert s if absent. O(height). Returns True if it was added."""
        self._assert_well_formed("start of add()")
        if s is None:
            raise NullArgumentError("s")

        lag = None
        node = self._root
        while node is not None:
            if node.key == s:
                break
            lag = node
            if s > node.key:
                node = node.right
            else:
                node = node.left

        added = node is None
        if added:
            self._attach(Node(key=s), lag)
            self._size += 1

        self._assert_well_formed("end of add()")
        return added

    def _attach(self, new_node: Node, parent: Node | None) -> None:
        """Hang new_node under parent on the side the descent would take."""
        if parent is None:
            self._root = new_node
        elif new_node.key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node

    def add_all(self, array: Sequence[str], lo: int = 0, hi: int | None = None) -> int:
        """
        Insert array[lo:hi], medians first.

        The middle element of the range is added, then the lower and upper
        halves are handled the same way, so a sorted range produces a
        balanced tree. All mutations go through add().

        Args:
            array: Source of keys.
            lo: First index (inclusive).
            hi: Last index (exclusive). Defaults to len(array).

        Returns:
            Number of keys actually added (duplicates are skipped).

        Raises:
            NullArgumentError: If array is None.
            IndexError: If the range is not within the array.
        """
        self._assert_well_formed("start of add_all()")
        if array is None:
            raise NullArgumentError("array")
        if hi is None:
            hi = len(array)
        if not 0 <= lo <= hi <= len(array):
            raise IndexError(f"range [{lo}, {hi}) is outside array of length {len(array)}")

        added = self._add_range(array, lo, hi)
        logger.debug(f"add_all [{lo}, {hi}): added {added} of {hi - lo} keys")

        self._assert_well_formed("end of add_all()")
        return added

    def _add_range(self, array: Sequence[str], lo: int, hi: int) -> int:
        if lo == hi:
            return 0

        mid = lo + (hi - lo) // 2
        added = 1 if self.add(array[mid]) else 0
        added += self._add_range(array, lo, mid)
        added += self._add_range(array, mid + 1, hi)
        return added

    def to_array(self, buffer: list | None = None) -> list:
        """
        Return the keys in order, written into buffer when it is big enough.

        Slots of buffer past size() keep whatever they held.
        """
        self._assert_well_formed("start of to_array()")
        if buffer is None or len(buffer) < self._size:
            buffer = [None] * self._size

        for index, key in enumerate(_RangeIterator(self._root, None, None)):
            buffer[index] = key
        return buffer

    def __iter__(self) -> Iterator[str]:
        return self.iterator()

    def iterator(self, start: str | None = None, end: str | None = None) -> Iterator[str]:
        self._assert_well_formed("start of iterator()")
        return _RangeIterator(self._root, start, end)

    def __repr__(self) -> str:
        self._assert_well_formed("start of __repr__()")
        return f"Lexicon({list(_RangeIterator(self._root, None, None))!r})"


class _RangeIterator(Iterator[str]):
    """Iterator for range queries on the lexicon's tree."""

    def __init__(self, root: Node | None, start: str | None, end: str | None) -> None:
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        if self._end is not None and node.key >= self._end:
            self._stack.clear()
            raise StopIteration

        self._push_left_path(node.right, None)
        return node.key

    def _push_left_path(self, node: Node | None, start: str | None) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node:
            if start is not None and node.key < start:
                node = node.right
            else:
                self._stack.append(node)
                node = node.left
