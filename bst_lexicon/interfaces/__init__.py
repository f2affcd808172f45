"""
Abstract base classes for ordered string containers.
"""

from bst_lexicon.interfaces.range_iterable import RangeIterable
from bst_lexicon.interfaces.sorted_set import SortedSet

__all__ = ["RangeIterable", "SortedSet"]
