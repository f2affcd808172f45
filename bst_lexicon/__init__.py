"""
In-memory lexicon: an ordered set of strings backed by a binary search tree.

This package provides:
- add(s) / add_all(array, lo, hi) - O(height) insertion, median-first bulk load
- contains(s) / get_min() / get_next(s) - lookups and successor queries
- consume_all_with_prefix(sink, prefix) - ordered prefix enumeration
- to_array(buffer) - materialisation as a sorted list
"""

from bst_lexicon.models.exceptions import InvariantError, NullArgumentError
from bst_lexicon.models.invariant import is_reporting, set_reporting
from bst_lexicon.models.lexicon import Lexicon, Node

__all__ = [
    "Lexicon",
    "Node",
    "NullArgumentError",
    "InvariantError",
    "set_reporting",
    "is_reporting",
]
