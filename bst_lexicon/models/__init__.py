"""
Data models for the lexicon.
"""

from bst_lexicon.models.exceptions import InvariantError, NullArgumentError
from bst_lexicon.models.lexicon import Lexicon, Node

__all__ = [
    "Lexicon",
    "Node",
    "NullArgumentError",
    "InvariantError",
]
