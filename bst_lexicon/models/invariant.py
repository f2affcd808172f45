"""
Well-formedness checks for the lexicon's binary search tree.

A tree is well formed when every node has a key, every key in a left
subtree is strictly less than its ancestor's key, every key in a right
subtree is strictly greater, and the stored size equals the population.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bst_lexicon.models.lexicon import Node

logger = logging.getLogger(__name__)

_do_report = True


def set_reporting(enabled: bool) -> None:
    """Enable or suppress invariant violation reports process-wide."""
    global _do_report
    _do_report = enabled


def is_reporting() -> bool:
    return _do_report


def report(error: str) -> bool:
    """
    Report a violation found while checking the invariant.

    Args:
        error: Description of the exact problem found.

    Returns:
        False, always, so callers can write ``return report(...)``.
    """
    if _do_report:
        logger.warning(f"Invariant error found: {error}")
    return False


def _report_negative(error: str) -> int:
    report(error)
    return -1


def check_in_range(node: "Node | None", lo: str | None = None, hi: str | None = None) -> int:
    """
    Check that every key in the subtree lies strictly between lo and hi.

    Bounds tighten on the way down: a left child inherits the parent's key as
    its upper bound, a right child as its lower bound. The walk keeps pending
    subtrees on an explicit stack, so a degenerate (linear) tree of any depth
    can be checked.

    Args:
        node: Root of the subtree to check.
        lo: If not None, every key must be greater than this.
        hi: If not None, every key must be less than this.

    Returns:
        Number of nodes in the subtree, or -1 if a problem was found
        (the problem has already been reported).
    """
    count = 0
    pending: list[tuple["Node | None", str | None, str | None]] = [(node, lo, hi)]

    while pending:
        current, low, high = pending.pop()
        if current is None:
            continue

        key = current.key
        if key is None:
            return _report_negative("None key found")
        if low is not None and key <= low:
            return _report_negative(f"Detected node outside of lower bound {low!r}: {key!r}")
        if high is not None and key >= high:
            return _report_negative(f"Detected node outside of upper bound {high!r}: {key!r}")

        count += 1
        pending.append((current.right, key, high))
        pending.append((current.left, low, key))

    return count


def well_formed(root: "Node | None", size: int) -> bool:
    """
    Check the whole tree against its stored size.

    Returns:
        True if the invariant holds. Problems are reported via report().
    """
    n = check_in_range(root)
    if n < 0:
        return False
    if n != size:
        return report(f"size is {size} but should be {n}")
    return True
