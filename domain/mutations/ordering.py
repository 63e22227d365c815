"""Helpers shared by the reorder operations."""

from typing import Sequence


def is_permutation(current: Sequence[str], proposed: Sequence[str]) -> bool:
    """
    Check that ``proposed`` contains exactly the ids in ``current``.

    Duplicates in ``proposed`` are rejected even when the id sets match.

    Examples:
        >>> is_permutation(["a", "b"], ["b", "a"])
        True
        >>> is_permutation(["a", "b"], ["a", "a"])
        False
    """
    if len(current) != len(proposed):
        return False
    return sorted(current) == sorted(proposed)
