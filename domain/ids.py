"""
Identifier generation for document nodes.

Weeks, items and superset groups all need identifiers that are unique
within a ProgramDocument. Generation is injected so tests can assert
deterministic identities while production code uses UUIDs.

Usage:
    >>> ids = SequentialIdGenerator()
    >>> ids.new_id("item")
    'item-1'
    >>> ids.reserve(["item-2"])
    >>> ids.new_id("item")
    'item-3'
"""

import itertools
import uuid
from typing import Dict, Iterable, Iterator, Protocol, Set


class IdGenerator(Protocol):
    """Produces identifiers for new document nodes."""

    def new_id(self, prefix: str) -> str:
        """
        Return a fresh identifier.

        Args:
            prefix: Node type prefix ("week", "item", "superset")

        Returns:
            Identifier string, never returned before by this generator
            and never one of the reserved identifiers.
        """
        ...

    def reserve(self, existing: Iterable[str]) -> None:
        """Mark identifiers already present in a document as taken."""
        ...


class UuidIdGenerator:
    """Random UUID4-based identifiers (production default)."""

    def new_id(self, prefix: str) -> str:
        return f"{prefix}-{uuid.uuid4()}"

    def reserve(self, existing: Iterable[str]) -> None:
        # Random ids do not collide with loaded ones.
        return None


class SequentialIdGenerator:
    """
    Deterministic identifiers: one counter per prefix, starting at 1.

    Reserved identifiers are skipped, so a generator attached to a loaded
    document never hands out an id the document already uses.
    Intended for tests and reproducible fixtures.
    """

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._counters: Dict[str, Iterator[int]] = {}
        self._taken: Set[str] = set()

    def new_id(self, prefix: str) -> str:
        counter = self._counters.setdefault(prefix, itertools.count(self._start))
        candidate = f"{prefix}-{next(counter)}"
        while candidate in self._taken:
            candidate = f"{prefix}-{next(counter)}"
        self._taken.add(candidate)
        return candidate

    def reserve(self, existing: Iterable[str]) -> None:
        self._taken.update(existing)


def default_id_generator() -> IdGenerator:
    """Return the generator used when callers do not inject one."""
    return UuidIdGenerator()
