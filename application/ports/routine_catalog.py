"""
Routine Catalog Interface (Port).

Routines are owned by the catalog. The editor lists them for selection
and creates them during inline authoring; it never edits a routine's
exercises through a program document.
"""
from typing import Any, Dict, List, Protocol

from domain.models import Routine, RoutineExercise


class RoutineCatalog(Protocol):
    """Abstract interface for the routine catalog."""

    async def list(self) -> List[Routine]:
        """Return every routine available to the current user."""
        ...

    async def create(
        self,
        name: str,
        description: str,
        exercises: List[RoutineExercise],
    ) -> Routine:
        """Create a routine and return it with its assigned id."""
        ...

    async def update(self, routine_id: str, patch: Dict[str, Any]) -> Routine:
        """Apply a partial update and return the updated routine."""
        ...

    async def delete(self, routine_id: str) -> None:
        """Delete a routine. Program items referencing it are left untouched."""
        ...
