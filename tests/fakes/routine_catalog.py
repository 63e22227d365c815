"""
Fake Routine Catalog for testing.
"""
from typing import Any, Dict, List, Optional
import copy

from application.exceptions import CollaboratorError
from domain.models import Routine, RoutineExercise


class FakeRoutineCatalog:
    """
    In-memory fake implementation of RoutineCatalog for testing.

    Usage:
        catalog = FakeRoutineCatalog()
        catalog.seed([Routine(id="r1", name="Warmup A", exercises=[...])])
        routines = await catalog.list()
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._routines: Dict[str, Routine] = {}
        self._next_id = 1
        self.fail_with: Optional[Exception] = None

    def reset(self) -> None:
        self._routines.clear()
        self._next_id = 1
        self.fail_with = None

    def seed(self, routines: List[Routine]) -> None:
        for routine in routines:
            self._routines[routine.id] = routine

    def get_all(self) -> List[Routine]:
        """Get all stored routines (test helper)."""
        return list(self._routines.values())

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    # =========================================================================
    # RoutineCatalog Protocol Methods
    # =========================================================================

    async def list(self) -> List[Routine]:
        self._check()
        return [copy.deepcopy(routine) for routine in self._routines.values()]

    async def create(
        self,
        name: str,
        description: str,
        exercises: List[RoutineExercise],
    ) -> Routine:
        self._check()
        routine = Routine(
            id=f"routine-{self._next_id}",
            name=name,
            description=description,
            exercises=list(exercises),
        )
        self._next_id += 1
        self._routines[routine.id] = routine
        return copy.deepcopy(routine)

    async def update(self, routine_id: str, patch: Dict[str, Any]) -> Routine:
        self._check()
        if routine_id not in self._routines:
            raise CollaboratorError(f"Routine {routine_id} not found", 404)
        updated = Routine.model_validate(
            {**self._routines[routine_id].model_dump(), **patch, "id": routine_id}
        )
        self._routines[routine_id] = updated
        return copy.deepcopy(updated)

    async def delete(self, routine_id: str) -> None:
        self._check()
        self._routines.pop(routine_id, None)
