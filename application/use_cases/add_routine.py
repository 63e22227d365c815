"""
AddRoutine Use Case.

Adds a routine reference to one Day of a program, either for an existing
catalog routine or for a routine authored inline and created in the
catalog first. The routine's exercises always stay in the catalog; the
document only receives a single reference item.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from application.exceptions import CollaboratorError
from application.ports import RoutineCatalog
from domain.ids import IdGenerator, default_id_generator
from domain.models import ProgramDocument, Routine, RoutineExercise, Weekday
from domain.mutations import MutationResult, add_item_at, new_routine_reference

logger = logging.getLogger(__name__)


@dataclass
class AddRoutineResult:
    """Result of the AddRoutine use case execution."""

    success: bool
    document: Optional[ProgramDocument] = None
    routine: Optional[Routine] = None
    error: Optional[str] = None


class AddRoutineUseCase:
    """
    Use case for placing routines into a program.

    Usage:
        >>> use_case = AddRoutineUseCase(catalog=routine_catalog)
        >>> result = await use_case.execute(doc, 0, Weekday.TUE, "routine-42")
        >>> if result.success:
        ...     doc = result.document
    """

    def __init__(self, catalog: RoutineCatalog, ids: Optional[IdGenerator] = None) -> None:
        self._catalog = catalog
        self._ids = ids or default_id_generator()

    async def execute(
        self,
        document: ProgramDocument,
        week_index: int,
        weekday: Weekday,
        routine_id: str,
    ) -> AddRoutineResult:
        """
        Add a reference to an existing catalog routine.

        Args:
            document: Current document (not modified)
            week_index: 0-based week index
            weekday: Target day
            routine_id: Catalog routine id

        Returns:
            AddRoutineResult with the updated document
        """
        try:
            routines = await self._catalog.list()
        except CollaboratorError as e:
            logger.error(f"Routine catalog unavailable: {e}")
            return AddRoutineResult(success=False, error=e.message)

        routine = next((r for r in routines if r.id == routine_id), None)
        if routine is None:
            logger.warning(f"Routine not found in catalog: {routine_id}")
            return AddRoutineResult(success=False, error=f"Routine {routine_id} not found")

        return self._place(document, week_index, weekday, routine)

    async def create_and_add(
        self,
        document: ProgramDocument,
        week_index: int,
        weekday: Weekday,
        name: str,
        description: str,
        exercises: List[RoutineExercise],
    ) -> AddRoutineResult:
        """
        Create a routine in the catalog, then add a reference to it.

        The target week is checked before the catalog is called so a stale
        index never leaves an orphan routine behind.
        """
        if document.week(week_index) is None:
            return AddRoutineResult(success=False, error=f"No week at index {week_index}")
        if not name.strip():
            return AddRoutineResult(success=False, error="Routine name is required")
        if not exercises:
            return AddRoutineResult(
                success=False, error="A routine needs at least one exercise"
            )

        try:
            routine = await self._catalog.create(name.strip(), description, exercises)
        except CollaboratorError as e:
            logger.error(f"Routine creation failed: {e}")
            return AddRoutineResult(success=False, error=e.message)

        logger.info(f"Created routine {routine.id} with {routine.exercise_count} exercises")
        return self._place(document, week_index, weekday, routine)

    def _place(
        self,
        document: ProgramDocument,
        week_index: int,
        weekday: Weekday,
        routine: Routine,
    ) -> AddRoutineResult:
        result: MutationResult[ProgramDocument] = add_item_at(
            document, week_index, weekday, new_routine_reference(self._ids, routine)
        )
        if not result.success:
            return AddRoutineResult(success=False, routine=routine, error=result.error.message)
        return AddRoutineResult(success=True, document=result.value, routine=routine)
