"""
ProgramEditorSession - the single-actor editing session.

The session owns the current ProgramDocument. Every edit goes through a
pure mutation; the session swaps in the new document only when the
mutation succeeds, so a refused edit leaves the document exactly as it
was. The only suspension points are collaborator calls (catalog, video
library, focus areas, save/load). Edits made while one of those is
pending are kept.

Authoring proceeds through three steps: details -> structure -> review.
Moving past the details step requires a title and a focus area.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from application.exceptions import CollaboratorError, PersistenceFailure
from application.ports import FocusAreaSource, ProgramRepository, RoutineCatalog, VideoSource
from application.use_cases import (
    AddRoutineResult,
    AddRoutineUseCase,
    LoadProgramResult,
    LoadProgramUseCase,
    SaveProgramResult,
    SaveProgramUseCase,
)
from domain.converters import DayNumbering
from domain.ids import IdGenerator, default_id_generator
from domain.models import (
    FocusArea,
    FocusAreaTag,
    Item,
    ProgramDocument,
    Routine,
    RoutineExercise,
    VideoDescriptor,
    Weekday,
)
from domain.mutations import (
    DayClipboard,
    MutationErrorCode,
    MutationResult,
    SupersetAdjacency,
    SupersetGroup,
    add_item_at,
    add_week,
    clear_day,
    copy_days,
    cut_days,
    delete_item_at,
    describe_superset_at,
    duplicate_week,
    edit_item_at,
    link_at,
    move_item,
    new_exercise,
    new_program,
    new_routine_reference,
    new_video_reference,
    paste_days,
    remove_week,
    rename_week,
    reorder_items_at,
    reorder_weeks,
    set_all_weeks_collapsed,
    set_week_duration,
    superset_groups,
    toggle_week_collapsed,
    unlink_at,
)
from domain.validation import validate_details

logger = logging.getLogger(__name__)


class EditorStep(str, Enum):
    """Authoring workflow steps, in order."""

    DETAILS = "details"
    STRUCTURE = "structure"
    REVIEW = "review"


_STEPS = list(EditorStep)


@dataclass
class StepTransition:
    """Outcome of a step change request."""

    success: bool
    step: EditorStep
    validation_errors: List[str] = field(default_factory=list)


class ProgramEditorSession:
    """
    Editing session for one program and one actor.

    Usage:
        >>> session = ProgramEditorSession(
        ...     program_repo=repo,
        ...     routine_catalog=catalog,
        ...     video_source=videos,
        ...     focus_area_source=focus_areas,
        ... )
        >>> session.set_title("Speed Block")
        >>> session.add_exercise(0, Weekday.MON, "Tee Work", sets=3, reps=10)
        >>> result = await session.save()
    """

    def __init__(
        self,
        program_repo: ProgramRepository,
        routine_catalog: RoutineCatalog,
        video_source: VideoSource,
        focus_area_source: FocusAreaSource,
        document: Optional[ProgramDocument] = None,
        ids: Optional[IdGenerator] = None,
        numbering: DayNumbering = DayNumbering.MONDAY_FIRST,
        adjacency: SupersetAdjacency = SupersetAdjacency.NONE,
    ) -> None:
        self._ids = ids or default_id_generator()
        self._routine_catalog = routine_catalog
        self._video_source = video_source
        self._focus_area_source = focus_area_source
        self._adjacency = adjacency
        self._save_use_case = SaveProgramUseCase(program_repo, numbering, self._ids)
        self._load_use_case = LoadProgramUseCase(program_repo, numbering, self._ids)
        self._add_routine_use_case = AddRoutineUseCase(routine_catalog, self._ids)

        self._document = document or new_program(self._ids)
        self._reserve_ids(self._document)
        self._clipboard: Optional[DayClipboard] = None
        self._step = EditorStep.DETAILS
        self._dirty = False
        self.last_error: Optional[str] = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def document(self) -> ProgramDocument:
        return self._document

    @property
    def step(self) -> EditorStep:
        return self._step

    @property
    def dirty(self) -> bool:
        """True when the document has edits that were not saved."""
        return self._dirty

    def _reserve_ids(self, document: ProgramDocument) -> None:
        self._ids.reserve([*document.week_ids, *document.item_ids, *document.superset_ids])

    def _apply(self, result: MutationResult[ProgramDocument]) -> MutationResult[ProgramDocument]:
        if result.success:
            self._document = result.value
            self._dirty = True
            self.last_error = None
        else:
            self.last_error = result.error.message
        return result

    # -------------------------------------------------------------------------
    # Details
    # -------------------------------------------------------------------------

    def _update_details(self, **changes: Any) -> MutationResult[ProgramDocument]:
        try:
            document = ProgramDocument(**{**dict(self._document), **changes})
        except ValidationError as e:
            return self._apply(MutationResult.fail(MutationErrorCode.INVALID_ARGUMENT, str(e)))
        return self._apply(MutationResult.ok(document))

    def set_title(self, title: str) -> MutationResult[ProgramDocument]:
        return self._update_details(title=title)

    def set_description(self, description: str) -> MutationResult[ProgramDocument]:
        return self._update_details(description=description)

    def set_focus_area(self, value: Optional[str]) -> MutationResult[ProgramDocument]:
        """Choose a preset by name or store any other text as a custom focus area."""
        value = (value or "").strip()
        return self._update_details(focus_area=FocusArea.from_value(value) if value else None)

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def advance(self) -> StepTransition:
        """Move to the next step. Leaving the details step requires valid details."""
        if self._step == EditorStep.DETAILS:
            errors = validate_details(self._document)
            if errors:
                logger.warning(f"Blocked step transition: {errors}")
                return StepTransition(success=False, step=self._step, validation_errors=errors)

        index = _STEPS.index(self._step)
        if index == len(_STEPS) - 1:
            return StepTransition(success=False, step=self._step)
        self._step = _STEPS[index + 1]
        return StepTransition(success=True, step=self._step)

    def go_back(self) -> StepTransition:
        index = _STEPS.index(self._step)
        if index == 0:
            return StepTransition(success=False, step=self._step)
        self._step = _STEPS[index - 1]
        return StepTransition(success=True, step=self._step)

    # -------------------------------------------------------------------------
    # Weeks
    # -------------------------------------------------------------------------

    def add_week(self) -> MutationResult[ProgramDocument]:
        return self._apply(add_week(self._document, self._ids))

    def remove_week(self, week_index: int) -> MutationResult[ProgramDocument]:
        return self._apply(remove_week(self._document, week_index))

    def duplicate_week(self, week_index: int) -> MutationResult[ProgramDocument]:
        return self._apply(duplicate_week(self._document, week_index, self._ids))

    def set_duration(self, weeks: int) -> MutationResult[ProgramDocument]:
        return self._apply(set_week_duration(self._document, weeks, self._ids))

    def reorder_weeks(self, week_ids: Sequence[str]) -> MutationResult[ProgramDocument]:
        return self._apply(reorder_weeks(self._document, week_ids))

    def rename_week(self, week_index: int, name: str) -> MutationResult[ProgramDocument]:
        return self._apply(rename_week(self._document, week_index, name))

    def toggle_week_collapsed(self, week_index: int) -> MutationResult[ProgramDocument]:
        return self._apply(toggle_week_collapsed(self._document, week_index))

    def toggle_all_collapsed(self) -> MutationResult[ProgramDocument]:
        """Expand every week when all are collapsed, otherwise collapse them all."""
        all_collapsed = all(week.collapsed for week in self._document.weeks)
        return self._apply(set_all_weeks_collapsed(self._document, not all_collapsed))

    # -------------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------------

    def add_item(self, week_index: int, weekday: Weekday, item: Item) -> MutationResult[ProgramDocument]:
        return self._apply(add_item_at(self._document, week_index, weekday, item))

    def add_exercise(
        self, week_index: int, weekday: Weekday, title: str, **fields: Any
    ) -> MutationResult[ProgramDocument]:
        try:
            item = new_exercise(self._ids, title, **fields)
        except ValidationError as e:
            return self._apply(MutationResult.fail(MutationErrorCode.INVALID_ARGUMENT, str(e)))
        return self.add_item(week_index, weekday, item)

    def add_video(
        self, week_index: int, weekday: Weekday, descriptor: VideoDescriptor
    ) -> MutationResult[ProgramDocument]:
        return self.add_item(week_index, weekday, new_video_reference(self._ids, descriptor))

    def add_routine(
        self, week_index: int, weekday: Weekday, routine: Routine
    ) -> MutationResult[ProgramDocument]:
        """Add a reference to an already fetched routine."""
        return self.add_item(week_index, weekday, new_routine_reference(self._ids, routine))

    def edit_item(
        self, week_index: int, weekday: Weekday, item_id: str, patch: Mapping[str, Any]
    ) -> MutationResult[ProgramDocument]:
        return self._apply(edit_item_at(self._document, week_index, weekday, item_id, patch))

    def delete_item(self, week_index: int, weekday: Weekday, item_id: str) -> MutationResult[ProgramDocument]:
        return self._apply(delete_item_at(self._document, week_index, weekday, item_id))

    def reorder_items(
        self, week_index: int, weekday: Weekday, item_ids: Sequence[str]
    ) -> MutationResult[ProgramDocument]:
        return self._apply(
            reorder_items_at(self._document, week_index, weekday, item_ids, self._adjacency)
        )

    def clear_day(self, week_index: int, weekday: Weekday) -> MutationResult[ProgramDocument]:
        return self._apply(clear_day(self._document, week_index, weekday))

    # -------------------------------------------------------------------------
    # Day transfers
    # -------------------------------------------------------------------------

    @property
    def clipboard(self) -> Optional[DayClipboard]:
        """Days copied or cut in this session, if any."""
        return self._clipboard

    def move_item(
        self, week_index: int, from_day: Weekday, to_day: Weekday, item_id: str
    ) -> MutationResult[ProgramDocument]:
        return self._apply(move_item(self._document, week_index, from_day, to_day, item_id))

    def copy_days(self, week_index: int, weekdays: Sequence[Weekday]) -> MutationResult[DayClipboard]:
        result = copy_days(self._document, week_index, weekdays)
        if result.success:
            self._clipboard = result.value
            self.last_error = None
        else:
            self.last_error = result.error.message
        return result

    def cut_days(self, week_index: int, weekdays: Sequence[Weekday]) -> MutationResult[ProgramDocument]:
        """Copy the days to the clipboard and empty them."""
        result = cut_days(self._document, week_index, weekdays)
        if not result.success:
            return self._apply(MutationResult(success=False, error=result.error))
        clipboard, document = result.value
        self._clipboard = clipboard
        return self._apply(MutationResult.ok(document))

    def paste_days(self, week_index: int, start: Weekday) -> MutationResult[ProgramDocument]:
        """Paste the clipboard onto consecutive days beginning at ``start``."""
        if self._clipboard is None:
            return self._apply(
                MutationResult.fail(MutationErrorCode.INVALID_ARGUMENT, "Clipboard is empty")
            )
        return self._apply(paste_days(self._document, week_index, start, self._clipboard, self._ids))

    # -------------------------------------------------------------------------
    # Supersets
    # -------------------------------------------------------------------------

    def link(
        self, week_index: int, weekday: Weekday, item_a: str, item_b: str
    ) -> MutationResult[ProgramDocument]:
        return self._apply(link_at(self._document, week_index, weekday, item_a, item_b, self._ids))

    def unlink(self, week_index: int, weekday: Weekday, item_id: str) -> MutationResult[ProgramDocument]:
        return self._apply(unlink_at(self._document, week_index, weekday, item_id))

    def describe_superset(
        self, week_index: int, weekday: Weekday, group_id: str, text: str
    ) -> MutationResult[ProgramDocument]:
        return self._apply(describe_superset_at(self._document, week_index, weekday, group_id, text))

    def superset_groups(self, week_index: int, weekday: Weekday) -> List[SupersetGroup]:
        week = self._document.week(week_index)
        if week is None:
            return []
        return superset_groups(week.day(weekday))

    # -------------------------------------------------------------------------
    # Collaborators
    # -------------------------------------------------------------------------

    # Lookups never raise: a failing collaborator yields an empty list and
    # its message in ``last_error``, the same contract as save and open.

    async def list_routines(self) -> List[Routine]:
        try:
            routines = await self._routine_catalog.list()
        except CollaboratorError as e:
            return self._lookup_failed("routine catalog", e)
        self.last_error = None
        return routines

    async def search_videos(self, query: str) -> List[VideoDescriptor]:
        try:
            videos = await self._video_source.search(query)
        except CollaboratorError as e:
            return self._lookup_failed("video library", e)
        self.last_error = None
        return videos

    async def list_focus_areas(self) -> List[FocusAreaTag]:
        try:
            tags = await self._focus_area_source.list_focus_areas()
        except (CollaboratorError, PersistenceFailure) as e:
            return self._lookup_failed("focus areas", e)
        self.last_error = None
        return tags

    def _lookup_failed(self, source: str, error: Exception) -> list:
        logger.warning(f"Lookup against {source} failed: {error}")
        self.last_error = str(error)
        return []

    async def add_routine_by_id(
        self, week_index: int, weekday: Weekday, routine_id: str
    ) -> AddRoutineResult:
        """Look the routine up in the catalog and add a reference to it."""
        snapshot = self._document
        result = await self._add_routine_use_case.execute(snapshot, week_index, weekday, routine_id)
        return self._adopt_routine_result(result, snapshot, week_index, weekday)

    async def create_routine_and_add(
        self,
        week_index: int,
        weekday: Weekday,
        name: str,
        description: str,
        exercises: List[RoutineExercise],
    ) -> AddRoutineResult:
        """Author a routine inline, store it in the catalog and reference it."""
        snapshot = self._document
        result = await self._add_routine_use_case.create_and_add(
            snapshot, week_index, weekday, name, description, exercises
        )
        return self._adopt_routine_result(result, snapshot, week_index, weekday)

    def _adopt_routine_result(
        self,
        result: AddRoutineResult,
        snapshot: ProgramDocument,
        week_index: int,
        weekday: Weekday,
    ) -> AddRoutineResult:
        if not result.success:
            self.last_error = result.error
            return result
        if self._document is snapshot:
            self._apply(MutationResult.ok(result.document))
            return result
        # Edited while the catalog call was pending: place on the current document
        placed = self.add_routine(week_index, weekday, result.routine)
        if not placed.success:
            return AddRoutineResult(success=False, routine=result.routine, error=placed.error.message)
        return AddRoutineResult(success=True, document=placed.value, routine=result.routine)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    async def save(self) -> SaveProgramResult:
        """
        Save the current document.

        On success the document is replaced by the server's canonical copy,
        unless it was edited while the save was pending; then the local
        edits are kept and only the assigned id is adopted. On failure or
        cancellation the document is left untouched.
        """
        snapshot = self._document
        result = await self._save_use_case.execute(snapshot)
        if not result.success:
            self.last_error = result.error
            return result

        self.last_error = None
        self._reserve_ids(result.document)
        if self._document is snapshot:
            self._document = result.document
            self._dirty = False
        else:
            logger.info(f"Document changed during save, keeping local edits for {result.program_id}")
            self._document = self._document.with_id(result.program_id)
        return result

    async def open(self, program_id: str) -> LoadProgramResult:
        """Replace the session's document with a stored program."""
        result = await self._load_use_case.execute(program_id)
        if not result.success:
            self.last_error = result.error
            return result

        self._reserve_ids(result.document)
        self._document = result.document
        self._dirty = False
        self._step = EditorStep.DETAILS
        self._clipboard = None
        self.last_error = None
        return result
