"""
Week-level mutations.

Every function takes the current ProgramDocument and returns a
MutationResult holding a new document. After any structural change, week
positions are renumbered 1..N, weeks that still carry their default
"Week K" name are renamed to match, and ``duration`` is resynchronized to
the week count.
"""

import logging
from typing import Dict, List, Optional, Sequence

from domain.ids import IdGenerator
from domain.models import (
    WEEKDAYS,
    Day,
    FocusArea,
    ProgramDocument,
    Week,
    default_week_name,
)
from domain.mutations.days import copy_items, rebuild_program, replace_week
from domain.mutations.ordering import is_permutation
from domain.mutations.result import MutationErrorCode, MutationResult

logger = logging.getLogger(__name__)


def _renumber(weeks: Sequence[Week]) -> List[Week]:
    renumbered = []
    for index, week in enumerate(weeks):
        position = index + 1
        update: Dict[str, object] = {"position": position}
        if week.has_default_name:
            update["name"] = default_week_name(position)
        renumbered.append(week.model_copy(update=update))
    return renumbered


def _missing_week(index: int) -> MutationResult[ProgramDocument]:
    logger.warning(f"Week mutation on missing week index {index}")
    return MutationResult.fail(MutationErrorCode.NOT_FOUND, f"No week at index {index}")


def new_program(
    ids: IdGenerator,
    duration: int = 1,
    title: str = "",
    description: str = "",
    focus_area: Optional[FocusArea] = None,
) -> ProgramDocument:
    """
    Create a fresh document with ``duration`` empty weeks.

    Raises:
        ValueError: If ``duration`` is less than 1.
    """
    if duration < 1:
        raise ValueError("duration must be at least 1")
    weeks = [Week.empty(ids.new_id("week"), position) for position in range(1, duration + 1)]
    return ProgramDocument(
        title=title,
        description=description,
        focus_area=focus_area,
        weeks=weeks,
        duration=duration,
    )


def add_week(doc: ProgramDocument, ids: IdGenerator) -> MutationResult[ProgramDocument]:
    """Append an empty week named after its position."""
    week = Week.empty(ids.new_id("week"), len(doc.weeks) + 1)
    return rebuild_program(doc, [*doc.weeks, week])


def remove_week(doc: ProgramDocument, index: int) -> MutationResult[ProgramDocument]:
    """
    Remove the week at ``index``.

    Fails with NOT_FOUND for a stale index and LAST_WEEK when it is the
    only week left.
    """
    if doc.week(index) is None:
        return _missing_week(index)
    if len(doc.weeks) == 1:
        logger.warning("Refusing to remove the last remaining week")
        return MutationResult.fail(
            MutationErrorCode.LAST_WEEK, "A program must have at least one week"
        )

    weeks = [week for i, week in enumerate(doc.weeks) if i != index]
    return rebuild_program(doc, _renumber(weeks))


def duplicate_week(
    doc: ProgramDocument, index: int, ids: IdGenerator
) -> MutationResult[ProgramDocument]:
    """
    Append a deep copy of the week at ``index``.

    Every copied item gets a fresh id. Superset groups get fresh group ids
    too, so the copy's groups are independent of the source week's.
    """
    source = doc.week(index)
    if source is None:
        return _missing_week(index)

    group_ids: Dict[str, str] = {}
    days = {
        weekday: Day(weekday=weekday, items=copy_items(source.day(weekday).items, ids, group_ids))
        for weekday in WEEKDAYS
    }

    position = len(doc.weeks) + 1
    duplicate = Week.empty(ids.new_id("week"), position).model_copy(update={"days": days})
    return rebuild_program(doc, [*doc.weeks, duplicate])


def set_week_duration(
    doc: ProgramDocument, n: int, ids: IdGenerator
) -> MutationResult[ProgramDocument]:
    """
    Resize the document to exactly ``n`` weeks.

    Growing appends empty weeks. Shrinking truncates the tail, and the
    dropped weeks' items are discarded.
    """
    if n < 1:
        logger.warning(f"Rejected week duration {n}")
        return MutationResult.fail(
            MutationErrorCode.INVALID_ARGUMENT, "Duration must be at least 1 week"
        )

    weeks = list(doc.weeks[:n])
    while len(weeks) < n:
        weeks.append(Week.empty(ids.new_id("week"), len(weeks) + 1))
    return rebuild_program(doc, weeks)


def reorder_weeks(
    doc: ProgramDocument, week_ids: Sequence[str]
) -> MutationResult[ProgramDocument]:
    """Reorder weeks to match ``week_ids``, which must be a permutation of the current ids."""
    if not is_permutation(doc.week_ids, week_ids):
        logger.warning(f"Invalid week permutation: {list(week_ids)}")
        return MutationResult.fail(
            MutationErrorCode.INVALID_PERMUTATION,
            "Week ids do not match the program's weeks",
        )

    by_id = {week.id: week for week in doc.weeks}
    weeks = [by_id[week_id] for week_id in week_ids]
    return rebuild_program(doc, _renumber(weeks))


def rename_week(
    doc: ProgramDocument, index: int, name: str
) -> MutationResult[ProgramDocument]:
    """Rename a week. A blank name restores the default 'Week N' name."""
    week = doc.week(index)
    if week is None:
        return _missing_week(index)

    name = name.strip() or default_week_name(week.position)
    if len(name) > 200:
        return MutationResult.fail(
            MutationErrorCode.INVALID_ARGUMENT, "Week name must be at most 200 characters"
        )
    return replace_week(doc, index, week.model_copy(update={"name": name}))


def toggle_week_collapsed(doc: ProgramDocument, index: int) -> MutationResult[ProgramDocument]:
    week = doc.week(index)
    if week is None:
        return _missing_week(index)
    return replace_week(doc, index, week.model_copy(update={"collapsed": not week.collapsed}))


def set_all_weeks_collapsed(
    doc: ProgramDocument, collapsed: bool
) -> MutationResult[ProgramDocument]:
    weeks = [week.model_copy(update={"collapsed": collapsed}) for week in doc.weeks]
    return rebuild_program(doc, weeks)
