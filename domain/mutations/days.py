"""
Document-level addressing of Days.

Item and superset operations are pure functions over a single Day. The
helpers here locate a Day by ``(week_index, weekday)`` inside a document,
run a Day operation on it, and splice the result back into a new document.
"""

import logging
from typing import Callable, Dict, List, Sequence

from pydantic import ValidationError

from domain.ids import IdGenerator
from domain.models import Day, Item, ProgramDocument, Week, Weekday
from domain.mutations.result import MutationErrorCode, MutationResult

logger = logging.getLogger(__name__)

DayOperation = Callable[[Day], MutationResult[Day]]


def rebuild_program(doc: ProgramDocument, weeks: List[Week]) -> MutationResult[ProgramDocument]:
    """
    Return a validated copy of ``doc`` holding ``weeks``.

    The duration is always resynchronized to the week count, so every
    structural edit goes through here. A copy that breaks a document
    invariant (for example a repeated item or week id) is reported as
    INVALID_ARGUMENT and ``doc`` is left as it was.
    """
    data = dict(doc)
    data.update(weeks=list(weeks), duration=len(weeks))
    try:
        return MutationResult.ok(ProgramDocument(**data))
    except ValidationError as e:
        logger.warning(f"Rejected structural edit: {e.error_count()} validation error(s)")
        return MutationResult.fail(
            MutationErrorCode.INVALID_ARGUMENT,
            f"Edit would produce an invalid program: {e.errors()[0]['msg']}",
        )


def replace_week(
    doc: ProgramDocument, index: int, week: Week
) -> MutationResult[ProgramDocument]:
    weeks = list(doc.weeks)
    weeks[index] = week
    return rebuild_program(doc, weeks)


def apply_to_day(
    doc: ProgramDocument,
    week_index: int,
    weekday: Weekday,
    operation: DayOperation,
) -> MutationResult[ProgramDocument]:
    """
    Run ``operation`` on one Day of ``doc``.

    Returns:
        The updated document, NOT_FOUND for a stale week index, or the
        operation's own failure. On failure ``doc`` is untouched.
    """
    week = doc.week(week_index)
    if week is None:
        logger.warning(f"Day operation on missing week index {week_index}")
        return MutationResult.fail(
            MutationErrorCode.NOT_FOUND, f"No week at index {week_index}"
        )

    result = operation(week.day(weekday))
    if not result.success:
        return MutationResult(success=False, error=result.error)

    return replace_week(doc, week_index, week.with_day(result.value))


def clear_day(
    doc: ProgramDocument, week_index: int, weekday: Weekday
) -> MutationResult[ProgramDocument]:
    """Remove every item from one Day, leaving it a rest day."""
    return apply_to_day(
        doc, week_index, weekday, lambda day: MutationResult.ok(day.with_items([]))
    )


def copy_items(
    items: Sequence[Item], ids: IdGenerator, group_ids: Dict[str, str]
) -> List[Item]:
    """
    Deep-copy ``items`` with fresh item ids.

    Superset groups are remapped through ``group_ids`` (filled as new groups
    are met), so copies never share a group with their originals.
    """
    copies = []
    for item in items:
        update: Dict[str, object] = {"id": ids.new_id("item")}
        if item.superset_id is not None:
            if item.superset_id not in group_ids:
                group_ids[item.superset_id] = ids.new_id("superset")
            update["superset_id"] = group_ids[item.superset_id]
        copies.append(item.model_copy(update=update, deep=True))
    return copies
