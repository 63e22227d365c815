"""
Moving items between days and copying whole days within a week.

``move_item`` relocates one item to another day of the same week.
``copy_days`` takes a snapshot of one or more days into a DayClipboard,
``cut_days`` does the same and empties the source days, and ``paste_days``
writes a clipboard back onto consecutive days starting at a target day.
Pasted items always get fresh item ids and fresh superset group ids, the
same way a duplicated week does.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from domain.ids import IdGenerator
from domain.models import WEEKDAYS, Day, Item, ProgramDocument, Weekday
from domain.mutations.days import copy_items, replace_week
from domain.mutations.result import MutationErrorCode, MutationResult
from domain.mutations.supersets import unlink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayClipboard:
    """
    Copied day contents, in editor display order.

    ``days`` holds one item tuple per copied day. The items keep their
    original ids; fresh ids are assigned when the clipboard is pasted.
    """

    weekdays: Tuple[Weekday, ...]
    days: Tuple[Tuple[Item, ...], ...]

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def item_count(self) -> int:
        return sum(len(items) for items in self.days)


def _missing_week(index: int) -> MutationResult:
    logger.warning(f"Day transfer on missing week index {index}")
    return MutationResult.fail(MutationErrorCode.NOT_FOUND, f"No week at index {index}")


def move_item(
    doc: ProgramDocument,
    week_index: int,
    from_day: Weekday,
    to_day: Weekday,
    item_id: str,
) -> MutationResult[ProgramDocument]:
    """
    Move an item to the end of another day in the same week.

    A superset cannot span days, so the item's group is dissolved first
    and every former member stays behind ungrouped. Moving to the same
    day is a successful no-op.
    """
    week = doc.week(week_index)
    if week is None:
        return _missing_week(week_index)

    source = week.day(from_day)
    item = source.find(item_id)
    if item is None:
        logger.warning(f"Cannot move missing item {item_id} from {from_day.value}")
        return MutationResult.fail(MutationErrorCode.NOT_FOUND, f"Item {item_id} not found")
    if from_day == to_day:
        return MutationResult.ok(doc)

    source = unlink(source, item_id).value
    moved = source.find(item_id)
    source = source.with_items([existing for existing in source.items if existing.id != item_id])
    target = week.day(to_day)
    target = target.with_items([*target.items, moved])

    return replace_week(doc, week_index, week.with_day(source).with_day(target))


def copy_days(
    doc: ProgramDocument, week_index: int, weekdays: Sequence[Weekday]
) -> MutationResult[DayClipboard]:
    """
    Snapshot the items of ``weekdays`` in one week.

    The clipboard lists the days in display order whatever order they were
    selected in. Empty days are copied too, so pasting them clears targets.
    """
    week = doc.week(week_index)
    if week is None:
        return _missing_week(week_index)
    if not weekdays:
        return MutationResult.fail(MutationErrorCode.INVALID_ARGUMENT, "No days selected")

    chosen = set(weekdays)
    selected = [weekday for weekday in WEEKDAYS if weekday in chosen]
    return MutationResult.ok(
        DayClipboard(
            weekdays=tuple(selected),
            days=tuple(tuple(week.day(weekday).items) for weekday in selected),
        )
    )


def cut_days(
    doc: ProgramDocument, week_index: int, weekdays: Sequence[Weekday]
) -> MutationResult[Tuple[DayClipboard, ProgramDocument]]:
    """Copy ``weekdays`` and leave them empty. Returns the clipboard and the new document."""
    copied = copy_days(doc, week_index, weekdays)
    if not copied.success:
        return MutationResult(success=False, error=copied.error)

    clipboard = copied.value
    week = doc.week(week_index)
    for weekday in clipboard.weekdays:
        week = week.with_day(Day(weekday=weekday))

    cleared = replace_week(doc, week_index, week)
    if not cleared.success:
        return MutationResult(success=False, error=cleared.error)
    return MutationResult.ok((clipboard, cleared.value))


def paste_days(
    doc: ProgramDocument,
    week_index: int,
    start: Weekday,
    clipboard: DayClipboard,
    ids: IdGenerator,
) -> MutationResult[ProgramDocument]:
    """
    Replace consecutive days, beginning at ``start``, with the clipboard's days.

    Days are filled in display order. A paste that would run past the last
    day of the week is refused as a whole.
    """
    week = doc.week(week_index)
    if week is None:
        return _missing_week(week_index)
    if clipboard.day_count == 0:
        return MutationResult.fail(MutationErrorCode.INVALID_ARGUMENT, "Clipboard is empty")

    first = WEEKDAYS.index(start)
    targets = WEEKDAYS[first:first + clipboard.day_count]
    if len(targets) < clipboard.day_count:
        logger.warning(
            f"Paste of {clipboard.day_count} day(s) at {start.value} overflows the week"
        )
        return MutationResult.fail(
            MutationErrorCode.INVALID_ARGUMENT,
            f"Cannot paste {clipboard.day_count} day(s) starting on {start.label}",
        )

    group_ids: Dict[str, str] = {}
    for weekday, items in zip(targets, clipboard.days):
        week = week.with_day(Day(weekday=weekday, items=copy_items(items, ids, group_ids)))

    logger.info(f"Pasted {clipboard.item_count} item(s) into {len(targets)} day(s) of week {week_index + 1}")
    return replace_week(doc, week_index, week)
