"""
Item-level mutations and item constructors.

Day operations are pure functions over a single Day returning a
MutationResult[Day]. The ``*_at`` variants address a Day inside a document
by ``(week_index, weekday)`` and additionally enforce document-wide item
id uniqueness.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from pydantic import ValidationError

from domain.ids import IdGenerator
from domain.models import (
    Day,
    ExerciseItem,
    Item,
    ProgramDocument,
    Routine,
    RoutineItem,
    VideoDescriptor,
    VideoItem,
    Weekday,
)
from domain.mutations.days import apply_to_day
from domain.mutations.ordering import is_permutation
from domain.mutations.result import MutationErrorCode, MutationResult
from domain.mutations.supersets import SupersetAdjacency, cluster_supersets, unlink

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = frozenset({"id", "kind"})
SUPERSET_FIELDS = frozenset({"superset_id", "superset_order", "superset_description"})


# =============================================================================
# Constructors
# =============================================================================


def new_exercise(
    ids: IdGenerator,
    title: str,
    sets: Optional[int] = None,
    reps: Optional[int] = None,
    tempo: Optional[str] = None,
    duration: Optional[str] = None,
    description: Optional[str] = None,
    notes: Optional[str] = None,
) -> ExerciseItem:
    return ExerciseItem(
        id=ids.new_id("item"),
        title=title,
        sets=sets,
        reps=reps,
        tempo=tempo,
        duration=duration,
        description=description,
        notes=notes,
    )


def new_video_reference(ids: IdGenerator, descriptor: VideoDescriptor) -> VideoItem:
    """Snapshot a library video into a new item. Later library edits are not reflected."""
    return VideoItem(
        id=ids.new_id("item"),
        title=descriptor.title,
        description=descriptor.description,
        duration=descriptor.duration,
        video_id=descriptor.id,
        video_title=descriptor.title,
        video_thumbnail=descriptor.thumbnail,
        video_url=descriptor.url,
    )


def new_routine_reference(ids: IdGenerator, routine: Routine) -> RoutineItem:
    """
    Build a reference to ``routine``.

    Only the routine's id, name and description are copied. Its exercises
    stay in the catalog.
    """
    return RoutineItem(
        id=ids.new_id("item"),
        title=routine.name,
        description=routine.description or None,
        routine_id=routine.id,
        routine_name=routine.name,
        routine_description=routine.description or None,
    )


# =============================================================================
# Day operations
# =============================================================================


def add_item(day: Day, item: Item) -> MutationResult[Day]:
    """
    Append ``item`` to the end of the Day.

    New items always start outside any superset. Grouping goes through
    ``link``, so incoming superset fields are cleared.
    """
    if item.in_superset:
        logger.info(f"Clearing superset fields of new item {item.id} ({item.superset_id})")
        item = item.without_superset()
    if day.find(item.id) is not None:
        return MutationResult.fail(
            MutationErrorCode.INVALID_ARGUMENT, f"Item {item.id} already exists"
        )
    return MutationResult.ok(day.with_items([*day.items, item]))


def edit_item(day: Day, item_id: str, patch: Mapping[str, Any]) -> MutationResult[Day]:
    """
    Merge ``patch`` into the item with ``item_id``.

    The item's id, kind and superset membership are preserved: patching
    ``id`` or ``kind`` is refused and superset fields are ignored (use the
    superset coordinator for those). The merged item is revalidated.
    """
    item = day.find(item_id)
    if item is None:
        logger.warning(f"Cannot edit missing item {item_id} on {day.weekday.value}")
        return MutationResult.fail(MutationErrorCode.NOT_FOUND, f"Item {item_id} not found")

    forbidden = IMMUTABLE_FIELDS.intersection(patch)
    if forbidden:
        return MutationResult.fail(
            MutationErrorCode.INVALID_ARGUMENT,
            f"Cannot change {', '.join(sorted(forbidden))} of an item",
        )

    item_type = type(item)
    changes: Dict[str, Any] = {k: v for k, v in patch.items() if k not in SUPERSET_FIELDS}
    unknown = set(changes) - set(item_type.model_fields)
    if unknown:
        return MutationResult.fail(
            MutationErrorCode.INVALID_ARGUMENT,
            f"Unknown field(s) for {item.kind} item: {', '.join(sorted(unknown))}",
        )

    try:
        edited = item_type.model_validate({**item.model_dump(), **changes})
    except ValidationError as e:
        logger.warning(f"Rejected patch for item {item_id}: {e}")
        return MutationResult.fail(MutationErrorCode.INVALID_ARGUMENT, str(e))

    return MutationResult.ok(
        day.with_items([edited if existing.id == item_id else existing for existing in day.items])
    )


def delete_item(day: Day, item_id: str) -> MutationResult[Day]:
    """Remove an item, dissolving its superset group first."""
    unlinked = unlink(day, item_id)
    if not unlinked.success:
        return unlinked
    day = unlinked.value
    return MutationResult.ok(day.with_items([item for item in day.items if item.id != item_id]))


def reorder_items(
    day: Day,
    item_ids: Sequence[str],
    adjacency: SupersetAdjacency = SupersetAdjacency.NONE,
) -> MutationResult[Day]:
    """Replace the Day's order with ``item_ids``, an exact permutation of its item ids."""
    if not is_permutation(day.item_ids, item_ids):
        logger.warning(f"Invalid item permutation on {day.weekday.value}: {list(item_ids)}")
        return MutationResult.fail(
            MutationErrorCode.INVALID_PERMUTATION,
            f"Item ids do not match the items of {day.weekday.label}",
        )

    by_id = {item.id: item for item in day.items}
    items = [by_id[item_id] for item_id in item_ids]
    if adjacency == SupersetAdjacency.CLUSTER:
        items = cluster_supersets(items)
    return MutationResult.ok(day.with_items(items))


# =============================================================================
# Document-addressed wrappers
# =============================================================================


def add_item_at(
    doc: ProgramDocument, week_index: int, weekday: Weekday, item: Item
) -> MutationResult[ProgramDocument]:
    if doc.find_item(item.id) is not None:
        return MutationResult.fail(
            MutationErrorCode.INVALID_ARGUMENT, f"Item {item.id} already exists in the program"
        )
    return apply_to_day(doc, week_index, weekday, lambda day: add_item(day, item))


def edit_item_at(
    doc: ProgramDocument,
    week_index: int,
    weekday: Weekday,
    item_id: str,
    patch: Mapping[str, Any],
) -> MutationResult[ProgramDocument]:
    return apply_to_day(doc, week_index, weekday, lambda day: edit_item(day, item_id, patch))


def delete_item_at(
    doc: ProgramDocument, week_index: int, weekday: Weekday, item_id: str
) -> MutationResult[ProgramDocument]:
    return apply_to_day(doc, week_index, weekday, lambda day: delete_item(day, item_id))


def reorder_items_at(
    doc: ProgramDocument,
    week_index: int,
    weekday: Weekday,
    item_ids: Sequence[str],
    adjacency: SupersetAdjacency = SupersetAdjacency.NONE,
) -> MutationResult[ProgramDocument]:
    return apply_to_day(
        doc, week_index, weekday, lambda day: reorder_items(day, item_ids, adjacency)
    )
