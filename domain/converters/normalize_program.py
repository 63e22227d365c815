"""
Converter: ProgramDocument to the persisted wire format.

Runs once, at save time, over a complete document:

1. A day without authored items gets a single synthetic rest drill.
2. Otherwise rest markers are dropped and drills are numbered 1..N in
   list order. Item payload fields pass through unchanged.
3. Weekdays become day numbers through ``domain.converters.weekdays``.
4. ``duration`` is recomputed from the week list.

The input document is never modified.
"""

import logging
from typing import List

from domain.converters.weekdays import DayNumbering, day_number, weekdays_in_day_order
from domain.models import (
    Day,
    ExerciseItem,
    Item,
    ItemKind,
    ProgramDocument,
    RestItem,
    RoutineItem,
    VideoItem,
    Week,
    WireDay,
    WireDrill,
    WireProgram,
    WireWeek,
)

logger = logging.getLogger(__name__)

REST_DAY_TITLE = "Rest Day"
REST_DAY_DESCRIPTION = "Recovery and rest day"
REST_DRILL_DESCRIPTION = "Take this day to recover and rest. No specific exercises required."
REST_DRILL_NOTES = "This is an automatically generated rest day."


def rest_drill() -> WireDrill:
    """The synthetic drill stored for a day with no authored content."""
    return WireDrill(
        order=1,
        title=REST_DAY_TITLE,
        type=ItemKind.REST.value,
        description=REST_DRILL_DESCRIPTION,
        notes=REST_DRILL_NOTES,
    )


def item_to_drill(item: Item, order: int) -> WireDrill:
    """
    Convert one item to a drill at position ``order``.

    Raises:
        TypeError: If ``item`` is not a known Item variant.
    """
    if isinstance(item, ExerciseItem):
        payload = {
            "sets": item.sets,
            "reps": item.reps,
            "tempo": item.tempo,
            "duration": item.duration,
        }
    elif isinstance(item, VideoItem):
        payload = {
            "duration": item.duration,
            "video_id": item.video_id,
            "video_title": item.video_title,
            "video_thumbnail": item.video_thumbnail,
            "video_url": item.video_url,
        }
    elif isinstance(item, RoutineItem):
        payload = {"routine_id": item.routine_id}
    elif isinstance(item, RestItem):
        payload = {}
    else:
        raise TypeError(f"Unsupported item type: {type(item).__name__}")

    return WireDrill(
        id=item.id,
        order=order,
        title=item.title,
        type=item.kind,
        description=item.description,
        notes=item.notes,
        superset_id=item.superset_id,
        superset_order=item.superset_order,
        superset_description=item.superset_description,
        **payload,
    )


def normalize_day(day: Day, numbering: DayNumbering = DayNumbering.MONDAY_FIRST) -> WireDay:
    """Convert one Day, synthesizing a rest drill when it has no authored items."""
    number = day_number(day.weekday, numbering)
    authored = day.authored_items
    if not authored:
        return WireDay(
            day_number=number,
            title=REST_DAY_TITLE,
            description=REST_DAY_DESCRIPTION,
            is_rest_day=True,
            drills=[rest_drill()],
        )

    return WireDay(
        day_number=number,
        title=day.weekday.label,
        is_rest_day=False,
        drills=[item_to_drill(item, order) for order, item in enumerate(authored, start=1)],
    )


def normalize_week(week: Week, numbering: DayNumbering = DayNumbering.MONDAY_FIRST) -> WireWeek:
    """Convert one Week, emitting days in ascending day-number order."""
    return WireWeek(
        id=week.id,
        week_number=week.position,
        title=week.name,
        days=[normalize_day(week.day(weekday), numbering) for weekday in weekdays_in_day_order(numbering)],
    )


def normalize_program(
    doc: ProgramDocument, numbering: DayNumbering = DayNumbering.MONDAY_FIRST
) -> WireProgram:
    """
    Convert a document to the flat wire format sent to the program API.

    Args:
        doc: A structurally valid document. Scalar fields are expected to
            have been checked with ``domain.validation.validate_details``.
        numbering: Day-number convention of the target store.

    Returns:
        WireProgram ready for ``to_payload()``.
    """
    weeks: List[WireWeek] = [normalize_week(week, numbering) for week in doc.weeks]
    rest_days = sum(1 for week in weeks for day in week.days if day.is_rest_day)
    logger.info(
        f"Normalized program '{doc.title}': {len(weeks)} weeks, {rest_days} rest days"
    )
    return WireProgram(
        id=doc.id,
        title=doc.title,
        description=doc.description or None,
        level=doc.focus_area.value if doc.focus_area else None,
        duration=len(weeks),
        weeks=weeks,
    )
