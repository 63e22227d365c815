"""
Converter: persisted wire format to ProgramDocument.

Reverses the normalization pass when a stored program is opened for
editing or when the program API returns its canonical copy after a save.
Stored data is not always clean, so hydration is lenient:

- legacy drill types ("drill", "superset", missing) become exercises
- video drills without a video id and routine drills without a routine
  id fall back to exercises
- rest markers (synthetic or typed) are stripped
- missing or duplicate ids are replaced with fresh ones
- superset groups left with fewer than two members are dissolved
- day numbers outside 1..7 are skipped, repeated day numbers are merged
- a program without weeks gets one empty week
- text longer than the editor allows is truncated, and an overlong
  focus-area tag is cut to its limit

Ids found in the payload are reserved on the generator before any fresh
id is drawn, so generated ids never collide with stored ones.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional, Set, Union

from domain.converters.normalize_program import REST_DAY_TITLE, REST_DRILL_NOTES
from domain.converters.weekdays import DayNumbering, weekday_for
from domain.ids import IdGenerator, default_id_generator
from domain.models import (
    WEEKDAYS,
    Day,
    ExerciseItem,
    FocusArea,
    Item,
    ItemKind,
    ProgramDocument,
    RoutineItem,
    VideoItem,
    Week,
    Weekday,
    WireDrill,
    WireProgram,
    WireWeek,
    default_week_name,
)

logger = logging.getLogger(__name__)

UNTITLED_ITEM = "Untitled"

# Field limits of the document models
TITLE_LIMIT = 200
TEXT_LIMIT = 2000
FOCUS_AREA_LIMIT = 100

# Drill types written by older editors
_EXERCISE_ALIASES = {None, "", "exercise", "drill", "superset"}


def _positive(value: Optional[int]) -> Optional[int]:
    return value if value is not None and value >= 1 else None


def _clamp(value: Optional[str], limit: int, label: str) -> Optional[str]:
    """Truncate legacy text that exceeds a model limit."""
    if value is None or len(value) <= limit:
        return value
    logger.warning(f"Truncating {label} from {len(value)} to {limit} characters")
    return value[:limit]


def _payload_ids(wire: WireProgram) -> List[str]:
    ids = [week.id for week in wire.weeks if week.id]
    for week in wire.weeks:
        for day in week.days:
            ids.extend(drill.id for drill in day.drills if drill.id)
            ids.extend(drill.superset_id for drill in day.drills if drill.superset_id)
    return ids


def _is_rest_marker(drill: WireDrill) -> bool:
    if drill.type == ItemKind.REST.value:
        return True
    return drill.title == REST_DAY_TITLE and drill.notes == REST_DRILL_NOTES


def _drill_to_item(drill: WireDrill, item_id: str) -> Item:
    """Map one drill onto the closed item union."""
    kind = (drill.type or "").lower()
    common: Dict[str, Any] = {
        "id": item_id,
        "title": _clamp(
            drill.title.strip() or drill.video_title or UNTITLED_ITEM, TITLE_LIMIT, f"title of drill {item_id}"
        ),
        "description": _clamp(drill.description, TEXT_LIMIT, f"description of drill {item_id}"),
        "notes": _clamp(drill.notes, TEXT_LIMIT, f"notes of drill {item_id}"),
        "superset_id": drill.superset_id,
        "superset_order": _positive(drill.superset_order),
        "superset_description": drill.superset_description,
    }

    if kind == ItemKind.VIDEO.value and drill.video_id:
        return VideoItem(
            **common,
            video_id=drill.video_id,
            video_title=drill.video_title,
            video_thumbnail=drill.video_thumbnail,
            video_url=drill.video_url,
            duration=drill.duration,
        )

    if kind == ItemKind.ROUTINE.value and drill.routine_id:
        return RoutineItem(
            **common,
            routine_id=drill.routine_id,
            routine_name=common["title"],
            routine_description=common["description"],
        )

    if kind not in _EXERCISE_ALIASES:
        logger.warning(f"Drill {item_id} has type '{drill.type}', treating as exercise")

    return ExerciseItem(
        **common,
        sets=_positive(drill.sets),
        reps=_positive(drill.reps),
        tempo=drill.tempo,
        duration=drill.duration,
    )


def _clean_supersets(items: List[Item]) -> List[Item]:
    """Dissolve groups with fewer than two members and resequence orders 1..k."""
    sizes = Counter(item.superset_id for item in items if item.superset_id is not None)

    positions: Dict[str, Dict[str, int]] = {}
    for group_id in sizes:
        members = [
            (item.superset_order or len(items) + index, index, item.id)
            for index, item in enumerate(items)
            if item.superset_id == group_id
        ]
        positions[group_id] = {
            item_id: order for order, (_, _, item_id) in enumerate(sorted(members), start=1)
        }

    cleaned = []
    for item in items:
        if item.superset_id is None:
            cleaned.append(item)
        elif sizes[item.superset_id] < 2:
            logger.warning(f"Dropping single-member superset {item.superset_id} on item {item.id}")
            cleaned.append(item.without_superset())
        else:
            cleaned.append(
                item.with_superset(item.superset_id, positions[item.superset_id][item.id])
            )
    return cleaned


def _hydrate_week(
    wire_week: WireWeek,
    position: int,
    numbering: DayNumbering,
    ids: IdGenerator,
    seen_item_ids: Set[str],
    seen_week_ids: Set[str],
) -> Week:
    items_by_day: Dict[Weekday, List[Item]] = {weekday: [] for weekday in WEEKDAYS}

    for wire_day in sorted(wire_week.days, key=lambda d: d.day_number):
        try:
            weekday = weekday_for(wire_day.day_number, numbering)
        except ValueError:
            logger.warning(
                f"Skipping day {wire_day.day_number} in week {wire_week.week_number}: invalid day number"
            )
            continue

        for drill in sorted(wire_day.drills, key=lambda d: d.order):
            if _is_rest_marker(drill):
                continue
            item_id = drill.id
            if not item_id or item_id in seen_item_ids:
                item_id = ids.new_id("item")
            seen_item_ids.add(item_id)
            items_by_day[weekday].append(_drill_to_item(drill, item_id))

    week_id = wire_week.id
    if not week_id or week_id in seen_week_ids:
        week_id = ids.new_id("week")
    seen_week_ids.add(week_id)

    return Week(
        id=week_id,
        position=position,
        name=_clamp(
            wire_week.title.strip() or default_week_name(position), TITLE_LIMIT, f"name of week {position}"
        ),
        days={
            weekday: Day(weekday=weekday, items=_clean_supersets(items))
            for weekday, items in items_by_day.items()
        },
    )


def hydrate_program(
    wire: Union[WireProgram, Dict[str, Any]],
    numbering: DayNumbering = DayNumbering.MONDAY_FIRST,
    ids: Optional[IdGenerator] = None,
) -> ProgramDocument:
    """
    Build an editable document from a stored program.

    Args:
        wire: WireProgram or its camelCase/snake_case dict form
        numbering: Day-number convention the program was stored with
        ids: Generator for ids missing from the payload

    Returns:
        ProgramDocument whose duration equals its week count.

    Raises:
        pydantic.ValidationError: If ``wire`` is a dict that is not a program.
    """
    if not isinstance(wire, WireProgram):
        wire = WireProgram.model_validate(wire)
    ids = ids or default_id_generator()
    ids.reserve(_payload_ids(wire))

    seen_item_ids: Set[str] = set()
    seen_week_ids: Set[str] = set()
    weeks = [
        _hydrate_week(wire_week, position, numbering, ids, seen_item_ids, seen_week_ids)
        for position, wire_week in enumerate(
            sorted(wire.weeks, key=lambda w: w.week_number), start=1
        )
    ]
    if not weeks:
        logger.warning(f"Program {wire.id} has no weeks, creating an empty week")
        weeks = [Week.empty(ids.new_id("week"), 1)]

    if wire.duration != len(weeks):
        logger.warning(
            f"Program {wire.id} duration {wire.duration} does not match {len(weeks)} weeks"
        )

    return ProgramDocument(
        id=wire.id,
        title=_clamp(wire.title, TITLE_LIMIT, "program title"),
        description=_clamp(wire.description or "", TEXT_LIMIT, "program description"),
        focus_area=(
            FocusArea.from_value(_clamp(wire.level, FOCUS_AREA_LIMIT, "focus area"))
            if wire.level
            else None
        ),
        weeks=weeks,
        duration=len(weeks),
    )
