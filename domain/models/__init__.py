"""
Domain models for the program editor.

This package contains pure domain models that are independent of
infrastructure concerns (HTTP, persistence, external catalogs).

These models represent the core concepts:
- ProgramDocument: The aggregate root, an ordered list of Weeks
- Week: Exactly seven Days keyed by Weekday
- Day: An ordered list of Items
- Item: Exercise, video reference, routine reference or rest marker
- Routine / VideoDescriptor: Read models of external collaborators
- Wire*: The persisted program format

Usage:
    >>> from domain.ids import SequentialIdGenerator
    >>> from domain.mutations import new_program
    >>> doc = new_program(SequentialIdGenerator(), duration=2)
    >>> [week.name for week in doc.weeks]
    ['Week 1', 'Week 2']
"""

from domain.models.day import WEEKDAYS, Day, Weekday
from domain.models.item import (
    ITEM_TYPES,
    ExerciseItem,
    Item,
    ItemKind,
    RestItem,
    RoutineItem,
    VideoItem,
    parse_item,
    parse_items,
)
from domain.models.program import FocusArea, FocusAreaPreset, FocusAreaTag, ProgramDocument
from domain.models.routine import Routine, RoutineExercise
from domain.models.video import VideoDescriptor
from domain.models.week import Week, default_week_name, is_default_week_name
from domain.models.wire import WireDay, WireDrill, WireProgram, WireWeek

__all__ = [
    # Main entities
    "ProgramDocument",
    "Week",
    "Day",
    "Item",
    "ExerciseItem",
    "VideoItem",
    "RoutineItem",
    "RestItem",
    "FocusArea",
    "FocusAreaTag",
    "Routine",
    "RoutineExercise",
    "VideoDescriptor",
    # Wire format
    "WireProgram",
    "WireWeek",
    "WireDay",
    "WireDrill",
    # Enums
    "ItemKind",
    "Weekday",
    "FocusAreaPreset",
    # Helpers
    "WEEKDAYS",
    "ITEM_TYPES",
    "parse_item",
    "parse_items",
    "default_week_name",
    "is_default_week_name",
]
