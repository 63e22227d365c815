"""
Domain layer for the program editor.

Pure models, mutation functions and converters. Nothing in this package
performs I/O.
"""

from domain.models import (
    Day,
    ExerciseItem,
    FocusArea,
    Item,
    ItemKind,
    ProgramDocument,
    RestItem,
    RoutineItem,
    VideoItem,
    Week,
    Weekday,
)

__all__ = [
    "Day",
    "ExerciseItem",
    "FocusArea",
    "Item",
    "ItemKind",
    "ProgramDocument",
    "RestItem",
    "RoutineItem",
    "VideoItem",
    "Week",
    "Weekday",
]
