"""
Mutation engine for program documents.

All operations are pure: they take a document (or a Day) and return a
MutationResult holding a new instance. Recoverable failures such as a
stale index or a bad permutation are returned, never raised.

Usage:
    >>> from domain.ids import SequentialIdGenerator
    >>> from domain.models import Weekday
    >>> from domain.mutations import add_item_at, new_exercise, new_program
    >>> ids = SequentialIdGenerator()
    >>> doc = new_program(ids, duration=1, title="Speed Block")
    >>> item = new_exercise(ids, "Tee Work", sets=3, reps=10, tempo="2-0-2")
    >>> result = add_item_at(doc, 0, Weekday.MON, item)
    >>> result.success
    True
"""

from domain.mutations.days import apply_to_day, clear_day
from domain.mutations.items import (
    add_item,
    add_item_at,
    delete_item,
    delete_item_at,
    edit_item,
    edit_item_at,
    new_exercise,
    new_routine_reference,
    new_video_reference,
    reorder_items,
    reorder_items_at,
)
from domain.mutations.ordering import is_permutation
from domain.mutations.result import (
    ErrorCategory,
    MutationError,
    MutationErrorCode,
    MutationResult,
)
from domain.mutations.supersets import (
    SupersetAdjacency,
    SupersetGroup,
    cluster_supersets,
    describe_superset,
    describe_superset_at,
    link,
    link_at,
    superset_groups,
    unlink,
    unlink_at,
)
from domain.mutations.transfers import DayClipboard, copy_days, cut_days, move_item, paste_days
from domain.mutations.weeks import (
    add_week,
    duplicate_week,
    new_program,
    remove_week,
    rename_week,
    reorder_weeks,
    set_all_weeks_collapsed,
    set_week_duration,
    toggle_week_collapsed,
)

__all__ = [
    # Results
    "MutationResult",
    "MutationError",
    "MutationErrorCode",
    "ErrorCategory",
    # Weeks
    "new_program",
    "add_week",
    "remove_week",
    "duplicate_week",
    "set_week_duration",
    "reorder_weeks",
    "rename_week",
    "toggle_week_collapsed",
    "set_all_weeks_collapsed",
    # Items
    "new_exercise",
    "new_video_reference",
    "new_routine_reference",
    "add_item",
    "edit_item",
    "delete_item",
    "reorder_items",
    "add_item_at",
    "edit_item_at",
    "delete_item_at",
    "reorder_items_at",
    "apply_to_day",
    "clear_day",
    "is_permutation",
    # Day transfers
    "DayClipboard",
    "move_item",
    "copy_days",
    "cut_days",
    "paste_days",
    # Supersets
    "SupersetAdjacency",
    "SupersetGroup",
    "link",
    "unlink",
    "describe_superset",
    "superset_groups",
    "cluster_supersets",
    "link_at",
    "unlink_at",
    "describe_superset_at",
]
