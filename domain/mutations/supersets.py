"""
Superset coordinator.

A superset is a group of two or more items in one Day performed back to
back. Membership is stored on the items themselves: every member carries
the same ``superset_id`` and a 1-based ``superset_order``. Group-level
instructions live on the first member as ``superset_description``.

Rules:
- link(a, b) with neither grouped creates a new group with a=1, b=2
- link(a, b) with one side grouped appends the other at the next order
- link(a, b) across two different groups is refused (SUPERSET_CONFLICT)
- unlink(x) clears every member of x's group, never just x
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from domain.ids import IdGenerator
from domain.models import Day, Item, ProgramDocument, Weekday
from domain.mutations.days import apply_to_day
from domain.mutations.result import MutationErrorCode, MutationResult

logger = logging.getLogger(__name__)


class SupersetAdjacency(str, Enum):
    """
    Policy for superset members after a manual reorder.

    NONE keeps the list exactly as the user ordered it. CLUSTER pulls the
    members of each group next to the group's first member, in superset
    order.
    """

    NONE = "none"
    CLUSTER = "cluster"


@dataclass
class SupersetGroup:
    """Read view of one superset group."""

    group_id: str
    item_ids: List[str] = field(default_factory=list)
    description: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.item_ids)


def _members(items: Sequence[Item], group_id: str) -> List[Item]:
    members = [item for item in items if item.superset_id == group_id]
    return sorted(members, key=lambda item: item.superset_order or 0)


def superset_groups(day: Day) -> List[SupersetGroup]:
    """Groups in the Day, in order of their first member's list position."""
    groups: Dict[str, SupersetGroup] = {}
    for item in day.items:
        if item.superset_id is not None and item.superset_id not in groups:
            members = _members(day.items, item.superset_id)
            groups[item.superset_id] = SupersetGroup(
                group_id=item.superset_id,
                item_ids=[member.id for member in members],
                description=members[0].superset_description,
            )
    return list(groups.values())


def link(day: Day, item_a: str, item_b: str, ids: IdGenerator) -> MutationResult[Day]:
    """
    Put ``item_a`` and ``item_b`` in the same superset group.

    Examples:
        >>> result = link(day, "tee-work", "band-pulls", ids)
        >>> [(i.title, i.superset_order) for i in result.value.items]
        [('Tee Work', 1), ('Band Pulls', 2)]
    """
    a = day.find(item_a)
    b = day.find(item_b)
    if a is None or b is None:
        missing = item_a if a is None else item_b
        logger.warning(f"Cannot link missing item {missing} on {day.weekday.value}")
        return MutationResult.fail(MutationErrorCode.NOT_FOUND, f"Item {missing} not found")
    if a.id == b.id:
        return MutationResult.fail(
            MutationErrorCode.INVALID_ARGUMENT, "An item cannot be linked to itself"
        )
    if a.is_rest or b.is_rest:
        return MutationResult.fail(
            MutationErrorCode.INVALID_ARGUMENT, "Rest markers cannot join a superset"
        )

    if a.in_superset and b.in_superset:
        if a.superset_id == b.superset_id:
            return MutationResult.ok(day)
        logger.warning(f"Superset conflict linking {a.id} ({a.superset_id}) and {b.id} ({b.superset_id})")
        return MutationResult.fail(
            MutationErrorCode.SUPERSET_CONFLICT,
            "Both items already belong to different supersets",
        )

    if a.in_superset or b.in_superset:
        grouped, joining = (a, b) if a.in_superset else (b, a)
        group_id = grouped.superset_id
        next_order = max(member.superset_order or 0 for member in _members(day.items, group_id)) + 1
        updates = {joining.id: joining.with_superset(group_id, next_order)}
    else:
        group_id = ids.new_id("superset")
        updates = {
            a.id: a.with_superset(group_id, 1),
            b.id: b.with_superset(group_id, 2),
        }

    return MutationResult.ok(day.with_items([updates.get(item.id, item) for item in day.items]))


def unlink(day: Day, item_id: str) -> MutationResult[Day]:
    """
    Dissolve the superset group ``item_id`` belongs to.

    Every member is cleared, since a group left with one member is
    meaningless. Unlinking an ungrouped item is a successful no-op.
    """
    target = day.find(item_id)
    if target is None:
        logger.warning(f"Cannot unlink missing item {item_id} on {day.weekday.value}")
        return MutationResult.fail(MutationErrorCode.NOT_FOUND, f"Item {item_id} not found")
    if not target.in_superset:
        return MutationResult.ok(day)

    group_id = target.superset_id
    return MutationResult.ok(
        day.with_items(
            [item.without_superset() if item.superset_id == group_id else item for item in day.items]
        )
    )


def describe_superset(day: Day, group_id: str, text: str) -> MutationResult[Day]:
    """Set the group-level instructions, stored on the group's first member."""
    members = _members(day.items, group_id)
    if not members:
        return MutationResult.fail(
            MutationErrorCode.NOT_FOUND, f"Superset {group_id} not found"
        )

    first_id = members[0].id
    description = text.strip() or None
    items = []
    for item in day.items:
        if item.id == first_id:
            item = item.model_copy(update={"superset_description": description})
        elif item.superset_id == group_id and item.superset_description is not None:
            item = item.model_copy(update={"superset_description": None})
        items.append(item)
    return MutationResult.ok(day.with_items(items))


def cluster_supersets(items: Sequence[Item]) -> List[Item]:
    """
    Pull each group's members next to the group's first member.

    Non-members keep their relative order. Members follow superset order.
    """
    clustered: List[Item] = []
    emitted = set()
    for item in items:
        if item.superset_id is None:
            clustered.append(item)
        elif item.superset_id not in emitted:
            emitted.add(item.superset_id)
            clustered.extend(_members(items, item.superset_id))
    return clustered


# =============================================================================
# Document-addressed wrappers
# =============================================================================


def link_at(
    doc: ProgramDocument,
    week_index: int,
    weekday: Weekday,
    item_a: str,
    item_b: str,
    ids: IdGenerator,
) -> MutationResult[ProgramDocument]:
    return apply_to_day(doc, week_index, weekday, lambda day: link(day, item_a, item_b, ids))


def unlink_at(
    doc: ProgramDocument, week_index: int, weekday: Weekday, item_id: str
) -> MutationResult[ProgramDocument]:
    return apply_to_day(doc, week_index, weekday, lambda day: unlink(day, item_id))


def describe_superset_at(
    doc: ProgramDocument, week_index: int, weekday: Weekday, group_id: str, text: str
) -> MutationResult[ProgramDocument]:
    return apply_to_day(
        doc, week_index, weekday, lambda day: describe_superset(day, group_id, text)
    )
