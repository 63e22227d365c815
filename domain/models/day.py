"""
Day value object and the fixed set of weekday keys.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from domain.models.item import Item


class Weekday(str, Enum):
    """
    The seven weekday keys a Week is indexed by.

    Declaration order (Sunday first) is the editor's display order. Mapping a
    weekday to a persisted day number goes through
    ``domain.converters.weekdays`` only.
    """

    SUN = "sun"
    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"

    @property
    def label(self) -> str:
        """Full English name, e.g. 'Monday'."""
        return _LABELS[self]


_LABELS = {
    Weekday.SUN: "Sunday",
    Weekday.MON: "Monday",
    Weekday.TUE: "Tuesday",
    Weekday.WED: "Wednesday",
    Weekday.THU: "Thursday",
    Weekday.FRI: "Friday",
    Weekday.SAT: "Saturday",
}

WEEKDAYS: Tuple[Weekday, ...] = tuple(Weekday)


class Day(BaseModel):
    """
    An ordered sequence of Items for one weekday.

    List order is the display and execution order. Order numbers are only
    assigned at save time by the normalization pass.
    """

    weekday: Weekday
    items: List[Item] = Field(default_factory=list)

    @property
    def item_ids(self) -> List[str]:
        """Item identifiers in list order."""
        return [item.id for item in self.items]

    @property
    def authored_items(self) -> List[Item]:
        """Items excluding rest markers."""
        return [item for item in self.items if not item.is_rest]

    @property
    def is_rest_day(self) -> bool:
        """True when the day has no authored content."""
        return not self.authored_items

    def find(self, item_id: str) -> Optional[Item]:
        """Return the item with ``item_id`` or None."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def with_items(self, items: List[Item]) -> "Day":
        """Return a copy holding ``items``."""
        return self.model_copy(update={"items": list(items)})

    def __str__(self) -> str:
        if self.is_rest_day:
            return f"{self.weekday.label}: rest"
        return f"{self.weekday.label}: {', '.join(item.title for item in self.items)}"

    model_config = {"frozen": True}
