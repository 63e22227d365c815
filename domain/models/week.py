"""
Week entity - a named collection of exactly seven Days.
"""

import re
from typing import Dict

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.models.day import WEEKDAYS, Day, Weekday

_DEFAULT_NAME = re.compile(r"^Week \d+$")


def default_week_name(position: int) -> str:
    """Name given to a week that was never renamed, e.g. 'Week 3'."""
    return f"Week {position}"


def is_default_week_name(name: str) -> bool:
    """Check if ``name`` is an auto-generated 'Week N' name."""
    return bool(_DEFAULT_NAME.match(name))


class Week(BaseModel):
    """
    A week within a program document.

    ``days`` always holds all seven weekdays; the validator rejects any
    other shape. ``collapsed`` is editor display state only.
    """

    id: str = Field(..., min_length=1)
    position: int = Field(..., ge=1, description="1-based position in the program")
    name: str = Field(..., min_length=1, max_length=200)
    days: Dict[Weekday, Day]
    collapsed: bool = False

    @field_validator("days")
    @classmethod
    def validate_days(cls, v: Dict[Weekday, Day]) -> Dict[Weekday, Day]:
        """Ensure exactly seven days keyed by their own weekday."""
        if set(v) != set(WEEKDAYS):
            missing = sorted(wd.value for wd in set(WEEKDAYS) - set(v))
            raise ValueError(f"Week must contain all seven days (missing: {missing})")
        for weekday, day in v.items():
            if day.weekday != weekday:
                raise ValueError(
                    f"Day keyed '{weekday.value}' has weekday '{day.weekday.value}'"
                )
        return {weekday: v[weekday] for weekday in WEEKDAYS}

    @model_validator(mode="after")
    def validate_unique_items(self) -> "Week":
        """Ensure item ids are unique across the week."""
        ids = [item_id for day in self.days.values() for item_id in day.item_ids]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate item ids in week '{self.name}'")
        return self

    @classmethod
    def empty(cls, week_id: str, position: int, name: str = "") -> "Week":
        """Build a week with seven empty days."""
        return cls(
            id=week_id,
            position=position,
            name=name or default_week_name(position),
            days={weekday: Day(weekday=weekday) for weekday in WEEKDAYS},
        )

    @property
    def item_count(self) -> int:
        """Number of items across all seven days."""
        return sum(len(day.items) for day in self.days.values())

    @property
    def has_default_name(self) -> bool:
        return is_default_week_name(self.name)

    def day(self, weekday: Weekday) -> Day:
        return self.days[weekday]

    def with_day(self, day: Day) -> "Week":
        """Return a copy with ``day`` replacing the day of the same weekday."""
        return self.model_copy(update={"days": {**self.days, day.weekday: day}})

    def __str__(self) -> str:
        return f"Week({self.position}: {self.name!r}, {self.item_count} items)"

    model_config = {"frozen": True}
