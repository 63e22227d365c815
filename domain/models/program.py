"""
ProgramDocument aggregate root - the editable training program tree.

A document is an ordered list of Weeks plus scalar metadata. Documents are
immutable: mutation functions in ``domain.mutations`` return new instances.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from domain.models.day import Weekday
from domain.models.item import Item
from domain.models.week import Week


class FocusAreaPreset(str, Enum):
    """Built-in focus-area tags."""

    DRIVE = "Drive"
    WHIP = "Whip"
    SEPARATION = "Separation"
    STABILITY = "Stability"
    EXTENSION = "Extension"


class FocusArea(BaseModel):
    """
    A program's focus-area tag: one of the presets or a custom value.

    Custom values are stored verbatim.

    Examples:
        >>> FocusArea.preset(FocusAreaPreset.DRIVE).value
        'Drive'
        >>> FocusArea.from_value("Footwork").is_custom
        True
    """

    value: str = Field(..., min_length=1, max_length=100)
    is_custom: bool = False

    @model_validator(mode="after")
    def validate_preset(self) -> "FocusArea":
        """Non-custom focus areas must name a preset."""
        if not self.is_custom and self.value not in _PRESET_VALUES:
            raise ValueError(f"Unknown focus area preset: {self.value}")
        return self

    @classmethod
    def preset(cls, preset: FocusAreaPreset) -> "FocusArea":
        return cls(value=preset.value)

    @classmethod
    def custom(cls, value: str) -> "FocusArea":
        return cls(value=value, is_custom=True)

    @classmethod
    def from_value(cls, value: str) -> "FocusArea":
        """Build a preset when ``value`` names one, a custom tag otherwise."""
        if value in _PRESET_VALUES:
            return cls(value=value)
        return cls.custom(value)

    def __str__(self) -> str:
        return self.value

    model_config = {"frozen": True}


_PRESET_VALUES = frozenset(preset.value for preset in FocusAreaPreset)


class FocusAreaTag(BaseModel):
    """A focus-area tag with the number of programs using it."""

    name: str
    count: int = Field(default=0, ge=0)


class ProgramDocument(BaseModel):
    """
    Aggregate root for an editable training program.

    Invariants checked on construction:
    - at least one week
    - ``duration == len(weeks)``
    - week positions are 1..N in list order
    - week ids and item ids are unique across the document

    Scalar fields (title, focus area) may be incomplete while editing; they
    are checked by ``domain.validation.validate_details`` before a step
    transition or a save.
    """

    # Identity
    id: Optional[str] = Field(
        default=None, description="Persisted identifier. None for unsaved programs."
    )

    # Details
    title: str = Field(default="", max_length=200)
    description: str = Field(default="", max_length=2000)
    focus_area: Optional[FocusArea] = None

    # Structure
    weeks: List[Week] = Field(..., min_length=1)
    duration: int = Field(..., ge=1, description="Program length in weeks")

    @model_validator(mode="after")
    def validate_structure(self) -> "ProgramDocument":
        """Check the structural invariants of the tree."""
        if self.duration != len(self.weeks):
            raise ValueError(
                f"duration ({self.duration}) must equal the number of weeks ({len(self.weeks)})"
            )
        for index, week in enumerate(self.weeks):
            if week.position != index + 1:
                raise ValueError(
                    f"Week '{week.id}' has position {week.position}, expected {index + 1}"
                )
        week_ids = [week.id for week in self.weeks]
        if len(week_ids) != len(set(week_ids)):
            raise ValueError("Duplicate week ids")
        item_ids = self.item_ids
        if len(item_ids) != len(set(item_ids)):
            raise ValueError("Duplicate item ids")
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def week_count(self) -> int:
        return len(self.weeks)

    @property
    def week_ids(self) -> List[str]:
        return [week.id for week in self.weeks]

    @property
    def item_ids(self) -> List[str]:
        """All item ids, week by week, day by day."""
        return [
            item.id
            for week in self.weeks
            for day in week.days.values()
            for item in day.items
        ]

    @property
    def superset_ids(self) -> List[str]:
        """Distinct superset group ids, in document order."""
        seen: Dict[str, None] = {}
        for week in self.weeks:
            for day in week.days.values():
                for item in day.items:
                    if item.superset_id is not None:
                        seen.setdefault(item.superset_id)
        return list(seen)

    @property
    def total_items(self) -> int:
        return sum(week.item_count for week in self.weeks)

    @property
    def is_new(self) -> bool:
        """Check if this document has not been saved yet."""
        return self.id is None

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def week(self, index: int) -> Optional[Week]:
        """Return the week at 0-based ``index``, or None when out of range."""
        if 0 <= index < len(self.weeks):
            return self.weeks[index]
        return None

    def find_item(self, item_id: str) -> Optional[Tuple[int, Weekday, Item]]:
        """
        Locate an item anywhere in the document.

        Returns:
            (week index, weekday, item) or None if not found.
        """
        for index, week in enumerate(self.weeks):
            for weekday, day in week.days.items():
                item = day.find(item_id)
                if item is not None:
                    return index, weekday, item
        return None

    def items_by_kind(self) -> Dict[str, int]:
        """Count items per kind, e.g. {'exercise': 4, 'routine': 1}."""
        counts: Dict[str, int] = {}
        for week in self.weeks:
            for day in week.days.values():
                for item in day.items:
                    counts[item.kind] = counts.get(item.kind, 0) + 1
        return counts

    # -------------------------------------------------------------------------
    # Domain Methods (return new instances for immutability)
    # -------------------------------------------------------------------------

    def with_id(self, program_id: str) -> "ProgramDocument":
        return self.model_copy(update={"id": program_id})

    def with_title(self, title: str) -> "ProgramDocument":
        return self.model_copy(update={"title": title})

    def with_description(self, description: str) -> "ProgramDocument":
        return self.model_copy(update={"description": description})

    def with_focus_area(self, focus_area: Optional[FocusArea]) -> "ProgramDocument":
        return self.model_copy(update={"focus_area": focus_area})

    def __str__(self) -> str:
        parts = [f'"{self.title or "Untitled"}"', f"{self.duration} weeks"]
        parts.append(f"{self.total_items} items")
        if self.focus_area:
            parts.append(f"[{self.focus_area}]")
        return f"ProgramDocument({', '.join(parts)})"
