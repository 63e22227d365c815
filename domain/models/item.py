"""
Item variants - the atomic unit of training content inside a Day.

Items form a closed union discriminated by ``kind``:

- EXERCISE: a prescribed exercise (sets, reps, tempo, free-form duration)
- VIDEO: a snapshot of a video library descriptor, copied at insertion time
- ROUTINE: a pointer to a catalog Routine plus a name/description snapshot
- REST: a rest marker, synthesized at save time for days without content

A routine item is never expanded into the routine's exercises inside a
document. It is resolved only when the routine itself is displayed or edited.
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class ItemKind(str, Enum):
    """Closed set of item kinds."""

    EXERCISE = "exercise"
    VIDEO = "video"
    ROUTINE = "routine"
    REST = "rest"


class ItemBase(BaseModel):
    """
    Fields shared by every item kind.

    Superset membership is tracked with a group identifier shared by all
    members of the group and a 1-based position inside that group.
    """

    id: str = Field(..., min_length=1, description="Identifier, unique per document")
    title: str = Field(..., min_length=1, max_length=200, description="Display title")
    description: Optional[str] = Field(default=None, max_length=2000)
    notes: Optional[str] = Field(default=None, max_length=2000)

    superset_id: Optional[str] = Field(
        default=None, description="Superset group identifier shared by all members"
    )
    superset_order: Optional[int] = Field(
        default=None, ge=1, description="1-based position within the superset group"
    )
    superset_description: Optional[str] = Field(
        default=None,
        description="Group-level instructions, kept on the first member of the group",
    )

    @property
    def in_superset(self) -> bool:
        """Check if this item belongs to a superset group."""
        return self.superset_id is not None

    @property
    def is_rest(self) -> bool:
        """Check if this item is a rest marker."""
        return getattr(self, "kind", None) == ItemKind.REST

    def with_superset(self, group_id: str, order: int) -> "ItemBase":
        """Return a copy that belongs to ``group_id`` at position ``order``."""
        return self.model_copy(update={"superset_id": group_id, "superset_order": order})

    def without_superset(self) -> "ItemBase":
        """Return a copy with every superset field cleared."""
        return self.model_copy(
            update={
                "superset_id": None,
                "superset_order": None,
                "superset_description": None,
            }
        )

    model_config = {"frozen": True}


class ExerciseItem(ItemBase):
    """
    A prescribed exercise.

    Examples:
        >>> item = ExerciseItem(id="item-1", title="Tee Work", sets=3, reps=10, tempo="2-0-2")
        >>> str(item)
        'Tee Work 3x10'
    """

    kind: Literal["exercise"] = "exercise"
    sets: Optional[int] = Field(default=None, ge=1, description="Number of sets")
    reps: Optional[int] = Field(default=None, ge=1, description="Reps per set")
    tempo: Optional[str] = Field(default=None, description="Tempo notation, e.g. '2-0-2'")
    duration: Optional[str] = Field(
        default=None, description="Free-form duration text, e.g. '10 min'"
    )

    def __str__(self) -> str:
        parts = [self.title]
        if self.sets and self.reps:
            parts.append(f"{self.sets}x{self.reps}")
        elif self.reps:
            parts.append(f"{self.reps} reps")
        if self.duration:
            parts.append(self.duration)
        return " ".join(parts)


class VideoItem(ItemBase):
    """A video reference. All video fields are a snapshot, not a live link."""

    kind: Literal["video"] = "video"
    video_id: str = Field(..., min_length=1, description="External video identifier")
    video_title: Optional[str] = None
    video_thumbnail: Optional[str] = None
    video_url: Optional[str] = None
    duration: Optional[str] = None


class RoutineItem(ItemBase):
    """A reference to a Routine in the catalog."""

    kind: Literal["routine"] = "routine"
    routine_id: str = Field(..., min_length=1, description="Referenced routine identifier")
    routine_name: str = Field(..., min_length=1, description="Routine name at insertion time")
    routine_description: Optional[str] = Field(
        default=None, description="Routine description at insertion time"
    )


class RestItem(ItemBase):
    """A rest marker."""

    kind: Literal["rest"] = "rest"


Item = Annotated[
    Union[ExerciseItem, VideoItem, RoutineItem, RestItem],
    Field(discriminator="kind"),
]

ITEM_TYPES = {
    ItemKind.EXERCISE: ExerciseItem,
    ItemKind.VIDEO: VideoItem,
    ItemKind.ROUTINE: RoutineItem,
    ItemKind.REST: RestItem,
}

_item_adapter: TypeAdapter = TypeAdapter(Item)
_item_list_adapter: TypeAdapter = TypeAdapter(List[Item])


def parse_item(data: dict) -> Item:
    """
    Validate a dict into the matching Item variant.

    Raises:
        pydantic.ValidationError: If the payload does not match any variant.
    """
    return _item_adapter.validate_python(data)


def parse_items(data: list) -> List[Item]:
    """Validate a list of dicts into Item variants."""
    return _item_list_adapter.validate_python(data)
