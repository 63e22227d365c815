"""
Persistence wire format for programs.

This is the shape the program API accepts and returns: days carry a
numeric day number instead of a weekday key, items become ordered
"drills", and every day without content carries a synthesized rest drill.

Fields are snake_case in Python and camelCase on the wire. Both names are
accepted on input.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class WireDrill(BaseModel):
    """One ordered entry of a persisted day."""

    id: Optional[str] = None
    order: int = Field(..., ge=1, description="1-based position within the day")
    title: str
    description: Optional[str] = None
    duration: Optional[str] = None
    notes: Optional[str] = None
    type: Optional[str] = Field(
        default=None, description="exercise | video | routine | rest (or legacy aliases)"
    )
    sets: Optional[int] = None
    reps: Optional[int] = None
    tempo: Optional[str] = None
    video_url: Optional[str] = Field(default=None, alias="videoUrl")
    video_id: Optional[str] = Field(default=None, alias="videoId")
    video_title: Optional[str] = Field(default=None, alias="videoTitle")
    video_thumbnail: Optional[str] = Field(default=None, alias="videoThumbnail")
    routine_id: Optional[str] = Field(default=None, alias="routineId")
    superset_id: Optional[str] = Field(default=None, alias="supersetId")
    superset_order: Optional[int] = Field(default=None, alias="supersetOrder")
    superset_description: Optional[str] = Field(default=None, alias="supersetDescription")

    @field_validator(
        "id",
        "description",
        "duration",
        "notes",
        "type",
        "tempo",
        "video_url",
        "video_id",
        "video_title",
        "video_thumbnail",
        "routine_id",
        "superset_id",
        "superset_description",
        mode="before",
    )
    @classmethod
    def blank_strings_to_none(cls, v):
        return _blank_to_none(v)

    model_config = {"populate_by_name": True}


class WireDay(BaseModel):
    """A persisted day. ``is_rest_day`` is recomputed by the server."""

    day_number: int = Field(..., alias="dayNumber", description="1..7")
    title: str = ""
    description: Optional[str] = None
    is_rest_day: Optional[bool] = Field(default=None, alias="isRestDay")
    drills: List[WireDrill] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class WireWeek(BaseModel):
    """A persisted week."""

    id: Optional[str] = None
    week_number: int = Field(..., alias="weekNumber", ge=1)
    title: str = ""
    description: Optional[str] = None
    days: List[WireDay] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class WireProgram(BaseModel):
    """
    A persisted program.

    Examples:
        >>> program = WireProgram(title="Speed Block", duration=1, weeks=[])
        >>> program.to_payload()
        {'title': 'Speed Block', 'duration': 1, 'weeks': []}
    """

    id: Optional[str] = None
    title: str = ""
    description: Optional[str] = None
    level: Optional[str] = Field(default=None, description="Focus-area tag")
    duration: int = Field(default=1, ge=0)
    weeks: List[WireWeek] = Field(default_factory=list)

    @field_validator("id", "description", "level", mode="before")
    @classmethod
    def blank_strings_to_none(cls, v):
        return _blank_to_none(v)

    def to_payload(self) -> dict:
        """Serialize to the camelCase JSON body sent to the program API."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    model_config = {"populate_by_name": True}
