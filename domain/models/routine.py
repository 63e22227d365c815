"""
Routine - a reusable, externally owned template of exercises.

Routines live in the routine catalog. A program document never owns a
routine; it only stores a RoutineItem pointing at one.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class RoutineExercise(BaseModel):
    """An exercise-shaped template inside a routine."""

    id: Optional[str] = None
    title: str = Field(..., min_length=1, max_length=200)
    type: str = Field(default="exercise", description="Template kind as stored by the catalog")
    description: Optional[str] = None
    notes: Optional[str] = None
    sets: Optional[int] = Field(default=None, ge=1)
    reps: Optional[int] = Field(default=None, ge=1)
    tempo: Optional[str] = None
    duration: Optional[str] = None
    video_id: Optional[str] = Field(default=None, alias="videoId")
    video_title: Optional[str] = Field(default=None, alias="videoTitle")
    video_thumbnail: Optional[str] = Field(default=None, alias="videoThumbnail")
    video_url: Optional[str] = Field(default=None, alias="videoUrl")

    model_config = {"frozen": True, "populate_by_name": True}


class Routine(BaseModel):
    """
    A named routine from the catalog.

    Examples:
        >>> routine = Routine(
        ...     id="r1",
        ...     name="Warmup A",
        ...     exercises=[RoutineExercise(title="Arm Circles", reps=10)],
        ... )
        >>> routine.exercise_count
        1
    """

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    exercises: List[RoutineExercise] = Field(default_factory=list)

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    def __str__(self) -> str:
        return f"Routine({self.name!r}, {self.exercise_count} exercises)"

    model_config = {"frozen": True}
