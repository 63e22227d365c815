"""
Fake Collaborator Implementations for Testing.

This package provides in-memory fake implementations of the editor's
ports for fast, isolated testing. No network access required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection through ``fail_with`` where a collaborator can fail

Usage:
    from tests.fakes import FakeProgramRepository, create_routine_catalog

    repo = FakeProgramRepository()
    catalog = create_routine_catalog()
"""
from tests.fakes.focus_area_source import FakeFocusAreaSource
from tests.fakes.program_repository import FakeProgramRepository
from tests.fakes.routine_catalog import FakeRoutineCatalog
from tests.fakes.video_source import FakeVideoSource

from domain.models import FocusAreaTag, Routine, RoutineExercise, VideoDescriptor


# =============================================================================
# Factory Functions
# =============================================================================


def create_routine_catalog() -> FakeRoutineCatalog:
    """Create a catalog holding the "Warmup A" routine with three exercises."""
    catalog = FakeRoutineCatalog()
    catalog.seed(
        [
            Routine(
                id="routine-warmup-a",
                name="Warmup A",
                description="General warmup",
                exercises=[
                    RoutineExercise(title="Arm Circles", reps=10),
                    RoutineExercise(title="Band Pull Aparts", sets=2, reps=15),
                    RoutineExercise(title="Med Ball Rotations", sets=2, reps=8),
                ],
            )
        ]
    )
    return catalog


def create_video_source() -> FakeVideoSource:
    videos = FakeVideoSource()
    videos.seed(
        [
            VideoDescriptor(
                id="vid-1",
                title="Hip Lead Drill",
                description="Leading with the hips",
                duration="4:12",
                url="https://videos.example.com/vid-1.mp4",
                thumbnail="https://videos.example.com/vid-1.jpg",
            ),
            VideoDescriptor(id="vid-2", title="Connection Ball"),
        ]
    )
    return videos


def create_focus_area_source() -> FakeFocusAreaSource:
    source = FakeFocusAreaSource()
    source.seed([FocusAreaTag(name="Drive", count=4), FocusAreaTag(name="Footwork", count=1)])
    return source


__all__ = [
    "FakeProgramRepository",
    "FakeRoutineCatalog",
    "FakeVideoSource",
    "FakeFocusAreaSource",
    "create_routine_catalog",
    "create_video_source",
    "create_focus_area_source",
]
