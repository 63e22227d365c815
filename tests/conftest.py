"""
Shared fixtures for the program editor test suite.
"""

import pytest

from domain.ids import SequentialIdGenerator
from domain.models import ProgramDocument, Weekday
from domain.mutations import add_item_at, new_exercise, new_program
from tests.fakes import (
    FakeProgramRepository,
    create_focus_area_source,
    create_routine_catalog,
    create_video_source,
)


# =============================================================================
# Identity
# =============================================================================


@pytest.fixture
def ids() -> SequentialIdGenerator:
    """Deterministic id generator: week-1, item-1, superset-1, ..."""
    return SequentialIdGenerator()


# =============================================================================
# Documents
# =============================================================================


@pytest.fixture
def empty_program(ids) -> ProgramDocument:
    """Fresh one-week document with no details filled in."""
    return new_program(ids)


@pytest.fixture
def titled_program(ids) -> ProgramDocument:
    """One-week document with valid details and no items."""
    from domain.models import FocusArea, FocusAreaPreset

    return new_program(
        ids,
        title="Speed Block",
        description="Four weeks of bat speed work",
        focus_area=FocusArea.preset(FocusAreaPreset.DRIVE),
    )


@pytest.fixture
def monday_program(ids, titled_program) -> ProgramDocument:
    """Valid document with "Tee Work" and "Band Pulls" on week 1 / Monday."""
    doc = titled_program
    for item in (
        new_exercise(ids, "Tee Work", sets=3, reps=10, tempo="2-0-2"),
        new_exercise(ids, "Band Pulls", sets=2, reps=15),
    ):
        doc = add_item_at(doc, 0, Weekday.MON, item).value
    return doc


# =============================================================================
# Collaborators
# =============================================================================


@pytest.fixture
def program_repo() -> FakeProgramRepository:
    return FakeProgramRepository()


@pytest.fixture
def routine_catalog():
    return create_routine_catalog()


@pytest.fixture
def video_source():
    return create_video_source()


@pytest.fixture
def focus_area_source():
    return create_focus_area_source()
